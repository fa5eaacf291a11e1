import pytest

from src.core.constants import Messages


def test_chat_returns_generated_text(client, fake_llm):
    response = client.post(
        "/api/chat",
        json={"userQuery": "What should I do about a persistent headache?", "lang": "en"}
    )

    assert response.status_code == 200
    assert response.json() == {"text": "Drink water and rest."}
    fake_llm.ainvoke.assert_awaited_once()


def test_chat_missing_query(client, fake_llm):
    response = client.post("/api/chat", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "userQuery is required."}
    fake_llm.ainvoke.assert_not_awaited()


def test_chat_empty_query(client):
    response = client.post("/api/chat", json={"userQuery": "", "lang": "en"})

    assert response.status_code == 400
    assert response.json() == {"error": Messages.MISSING_INPUT}


def test_chat_off_topic_is_idempotent(client, fake_llm):
    bodies = [
        client.post("/api/chat", json={"userQuery": "what's the weather today"})
        for _ in range(3)
    ]

    for response in bodies:
        assert response.status_code == 200
        assert response.json() == {"text": Messages.REFUSAL}
    fake_llm.ainvoke.assert_not_awaited()


def test_chat_provider_failure_hides_details(client, fake_llm):
    fake_llm.ainvoke.side_effect = ConnectionError("upstream at 10.0.0.7 refused")

    response = client.post("/api/chat", json={"userQuery": "I have a bad cough"})

    assert response.status_code == 500
    assert response.json() == {"error": Messages.PROVIDER_FAILED}
    assert "10.0.0.7" not in response.text
    assert "ConnectionError" not in response.text


def test_chat_malformed_provider_response(client, fake_llm):
    fake_llm.ainvoke.return_value = None

    response = client.post("/api/chat", json={"userQuery": "I have a bad cough"})

    assert response.status_code == 500
    assert response.json() == {"error": Messages.MALFORMED_RESPONSE}


def test_chat_invalid_body(client):
    response = client.post("/api/chat", json={"userQuery": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.json() == {"error": Messages.INVALID_BODY}


def test_cors_allows_any_origin(client):
    response = client.options(
        "/api/chat",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_chat_without_body(client, fake_llm):
    response = client.post("/api/chat")

    assert response.status_code == 400
    assert response.json() == {"error": Messages.MISSING_INPUT}
    fake_llm.ainvoke.assert_not_awaited()


def test_chat_null_body(client):
    response = client.post(
        "/api/chat",
        content=b"null",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": Messages.MISSING_INPUT}


@pytest.mark.parametrize("value", [0, False, None])
def test_chat_falsy_query_values(client, value):
    response = client.post("/api/chat", json={"userQuery": value, "lang": "en"})

    assert response.status_code == 400
    assert response.json() == {"error": Messages.MISSING_INPUT}


@pytest.mark.parametrize("value", [1, True, {"text": "fever"}])
def test_chat_truthy_non_string_query(client, value):
    response = client.post("/api/chat", json={"userQuery": value})

    assert response.status_code == 400
    assert response.json() == {"error": Messages.INVALID_BODY}
