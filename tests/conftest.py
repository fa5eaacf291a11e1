import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from src.api.dependencies import get_relay
from src.main import app
from src.relay.completion import CompletionRelay


@pytest.fixture
def fake_llm(mocker):
    """Chat model stand-in; ainvoke answers with a canned AIMessage"""
    llm = mocker.Mock()
    llm.ainvoke = mocker.AsyncMock(
        return_value=AIMessage(content="Drink water and rest."))
    return llm


@pytest.fixture
def relay(fake_llm):
    return CompletionRelay(fake_llm)


@pytest.fixture
def client(relay):
    """TestClient with the relay dependency replaced; lifespan is not run"""
    app.dependency_overrides[get_relay] = lambda: relay
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def clear_settings_cache():
    from src.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
