from fastapi import Request

from src.relay.completion import CompletionRelay


def get_relay(request: Request) -> CompletionRelay:
    """Process-wide relay created during application startup."""
    return request.app.state.relay
