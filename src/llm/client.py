from langchain_openai import ChatOpenAI

from src.core.config import Settings


class ProviderError(Exception):
    """Base exception for chat provider setup errors"""
    pass


class MissingCredentialError(ProviderError):
    """Raised when the provider API key is not configured"""
    pass


def build_chat_model(settings: Settings) -> ChatOpenAI:
    """
    Create the process-wide chat model handle.

    Groq exposes an OpenAI-compatible API, so the OpenAI chat model is
    pointed at the Groq base URL. Retries are disabled.
    """
    if not settings.has_api_key:
        raise MissingCredentialError(
            "GROQ_API_KEY is not set in the environment or .env file")

    return ChatOpenAI(**settings.chat_model_config)
