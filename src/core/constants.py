from enum import Enum


class ChatModels(Enum):
    """Supported Groq chat model identifiers.

    One model is chosen per deployment through CHAT_MODEL and used for
    every request; it is never selected per request.
    """

    LLAMA3_3_70B = "llama-3.3-70b-versatile"
    LLAMA3_1_8B = "llama-3.1-8b-instant"
    GEMMA_2_9B = "gemma2-9b-it"


class AppSettings:
    """Central place for all application-level configuration"""

    CHAT_MODEL: ChatModels = ChatModels.LLAMA3_3_70B
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    DEFAULT_LANG: str = "en"


class Messages:
    """User-facing response strings"""

    REFUSAL = (
        "I'm sorry, I can only assist with health and wellness questions. "
        "I'm specialized in topics like symptoms, medical conditions, nutrition, "
        "fitness, mental health, medications, and general health concerns. "
        "Please ask me a health-related question!"
    )
    MISSING_INPUT = "userQuery is required."
    INVALID_BODY = "Invalid request body."
    PROVIDER_FAILED = "Failed to fetch response from AI."
    MALFORMED_RESPONSE = "Couldn't generate a proper response from AI."
    INTERNAL_ERROR = "Internal server error"
