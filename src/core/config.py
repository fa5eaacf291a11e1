from functools import lru_cache
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, ChatModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    GROQ_API_KEY: SecretStr | None = None
    GROQ_BASE_URL: str = AppSettings.GROQ_BASE_URL
    CHAT_MODEL: ChatModels = AppSettings.CHAT_MODEL
    HOST: str = AppSettings.HOST
    PORT: int = AppSettings.PORT
    ENVIRONMENT: str = AppSettings.ENVIRONMENT
    LOG_LEVEL: str = AppSettings.LOG_LEVEL
    DEFAULT_LANG: str = AppSettings.DEFAULT_LANG
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("PORT", mode="before")
    @classmethod
    def blank_port_uses_default(cls, value):
        if isinstance(value, str) and not value.strip():
            return AppSettings.PORT
        return value

    @property
    def has_api_key(self) -> bool:
        return self.GROQ_API_KEY is not None and bool(
            self.GROQ_API_KEY.get_secret_value().strip())

    @property
    def chat_model_config(self) -> dict:
        # No retries: a provider failure is reported to the caller as-is
        return {
            "model": self.CHAT_MODEL.value,
            "base_url": self.GROQ_BASE_URL,
            "api_key": self.GROQ_API_KEY.get_secret_value() if self.GROQ_API_KEY else None,
            "max_retries": 0,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
