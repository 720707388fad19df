"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files. Provider keys use the
nested delimiter, so ``OPENAI__API_KEY`` fills ``openai.api_key``
(logical key ``OpenAI:ApiKey``) and ``GEMINI__API_KEY`` fills
``gemini.api_key`` (logical key ``Gemini:ApiKey``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderKeySettings(BaseModel):
    """Credentials for one upstream provider."""

    api_key: SecretStr | None = None

    model_config = {"frozen": True}

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_key.get_secret_value().strip())


class Settings(BaseSettings):
    """Application settings."""

    # Providers
    openai: ProviderKeySettings = ProviderKeySettings()
    gemini: ProviderKeySettings = ProviderKeySettings()
    provider_timeout_seconds: float = 60.0

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 5024
    api_debug: bool = False
    log_level: str = "INFO"

    # Console client
    gateway_url: str = "http://localhost:5024"
    gateway_timeout_seconds: float = 120.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
