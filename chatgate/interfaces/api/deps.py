"""
API Dependencies - Dependency injection for FastAPI routes.

Provides one process-scoped client per provider. A provider whose key is
missing raises ConfigurationError on every request while the other keeps
serving.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from chatgate.adapters import GeminiClient, OpenAIClient
from chatgate.config import ProviderKeySettings, get_settings
from chatgate.domains.chat import ChatGateway, ChatProvider

logger = logging.getLogger(__name__)


def _secret(provider: ProviderKeySettings) -> str | None:
    return provider.api_key.get_secret_value() if provider.api_key else None


@lru_cache
def get_openai_client() -> OpenAIClient:
    """Get OpenAI client singleton."""
    settings = get_settings()
    return OpenAIClient(_secret(settings.openai), timeout=settings.provider_timeout_seconds)


@lru_cache
def get_gemini_client() -> GeminiClient:
    """Get Gemini client singleton."""
    settings = get_settings()
    return GeminiClient(_secret(settings.gemini), timeout=settings.provider_timeout_seconds)


def get_openai_gateway(provider: ChatProvider = Depends(get_openai_client)) -> ChatGateway:
    return ChatGateway(provider)


def get_gemini_gateway(provider: ChatProvider = Depends(get_gemini_client)) -> ChatGateway:
    return ChatGateway(provider)


async def init_services() -> None:
    """
    Report provider configuration on startup.

    This should be called from the FastAPI lifespan handler.
    """
    settings = get_settings()
    for label, provider in (("OpenAI", settings.openai), ("Gemini", settings.gemini)):
        if provider.configured:
            logger.info("  %s: configured", label)
        else:
            logger.error("  %s: API key is not configured; its route will return 503", label)


async def cleanup_services() -> None:
    """Close provider clients that were created."""
    for factory in (get_openai_client, get_gemini_client):
        if factory.cache_info().currsize:
            await factory().close()
        factory.cache_clear()
