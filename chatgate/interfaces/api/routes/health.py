"""
Health Routes - System health and status endpoints.
"""

from typing import Any

from fastapi import APIRouter

from chatgate import __version__
from chatgate.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint with per-provider configuration flags."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "chatgate",
        "version": __version__,
        "providers": {
            "openai": settings.openai.configured,
            "gemini": settings.gemini.configured,
        },
    }
