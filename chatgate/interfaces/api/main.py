"""
FastAPI Main Application - Gateway entry point.

Run with: uvicorn chatgate.interfaces.api.main:app --port 5024
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from chatgate import __version__
from chatgate.config import get_settings

from .deps import cleanup_services, init_services
from .middleware import (
    AccessLogMiddleware,
    ErrorHandlerMiddleware,
    request_validation_handler,
)
from .routes import chat, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting ChatGate API...")
    logger.info("  Provider timeout: %.0fs", settings.provider_timeout_seconds)

    await init_services()

    yield

    logger.info("Shutting down ChatGate API...")
    await cleanup_services()


def create_app() -> FastAPI:
    """Create FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ChatGate API",
        description="Uniform question/answer gateway in front of OpenAI and Google Gemini",
        version=__version__,
        lifespan=lifespan,
        debug=settings.api_debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Add middleware (order matters - first added = innermost)
    # 1. Error handling (catch exceptions from routes and dependencies)
    app.add_middleware(ErrorHandlerMiddleware)

    # 2. Access log (outermost - request ID visible to every inner layer)
    app.add_middleware(AccessLogMiddleware)

    app.include_router(health.router, tags=["Health"])
    app.include_router(chat.router, tags=["Chat"])

    return app


# Create app instance
app = create_app()
