"""
API Middleware - Request/response processing.

Provides:
- Access logging with a per-request ID (echoed as X-Request-ID)
- Error handling that always answers with the response envelope
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chatgate.config.errors import ChatGateError, ErrorCode
from chatgate.domains.chat import ResponseEnvelope

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line when it completes."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        started = time.perf_counter()

        response = await call_next(request)

        response.headers["X-Request-ID"] = request.state.request_id
        logger.info(
            "%s %s -> %d in %.1fms [%s]",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            request.state.request_id,
        )
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convert escaped exceptions to failed response envelopes."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except ChatGateError as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.error(
                "ChatGateError: %s request_id=%s details=%s",
                e.message,
                request_id,
                e.details,
            )
            return JSONResponse(
                status_code=error_code_to_status(e.code),
                content=ResponseEnvelope.fail(e.message).model_dump(),
            )
        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception("Unhandled error: %s request_id=%s", str(e), request_id)
            return JSONResponse(
                status_code=500,
                content=ResponseEnvelope.fail("Internal server error").model_dump(),
            )


def error_code_to_status(code: ErrorCode) -> int:
    """Map error codes to HTTP status codes."""
    mapping = {
        # 400 Bad Request
        ErrorCode.VALIDATION_ERROR: 400,
        # 503 Service Unavailable
        ErrorCode.CONFIG_MISSING_API_KEY: 503,
    }
    return mapping.get(code, 500)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer undecodable or mistyped request bodies with a 400 envelope."""
    logger.info(
        "Rejected %s %s body: %d validation error(s)",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return JSONResponse(
        status_code=400,
        content=ResponseEnvelope.fail(INVALID_REQUEST_BODY).model_dump(),
    )
