"""
Error Taxonomy - Consistent error codes across the gateway.

Usage:
    from chatgate.config.errors import ErrorCode, ChatGateError

    raise ProviderStatusError("OpenAI API request failed with status: 500", status_code=500)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error handling."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Provider errors
    PROVIDER_STATUS_ERROR = "PROVIDER_STATUS_ERROR"
    PROVIDER_INVALID_RESPONSE = "PROVIDER_INVALID_RESPONSE"
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"

    # Configuration errors
    CONFIG_MISSING_API_KEY = "CONFIG_MISSING_API_KEY"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ChatGateError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to log-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class QuestionValidationError(ChatGateError):
    """Inbound question failed validation."""

    def __init__(self, message: str = "Question is required") -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message)


class ProviderStatusError(ChatGateError):
    """Provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str | None = None) -> None:
        super().__init__(
            ErrorCode.PROVIDER_STATUS_ERROR,
            message,
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class ProviderParseError(ChatGateError):
    """Provider response could not be decoded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.PROVIDER_INVALID_RESPONSE, message, details)


class ProviderTransportError(ChatGateError):
    """Provider could not be reached."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.PROVIDER_UNAVAILABLE, message, details)


class ConfigurationError(ChatGateError):
    """Required configuration (API key) is missing."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.CONFIG_MISSING_API_KEY, message, details)
