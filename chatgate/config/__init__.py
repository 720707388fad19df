"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    ChatGateError,
    ConfigurationError,
    ErrorCode,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
    QuestionValidationError,
)
from .settings import ProviderKeySettings, Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "ProviderKeySettings",
    "get_settings",
    # Errors
    "ErrorCode",
    "ChatGateError",
    "QuestionValidationError",
    "ProviderStatusError",
    "ProviderParseError",
    "ProviderTransportError",
    "ConfigurationError",
]
