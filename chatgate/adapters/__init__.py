"""
Adapters - External service integrations.

All provider API calls are wrapped here to isolate the gateway from wire-format changes.
"""

from .gemini import GeminiAPIError, GeminiClient
from .openai import OpenAIClient

__all__ = [
    "OpenAIClient",
    "GeminiClient",
    "GeminiAPIError",
]
