"""
Gemini Adapter - Google Gemini generateContent client.

This is the ONLY place that calls the Gemini API.
"""

from .client import GEMINI_PLACEHOLDER, GeminiAPIError, GeminiClient
from .models import GenerateContentRequest, GenerateContentResponse, GenerationConfig

__all__ = [
    "GeminiClient",
    "GeminiAPIError",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerationConfig",
    "GEMINI_PLACEHOLDER",
]
