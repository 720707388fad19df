"""
OpenAI Adapter - GPT-style chat-completions client.

This is the ONLY place that calls the OpenAI API.
"""

from .client import OPENAI_PLACEHOLDER, SYSTEM_INSTRUCTION, OpenAIClient
from .models import ChatCompletionRequest, ChatCompletionResponse

__all__ = [
    "OpenAIClient",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "OPENAI_PLACEHOLDER",
    "SYSTEM_INSTRUCTION",
]
