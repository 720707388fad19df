"""
Chat Domain - Provider-agnostic question answering.

This domain handles:
- The uniform request/response envelope
- Question validation
- Mapping provider failures to typed outcomes
"""

from .contracts import ChatProvider
from .gateway import ChatGateway, is_blank
from .models import (
    QUESTION_REQUIRED,
    ChatOutcome,
    ChatRequest,
    FailureReason,
    ResponseEnvelope,
)

__all__ = [
    "ChatProvider",
    "ChatGateway",
    "is_blank",
    "ChatRequest",
    "ChatOutcome",
    "FailureReason",
    "ResponseEnvelope",
    "QUESTION_REQUIRED",
]
