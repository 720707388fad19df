"""
OpenAI Models - Request/Response types for the chat-completions API.
"""

from __future__ import annotations

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """One chat message."""

    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    """Chat-completions request body."""

    model: str
    messages: list[ChatMessage]

    model_config = {"frozen": True}


class CompletionMessage(BaseModel):
    """Assistant message inside a choice."""

    content: str | None = None


class CompletionChoice(BaseModel):
    """One completion candidate."""

    message: CompletionMessage | None = None


class ChatCompletionResponse(BaseModel):
    """Chat-completions response; only the fields the gateway reads."""

    choices: list[CompletionChoice] | None = None

    def first_content(self) -> str | None:
        """Return ``choices[0].message.content`` or None when absent."""
        if not self.choices:
            return None
        message = self.choices[0].message
        return message.content if message else None
