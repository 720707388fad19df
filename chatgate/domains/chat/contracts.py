"""
Chat Contracts - Interfaces for chat providers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChatProvider(Protocol):
    """Contract for provider adapters."""

    name: str

    async def ask(self, question: str) -> str:
        """Send one question upstream and return the answer text."""
        ...
