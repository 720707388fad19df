"""
OpenAI Client - GPT-style chat-completions adapter.

Translates a question into a chat-completions payload with a fixed system
instruction, posts it with bearer auth, and extracts the first choice's
message content.

Failure handling:
- Non-2xx status -> ProviderStatusError (status code in the message)
- Malformed or mis-shaped JSON -> ProviderParseError
- Network errors -> ProviderTransportError
- Missing/empty content -> placeholder answer, not an error
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from chatgate.adapters.instructions import SYSTEM_INSTRUCTION
from chatgate.config import (
    ConfigurationError,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
)

from .models import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

logger = logging.getLogger(__name__)

__all__ = [
    "OpenAIClient",
    "OPENAI_CHAT_URL",
    "OPENAI_MODEL",
    "OPENAI_PLACEHOLDER",
    "SYSTEM_INSTRUCTION",
]

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-3.5-turbo"
OPENAI_PLACEHOLDER = "No response from OpenAI"


class OpenAIClient:
    """
    OpenAI chat-completions client.

    Example:
        >>> client = OpenAIClient(api_key="sk-...")
        >>> answer = await client.ask("What is the capital of Korea?")
    """

    name = "OpenAI"

    def __init__(
        self,
        api_key: str | None,
        timeout: float = 60.0,
        url: str = OPENAI_CHAT_URL,
    ) -> None:
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (required)
            timeout: Request timeout in seconds
            url: Chat-completions endpoint

        Raises:
            ConfigurationError: API key missing
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("OpenAI API key is not configured")
        self._api_key = api_key
        self.timeout = timeout
        self.url = url
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        return self._client

    @staticmethod
    def build_request(question: str) -> ChatCompletionRequest:
        """Translate a question into the chat-completions payload."""
        return ChatCompletionRequest(
            model=OPENAI_MODEL,
            messages=[
                ChatMessage(role="system", content=SYSTEM_INSTRUCTION),
                ChatMessage(role="user", content=question),
            ],
        )

    @staticmethod
    def extract_answer(raw: str | bytes) -> str:
        """
        Extract the answer text from a chat-completions response body.

        Raises:
            ProviderParseError: Body is not JSON or contradicts the schema
        """
        try:
            data = ChatCompletionResponse.model_validate_json(raw)
        except ValidationError as e:
            raise ProviderParseError(
                f"Invalid OpenAI response: {e.errors()[0]['msg']}",
                {"errors": e.error_count()},
            ) from e

        return data.first_content() or OPENAI_PLACEHOLDER

    async def ask(self, question: str) -> str:
        """
        Send one question and return the answer.

        Args:
            question: User question

        Returns:
            Answer text, or the placeholder when the provider sent none

        Raises:
            ProviderStatusError: Non-2xx response
            ProviderParseError: Undecodable response
            ProviderTransportError: Network failure
        """
        client = await self._get_client()
        payload = self.build_request(question).model_dump()

        try:
            response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            logger.warning("OpenAI transport error: %s", type(e).__name__)
            raise ProviderTransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error("OpenAI error: status=%d", response.status_code)
            raise ProviderStatusError(
                f"OpenAI API request failed with status: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        return self.extract_answer(response.content)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
