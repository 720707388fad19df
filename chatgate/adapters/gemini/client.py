"""
Gemini Client - Gemini-style generateContent adapter.

Differences from the OpenAI adapter:
- Instruction and question are concatenated into a single text part
- Fixed generationConfig (temperature 0.7, topK 40, topP 0.95, 1024 tokens)
- API key travels as the ``key`` query parameter, no auth header
- Every failure is re-wrapped with an "Error calling Gemini API: " prefix,
  including its own upstream-status error, so status failures read
  "Error calling Gemini API: Gemini API request failed with status: ..."
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from chatgate.adapters.instructions import SYSTEM_INSTRUCTION
from chatgate.config import (
    ChatGateError,
    ConfigurationError,
    ErrorCode,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
)

from .models import GeminiContent, GeminiPart, GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)

__all__ = ["GeminiClient", "GeminiAPIError", "GEMINI_URL", "GEMINI_PLACEHOLDER"]

GEMINI_MODEL = "gemini-1.5-flash"
GEMINI_URL = (
    f"https://generativelanguage.googleapis.com/v1beta/models/{GEMINI_MODEL}:generateContent"
)
GEMINI_PLACEHOLDER = "No response from Gemini"
GEMINI_ERROR_PREFIX = "Error calling Gemini API: "


class GeminiAPIError(ChatGateError):
    """Any failure on the Gemini call path, prefixed and keeping the inner code."""

    def __init__(self, inner: Exception) -> None:
        if isinstance(inner, ChatGateError):
            code, message, details = inner.code, inner.message, inner.details
        else:
            code, message, details = ErrorCode.INTERNAL_ERROR, str(inner), {}
        super().__init__(code, f"{GEMINI_ERROR_PREFIX}{message}", details)
        self.inner = inner


class GeminiClient:
    """
    Gemini generateContent client using API-key auth.

    Example:
        >>> client = GeminiClient(api_key="AIza...")
        >>> answer = await client.ask("What is the capital of Korea?")
    """

    name = "Gemini"

    def __init__(
        self,
        api_key: str | None,
        timeout: float = 60.0,
        url: str = GEMINI_URL,
    ) -> None:
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (required)
            timeout: Request timeout in seconds
            url: generateContent endpoint (model embedded)

        Raises:
            ConfigurationError: API key missing
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("Gemini API key is not configured")
        self._api_key = api_key
        self.timeout = timeout
        self.url = url
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    @staticmethod
    def build_request(question: str) -> GenerateContentRequest:
        """Translate a question into the generateContent payload."""
        prompt = f"{SYSTEM_INSTRUCTION} 질문: {question}"
        return GenerateContentRequest(
            contents=[GeminiContent(parts=[GeminiPart(text=prompt)])],
        )

    @staticmethod
    def extract_answer(raw: str | bytes) -> str:
        """
        Extract the answer text from a generateContent response body.

        Raises:
            ProviderParseError: Body is not JSON or contradicts the schema
        """
        try:
            data = GenerateContentResponse.model_validate_json(raw)
        except ValidationError as e:
            raise ProviderParseError(
                f"Invalid Gemini response: {e.errors()[0]['msg']}",
                {"errors": e.error_count()},
            ) from e

        return data.first_text() or GEMINI_PLACEHOLDER

    async def ask(self, question: str) -> str:
        """
        Send one question and return the answer.

        Args:
            question: User question

        Returns:
            Answer text, or the placeholder when the provider sent none

        Raises:
            GeminiAPIError: Any failure, wrapped with the provider prefix
        """
        try:
            return await self._ask(question)
        except Exception as e:
            raise GeminiAPIError(e) from e

    async def _ask(self, question: str) -> str:
        client = await self._get_client()
        payload = self.build_request(question).to_wire()

        try:
            response = await client.post(
                self.url,
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            logger.warning("Gemini transport error: %s", type(e).__name__)
            raise ProviderTransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error("Gemini error: status=%d", response.status_code)
            raise ProviderStatusError(
                f"Gemini API request failed with status: {response.status_code}. "
                f"Error: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        return self.extract_answer(response.content)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
