"""
Gateway Client - HTTP caller for the /chat and /gemini routes.

Every call returns a ResponseEnvelope; transport, status and decoding
failures are reported as failed envelopes instead of raised.
"""

from __future__ import annotations

import logging
from enum import Enum

import httpx

from chatgate.domains.chat import ResponseEnvelope

logger = logging.getLogger(__name__)

__all__ = ["GatewayClient", "Provider", "DEFAULT_GATEWAY_URL"]

DEFAULT_GATEWAY_URL = "http://localhost:5024"


class Provider(str, Enum):
    """Gateway provider routes."""

    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def route(self) -> str:
        return "/chat" if self is Provider.OPENAI else "/gemini"

    @property
    def label(self) -> str:
        return "ChatGPT" if self is Provider.OPENAI else "Gemini"


class GatewayClient:
    """
    Async client for the ChatGate HTTP surface.

    Example:
        >>> async with GatewayClient() as client:
        ...     envelope = await client.ask_openai("Hello")
        ...     print(envelope.answer if envelope.success else envelope.error)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GATEWAY_URL,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize gateway client.

        Args:
            base_url: Gateway root URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def ask_openai(self, question: str) -> ResponseEnvelope:
        return await self.ask(Provider.OPENAI, question)

    async def ask_gemini(self, question: str) -> ResponseEnvelope:
        return await self.ask(Provider.GEMINI, question)

    async def ask(self, provider: Provider, question: str) -> ResponseEnvelope:
        """
        Post one question to the provider's route.

        Returns:
            The gateway's envelope, or a failed envelope describing what went wrong
        """
        try:
            client = await self._get_client()
            response = await client.post(provider.route, json={"question": question})

            if not response.is_success:
                return ResponseEnvelope.fail(f"HTTP {response.status_code}: {response.text}")

            data = response.json()
            if data is None:
                return ResponseEnvelope.fail("Failed to parse response")
            return ResponseEnvelope.model_validate(data)

        except (httpx.HTTPError, ValueError) as e:
            logger.debug("Gateway call to %s failed: %s", provider.route, e)
            return ResponseEnvelope.fail(str(e) or type(e).__name__)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> GatewayClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
