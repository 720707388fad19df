"""
Tests for the chat gateway.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from chatgate.config import (
    ChatGateError,
    ErrorCode,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
)

from .gateway import ChatGateway, is_blank
from .models import FailureReason, ResponseEnvelope


@pytest.fixture
def provider() -> AsyncMock:
    """Create a test double provider with a call counter."""
    mock = AsyncMock()
    mock.name = "mock"
    mock.ask.return_value = "Hi there"
    return mock


@pytest.fixture
def gateway(provider: AsyncMock) -> ChatGateway:
    return ChatGateway(provider)


@pytest.mark.parametrize("question", [None, "", " ", "   ", "\t\n"])
def test_is_blank(question: str | None) -> None:
    assert is_blank(question) is True


def test_is_blank_false_for_text() -> None:
    assert is_blank(" hi ") is False


@pytest.mark.parametrize("question", [None, "", "   ", "\n\t"])
async def test_blank_question_skips_provider(
    gateway: ChatGateway, provider: AsyncMock, question: str | None
) -> None:
    """Test blank questions fail validation with zero provider calls."""
    outcome = await gateway.handle(question)

    assert outcome.reason == FailureReason.VALIDATION
    assert outcome.status_code == 400
    assert outcome.to_envelope() == ResponseEnvelope.fail("Question is required")
    assert provider.ask.await_count == 0


async def test_answer_passes_through(gateway: ChatGateway, provider: AsyncMock) -> None:
    """Test a provider answer becomes a 200 envelope."""
    outcome = await gateway.handle("Hello")

    assert outcome.status_code == 200
    assert outcome.to_envelope() == ResponseEnvelope.ok("Hi there")
    provider.ask.assert_awaited_once_with("Hello")


async def test_question_is_forwarded_verbatim(
    gateway: ChatGateway, provider: AsyncMock
) -> None:
    """Test surrounding whitespace is not stripped from valid questions."""
    await gateway.handle("  Hello  ")
    provider.ask.assert_awaited_once_with("  Hello  ")


@pytest.mark.parametrize(
    ("error", "reason"),
    [
        (
            ProviderStatusError("OpenAI API request failed with status: 503", status_code=503),
            FailureReason.UPSTREAM_STATUS,
        ),
        (ProviderParseError("bad json"), FailureReason.PARSE),
        (ProviderTransportError("connection refused"), FailureReason.TRANSPORT),
        (ChatGateError(ErrorCode.INTERNAL_ERROR, "odd"), FailureReason.INTERNAL),
    ],
)
async def test_provider_errors_map_to_500(
    gateway: ChatGateway,
    provider: AsyncMock,
    error: ChatGateError,
    reason: FailureReason,
) -> None:
    """Test adapter failures become 500 envelopes carrying the bare message."""
    provider.ask.side_effect = error

    outcome = await gateway.handle("Hello")

    assert outcome.reason == reason
    assert outcome.status_code == 500
    assert outcome.to_envelope() == ResponseEnvelope.fail(error.message)
    assert provider.ask.await_count == 1


async def test_unexpected_exception_is_contained(
    gateway: ChatGateway, provider: AsyncMock
) -> None:
    """Test a non-taxonomy exception still yields a failed outcome."""
    provider.ask.side_effect = RuntimeError("kaboom")

    outcome = await gateway.handle("Hello")

    assert outcome.reason == FailureReason.INTERNAL
    assert outcome.status_code == 500
    assert outcome.to_envelope().error == "kaboom"
