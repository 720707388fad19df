"""
Chat Gateway - Validate, invoke one provider, normalize the outcome.

Flow per call:
    question -> validation -> provider.ask() -> ChatOutcome

Every call is independent: one provider, one attempt, no retries.
Provider failures never escape; they become a failed ChatOutcome that the
route maps to (status, envelope).
"""

from __future__ import annotations

import logging

from chatgate.config import ChatGateError, ErrorCode, QuestionValidationError

from .contracts import ChatProvider
from .models import QUESTION_REQUIRED, ChatOutcome, FailureReason

logger = logging.getLogger(__name__)

__all__ = ["ChatGateway", "is_blank"]

_REASON_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: FailureReason.VALIDATION,
    ErrorCode.PROVIDER_STATUS_ERROR: FailureReason.UPSTREAM_STATUS,
    ErrorCode.PROVIDER_INVALID_RESPONSE: FailureReason.PARSE,
    ErrorCode.PROVIDER_UNAVAILABLE: FailureReason.TRANSPORT,
}


def is_blank(question: str | None) -> bool:
    """True for None, empty, or whitespace-only questions."""
    return question is None or not question.strip()


class ChatGateway:
    """
    Gateway endpoint logic for a single provider.

    Example:
        >>> gateway = ChatGateway(OpenAIClient(api_key="sk-..."))
        >>> outcome = await gateway.handle("Hello")
        >>> outcome.status_code, outcome.to_envelope()
    """

    def __init__(self, provider: ChatProvider) -> None:
        self.provider = provider

    async def handle(self, question: str | None) -> ChatOutcome:
        """
        Answer one question.

        Args:
            question: Raw question from the caller

        Returns:
            ChatOutcome carrying the answer or a typed failure
        """
        try:
            if is_blank(question):
                raise QuestionValidationError(QUESTION_REQUIRED)
            answer = await self.provider.ask(question)
        except ChatGateError as e:
            reason = _REASON_BY_CODE.get(e.code, FailureReason.INTERNAL)
            logger.warning(
                "%s request failed: reason=%s code=%s",
                self.provider.name,
                reason.value,
                e.code.value,
            )
            return ChatOutcome.failed(reason, e.message)
        except Exception as e:
            logger.exception("Unexpected %s failure", self.provider.name)
            return ChatOutcome.failed(FailureReason.INTERNAL, str(e) or type(e).__name__)

        return ChatOutcome.answered(answer)
