"""
Chat Models - Uniform request/response contract shared by every route.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

QUESTION_REQUIRED = "Question is required"


def _fold_keys(data: Any) -> Any:
    """Lower-case top-level keys so field matching ignores case."""
    if isinstance(data, dict):
        return {str(key).lower(): value for key, value in data.items()}
    return data


class ChatRequest(BaseModel):
    """Inbound question body. A missing question is treated as blank."""

    question: str | None = Field(default=None, description="Natural-language question")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive(cls, data: Any) -> Any:
        return _fold_keys(data)


class ResponseEnvelope(BaseModel):
    """
    Uniform outward-facing result.

    Invariants:
        success=True  -> error is None
        success=False -> answer == "" and error is non-empty
    """

    answer: str = ""
    success: bool = False
    error: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive(cls, data: Any) -> Any:
        return _fold_keys(data)

    @model_validator(mode="after")
    def _check_invariants(self) -> ResponseEnvelope:
        if self.success and self.error is not None:
            raise ValueError("successful envelope must not carry an error")
        if not self.success:
            if self.answer:
                raise ValueError("failed envelope must have an empty answer")
            if not self.error:
                raise ValueError("failed envelope requires an error message")
        return self

    @classmethod
    def ok(cls, answer: str) -> ResponseEnvelope:
        return cls(answer=answer, success=True, error=None)

    @classmethod
    def fail(cls, error: str) -> ResponseEnvelope:
        return cls(answer="", success=False, error=error)


class FailureReason(str, Enum):
    """Why a gateway call did not produce an answer."""

    VALIDATION = "validation"
    UPSTREAM_STATUS = "upstream_status"
    PARSE = "parse"
    TRANSPORT = "transport"
    INTERNAL = "internal"


_STATUS_BY_REASON = {
    FailureReason.VALIDATION: 400,
}


@dataclass(frozen=True)
class ChatOutcome:
    """Tagged result of one gateway call: an answer or a typed failure."""

    answer: str | None = None
    reason: FailureReason | None = None
    message: str | None = None

    @classmethod
    def answered(cls, answer: str) -> ChatOutcome:
        return cls(answer=answer)

    @classmethod
    def failed(cls, reason: FailureReason, message: str) -> ChatOutcome:
        return cls(reason=reason, message=message)

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def status_code(self) -> int:
        """HTTP status for this outcome."""
        if self.reason is None:
            return 200
        return _STATUS_BY_REASON.get(self.reason, 500)

    def to_envelope(self) -> ResponseEnvelope:
        if self.reason is None:
            return ResponseEnvelope.ok(self.answer or "")
        return ResponseEnvelope.fail(self.message or self.reason.value)
