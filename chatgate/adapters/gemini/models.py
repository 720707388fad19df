"""
Gemini Models - Request/Response types for the generateContent API.

Response fields are required keys. Only empty ``candidates``/``parts`` lists
and a null or empty ``text`` count as "no answer"; a missing key is a
malformed response.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeminiPart(BaseModel):
    """One text part."""

    text: str | None


class GeminiContent(BaseModel):
    """A content block made of parts."""

    parts: list[GeminiPart]


class GenerationConfig(BaseModel):
    """Fixed sampling configuration sent with every request."""

    temperature: float = 0.7
    top_k: int = Field(default=40, alias="topK")
    top_p: float = Field(default=0.95, alias="topP")
    max_output_tokens: int = Field(default=1024, alias="maxOutputTokens")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GenerateContentRequest(BaseModel):
    """generateContent request body."""

    contents: list[GeminiContent]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict:
        """Serialize with the provider's camelCase field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GeminiCandidate(BaseModel):
    """One generated candidate."""

    content: GeminiContent


class GenerateContentResponse(BaseModel):
    """generateContent response; only the fields the gateway reads."""

    candidates: list[GeminiCandidate]

    def first_text(self) -> str | None:
        """Return ``candidates[0].content.parts[0].text``, None for empty lists."""
        if not self.candidates:
            return None
        parts = self.candidates[0].content.parts
        if not parts:
            return None
        return parts[0].text
