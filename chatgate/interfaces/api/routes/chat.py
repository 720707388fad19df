"""
Chat Routes - One POST endpoint per provider, same envelope for both.

    POST /chat    -> OpenAI
    POST /gemini  -> Gemini

Status mapping:
- 200: answer (or provider placeholder)
- 400: blank question or undecodable body, provider never called
- 500: provider failure, message passed through
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chatgate.domains.chat import ChatGateway, ChatRequest, ResponseEnvelope
from chatgate.interfaces.api.deps import get_gemini_gateway, get_openai_gateway

router = APIRouter()

_ENVELOPE_RESPONSES: dict[int | str, dict] = {
    400: {"model": ResponseEnvelope, "description": "Question is required"},
    500: {"model": ResponseEnvelope, "description": "Provider call failed"},
    503: {"model": ResponseEnvelope, "description": "Provider API key is not configured"},
}


async def _respond(gateway: ChatGateway, request: ChatRequest) -> JSONResponse:
    outcome = await gateway.handle(request.question)
    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.to_envelope().model_dump(),
    )


@router.post(
    "/chat",
    name="Chat",
    response_model=ResponseEnvelope,
    responses=_ENVELOPE_RESPONSES,
)
async def chat(
    request: ChatRequest,
    gateway: ChatGateway = Depends(get_openai_gateway),
) -> JSONResponse:
    """Ask OpenAI (GPT) a question."""
    return await _respond(gateway, request)


@router.post(
    "/gemini",
    name="Gemini",
    response_model=ResponseEnvelope,
    responses=_ENVELOPE_RESPONSES,
)
async def gemini(
    request: ChatRequest,
    gateway: ChatGateway = Depends(get_gemini_gateway),
) -> JSONResponse:
    """Ask Google Gemini a question."""
    return await _respond(gateway, request)
