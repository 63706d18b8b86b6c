"""
AI Routes

POST /ai/chat - Ask the career advisor model a question
"""

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from career_advisor.api.deps import get_ollama_client
from career_advisor.core.auth import get_current_account_id
from career_advisor.core.errors import ValidationError
from career_advisor.services.ollama_client import OllamaClient
from career_advisor.schemas.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"], responses={
    429: {"model": ErrorResponse, "description": "AI service rate limited"},
    503: {"model": ErrorResponse, "description": "AI service unreachable"},
})


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    account_id: str = Depends(get_current_account_id),
    client: OllamaClient = Depends(get_ollama_client)
):
    """
    Get an AI response to a career or education question.

    Upstream failures map to 503 (unreachable), 429 (rate limited) or 500.
    """
    message = request.message
    if not message:
        raise ValidationError("Message is required")
    if not isinstance(message, str):
        raise ValidationError("Message must be a string")

    logger.info("Processing chat request (account=%s, length=%d)", account_id, len(message))
    response = await run_in_threadpool(client.chat, message)
    return ChatResponse(response=response)
