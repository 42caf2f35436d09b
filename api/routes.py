"""HTTP routes: single-shot chat and AI backend health"""

import json
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ai.client import BLOCKED_PREFIX, RemoteAIClient
from ai.service import AIResponseService
from ai.validation import validate_user_input
from api.schemas import ChatFailure, ChatSuccess, HealthStatus
from domain.constants import ErrorKind
from domain.errors import AIServiceException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _client(request: Request) -> RemoteAIClient:
    """Shared RemoteAIClient from app state"""
    return request.app.state.ai_client


def _failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ChatFailure(error=message).model_dump(), status_code=status_code)


def error_response(error: AIServiceException) -> JSONResponse:
    """Map a classified AI failure onto the endpoint's status codes"""
    if error.kind == ErrorKind.RATE_LIMIT_ERROR:
        return _failure("Rate limit exceeded", status.HTTP_429_TOO_MANY_REQUESTS)
    if error.kind == ErrorKind.INVALID_INPUT and "api key" in error.message.lower():
        return _failure("Invalid API key configuration", status.HTTP_500_INTERNAL_SERVER_ERROR)
    if error.message.startswith(BLOCKED_PREFIX):
        return _failure(
            "Content was blocked by safety filters", status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return _failure("AI service temporarily unavailable", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/chat")
async def chat(request: Request):
    """Single-shot completion: {message} in, {response, success} out"""
    client = _client(request)

    if not client.is_configured:
        logger.error("GEMINI_API_KEY environment variable is not set")
        return _failure("Gemini API key not configured", status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _failure("Request body must be valid JSON", status.HTTP_400_BAD_REQUEST)

    message = body.get("message") if isinstance(body, dict) else None
    if not message or not isinstance(message, str):
        return _failure("Message is required and must be a string", status.HTTP_400_BAD_REQUEST)

    validation = validate_user_input(message)
    if not validation.is_valid:
        return _failure(validation.error, status.HTTP_400_BAD_REQUEST)

    try:
        text = await client.call(validation.sanitized)
    except AIServiceException as e:
        logger.error("Gemini API error: %s (%s)", e.message, e.kind.value)
        return error_response(e)
    except Exception:
        logger.exception("Unexpected error in /api/chat")
        return _failure("AI service temporarily unavailable", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return ChatSuccess(response=text)


@router.get("/health", response_model=HealthStatus)
async def health(request: Request):
    """Check that the remote AI backend answers"""
    service = AIResponseService(_client(request))
    return HealthStatus(**await service.check_health())
