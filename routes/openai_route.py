"""
Route handlers for chat completion relaying.
Handles the /api/openai endpoint.
"""
from fastapi import APIRouter, Request
from models.api_models import ErrorResponse
from services.openai_service import ChatCompletionService
from routes.relay_response import passthrough
from utils.constants import ErrorMessages
from utils.errors import RelayError, build_error_response
from utils.logger import app_logger

router = APIRouter(responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}})


@router.post("/api/openai")
async def chat_completion(request: Request):
    """
    Relay a chat completion request. The body is forwarded as-is once it
    carries a non-empty messages list.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        response = await ChatCompletionService.create(payload)
        return passthrough(response)
    except RelayError as e:
        app_logger.error(f"Chat completion relay failed: {type(e).__name__}: {e.message}")
        return build_error_response(e, ErrorMessages.CHAT_FAILED)
