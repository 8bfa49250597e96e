"""
Chat completion relay service.
Validates the client payload and forwards it to the provider with the server key.
"""
from typing import Any
import httpx
from pydantic import ValidationError
from config import Config
from models.api_models import ChatCompletionRequest
from models.relay_models import UpstreamCall
from services.upstream import UpstreamCaller
from utils.constants import ErrorMessages, Upstream
from utils.errors import InternalFault, InvalidRequest
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class ChatCompletionService:
    """Service for relaying chat completion requests."""

    @staticmethod
    def validate_payload(payload: Any) -> dict:
        """
        Check that the body is an object with a non-empty ``messages`` list.

        Returns:
            The payload, unchanged, ready to forward
        """
        if not isinstance(payload, dict):
            raise InvalidRequest(ErrorMessages.INVALID_BODY)
        try:
            ChatCompletionRequest.model_validate(payload)
        except ValidationError as e:
            app_logger.warning(f"Rejected chat payload: {e.error_count()} validation error(s)")
            raise InvalidRequest(ErrorMessages.INVALID_BODY) from e
        return payload

    @staticmethod
    def build_call(payload: dict) -> UpstreamCall:
        """Build the outbound call, injecting the server-held key."""
        if not Config.OPENAI_API_KEY:
            app_logger.error("OPENAI_API_KEY is not configured, refusing to dispatch")
            raise InternalFault("chat completion key not configured")

        return UpstreamCall(
            upstream=Upstream.OPENAI,
            method="POST",
            url=Config.OPENAI_API_URL,
            timeout=Config.OPENAI_TIMEOUT,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {Config.OPENAI_API_KEY}",
            },
        )

    @staticmethod
    async def create(payload: Any) -> httpx.Response:
        """Validate and relay one chat completion request."""
        payload = ChatCompletionService.validate_payload(payload)
        call = ChatCompletionService.build_call(payload)
        client = HTTPClientManager.get_openai_client()
        return await UpstreamCaller.send(client, call)
