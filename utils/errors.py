"""
Error taxonomy for the relay and the shared mapping to client responses.
"""
from typing import Any
from fastapi import status
from fastapi.responses import JSONResponse
from utils.constants import ErrorMessages


class RelayError(Exception):
    """Base class for every fault a route can map to a client response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidRequest(RelayError):
    """Client input failed a precondition. No upstream call was made."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(RelayError):
    """Upstream answered with a non-success status."""

    def __init__(self, status_code: int, details: Any = None):
        super().__init__(f"upstream responded with status {status_code}")
        self.status_code = status_code
        self.details = details


class UpstreamUnavailable(RelayError):
    """Upstream did not answer (connection failure or timeout)."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class InternalFault(RelayError):
    """Local fault before the call could be dispatched."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotFound(RelayError):
    """No route matched."""

    status_code = status.HTTP_404_NOT_FOUND


def build_error_response(error: RelayError, message: str) -> JSONResponse:
    """
    Map a relay error to the client-facing JSON envelope.

    Args:
        error: The classified failure
        message: Route-specific message used when the upstream answered with an error

    Returns:
        JSONResponse with an ``error`` field (and ``details`` for upstream errors)
    """
    if isinstance(error, UpstreamError):
        return JSONResponse(
            status_code=error.status_code,
            content={"error": message, "details": error.details},
        )

    if isinstance(error, UpstreamUnavailable):
        content = {"error": ErrorMessages.SERVICE_UNAVAILABLE}
    elif isinstance(error, InvalidRequest):
        content = {"error": error.message}
    elif isinstance(error, NotFound):
        content = {"error": ErrorMessages.NOT_FOUND}
    else:
        content = {"error": ErrorMessages.INTERNAL_ERROR}

    return JSONResponse(status_code=error.status_code, content=content)
