"""
Conversion of successful upstream responses to client responses.
"""
import httpx
from fastapi.responses import Response


def passthrough(upstream: httpx.Response) -> Response:
    """Return the upstream body and status unchanged, keeping its content type."""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type", "application/json"),
    )
