"""
Catch-all middleware for exceptions escaping route logic.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from utils.constants import ErrorMessages
from utils.logger import app_logger


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns any uncaught exception into a 500 JSON envelope.
    Details are logged server-side only.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and trap unexpected failures.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler or error response
        """
        try:
            return await call_next(request)
        except Exception:
            app_logger.error(
                f"Unhandled error on {request.method} {request.url.path}",
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": ErrorMessages.UNEXPECTED_ERROR},
            )
