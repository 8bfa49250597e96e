"""
PubMed Relay - FastAPI application relaying browser requests to a chat
completion provider and the PubMed E-utilities with server-held credentials.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from config import Config
from routes import openai_route, pubmed, status as status_route
from middleware import UnhandledErrorMiddleware
from utils.constants import ErrorMessages
from utils.errors import NotFound, build_error_response
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"{Config.APP_TITLE} starting ({Config.ENVIRONMENT})")
    yield
    await HTTPClientManager.close_all()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors (unmatched routes, wrong methods) as error envelopes."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        app_logger.warning(f"No route for {request.method} {request.url.path}")
        return build_error_response(NotFound(), ErrorMessages.NOT_FOUND)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail).lower()},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Build the application from the current configuration."""
    app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_middleware(UnhandledErrorMiddleware)
    # Outermost, so error responses also carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.get_allowed_origins(),
        allow_credentials=Config.allow_credentials(),
        allow_methods=Config.ALLOWED_METHODS,
        allow_headers=Config.ALLOWED_HEADERS,
    )

    #root endpoint
    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {"message": f"{Config.APP_TITLE} is running"}

    app.include_router(status_route.router, tags=["status"])
    app.include_router(openai_route.router, tags=["openai"])
    app.include_router(pubmed.router, tags=["pubmed"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
