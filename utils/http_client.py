"""
HTTP client utilities with connection pooling.
Provides reusable httpx clients for the upstream services.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages shared httpx clients with connection pooling."""

    _openai_client: httpx.AsyncClient | None = None
    _pubmed_client: httpx.AsyncClient | None = None

    @classmethod
    def get_openai_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for chat completion calls.

        Features:
        - Connection pooling (reuses TCP connections)
        - Long default timeout, generation is slow

        Returns:
            Configured httpx.AsyncClient for the chat completion provider
        """
        if cls._openai_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONNECTIONS,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            cls._openai_client = httpx.AsyncClient(
                timeout=Config.OPENAI_TIMEOUT,
                limits=limits,
                http2=True
            )

        return cls._openai_client

    @classmethod
    def get_pubmed_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for PubMed E-utilities calls.

        Returns:
            Configured httpx.AsyncClient for E-utilities
        """
        if cls._pubmed_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONNECTIONS,
                max_keepalive_connections=10,
                keepalive_expiry=60.0
            )

            cls._pubmed_client = httpx.AsyncClient(
                timeout=Config.PUBMED_TIMEOUT,
                follow_redirects=True,
                limits=limits,
                http2=True
            )

        return cls._pubmed_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        if cls._openai_client is not None:
            await cls._openai_client.aclose()
            cls._openai_client = None

        if cls._pubmed_client is not None:
            await cls._pubmed_client.aclose()
            cls._pubmed_client = None
