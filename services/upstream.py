"""
Upstream caller.
Performs a single bounded outbound request and classifies the outcome.
"""
import time
from typing import Any
import httpx
from models.relay_models import UpstreamCall
from utils.errors import InternalFault, UpstreamError, UpstreamUnavailable
from utils.logger import app_logger


class UpstreamCaller:
    """Single-attempt relay to an upstream service. No retries."""

    @staticmethod
    async def send(client: httpx.AsyncClient, call: UpstreamCall) -> httpx.Response:
        """
        Issue one outbound request.

        Args:
            client: Pooled httpx client for the target upstream
            call: Outbound request description

        Returns:
            The upstream response when its status is 2xx

        Raises:
            InternalFault: The request could not be built or dispatched locally
            UpstreamUnavailable: No response within the timeout, or connection failure
            UpstreamError: Upstream answered with a non-2xx status (redirects included)
        """
        app_logger.info(f"Upstream call [{call.upstream}]: {call.method} {call.url} {call.safe_params}")
        started = time.perf_counter()

        try:
            response = await client.request(
                call.method,
                call.url,
                params=call.params or None,
                json=call.json,
                headers=call.headers or None,
                timeout=call.timeout,
            )
        except httpx.TimeoutException as e:
            app_logger.error(f"Upstream [{call.upstream}] timed out after {call.timeout}s: {type(e).__name__}")
            raise UpstreamUnavailable(str(e)) from e
        except httpx.UnsupportedProtocol as e:
            app_logger.error(f"Upstream [{call.upstream}] misconfigured URL: {e}")
            raise InternalFault(str(e)) from e
        except httpx.RequestError as e:
            app_logger.error(f"Upstream [{call.upstream}] unreachable: {type(e).__name__}: {e}")
            raise UpstreamUnavailable(str(e)) from e
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            app_logger.error(f"Upstream [{call.upstream}] request could not be built: {e}")
            raise InternalFault(str(e)) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        app_logger.info(f"Upstream [{call.upstream}] responded {response.status_code} in {elapsed_ms:.0f}ms")

        if not response.is_success:
            details = UpstreamCaller.error_details(response)
            app_logger.error(f"Upstream [{call.upstream}] error {response.status_code}: {details}")
            raise UpstreamError(response.status_code, details)

        return response

    @staticmethod
    def error_details(response: httpx.Response) -> Any:
        """Decoded JSON error body, or the raw text when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return response.text
