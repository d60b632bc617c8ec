"""
Async HTTP client for the SerpAPI search endpoint.

Single attempt per call: aggregator requests are neither retried nor rate limited
here, failures are reported to the caller as SerpApiError.
"""

from typing import Any, Dict, Optional
import httpx
import logging

logger = logging.getLogger(__name__)

# Query parameters that must never reach the logs
SENSITIVE_PARAMS = {"api_key"}


class SerpApiError(Exception):
    """Raised when the aggregator cannot be reached or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def redact_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of query params safe to log"""
    return {
        key: ("***" if key in SENSITIVE_PARAMS else value)
        for key, value in params.items()
    }


class AsyncHttpClient:
    """
    Async HTTP client that fetches JSON documents from the aggregator.
    """

    def __init__(
        self,
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.timeout = timeout

        # Configure httpx client
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
            headers=self._get_headers(),
            transport=transport,
        )

    def _get_headers(self) -> Dict[str, str]:
        """Get default request headers"""
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
        }

    async def get_json(self, url: str, params: Dict[str, Any]) -> Any:
        """
        Make a GET request and decode the JSON body.

        Args:
            url: Endpoint to query
            params: Query string parameters

        Returns:
            Decoded JSON document

        Raises:
            SerpApiError: On transport failure or a non-2xx response
        """
        logger.debug(f"GET {url} params={redact_params(params)}")

        try:
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout calling {url}: {e}")
            raise SerpApiError(f"SerpAPI request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.warning(f"Network error calling {url}: {type(e).__name__}")
            raise SerpApiError(f"SerpAPI request failed: {type(e).__name__}") from e

        if not response.is_success:
            logger.warning(f"SerpAPI answered {response.status_code} for {url}")
            raise SerpApiError(
                f"SerpAPI request failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SerpApiError(
                "SerpAPI returned a body that is not valid JSON",
                status_code=response.status_code,
            ) from e

    async def close(self) -> None:
        """Close the HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
