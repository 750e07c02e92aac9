"""
Shared async HTTP plumbing for exchange API clients.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from orderwire.config import config

logger = structlog.get_logger()


class ApiClient:
    """
    Thin JSON-over-HTTP client.

    No retries or rate limiting: errors surface to the caller unchanged.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.exchange.base_url).rstrip("/")
        self.timeout = timeout or config.exchange.timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        """
        POST a JSON payload and decode the JSON response.

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
        """
        client = await self._get_client()

        try:
            response = await client.post(path, json=payload)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "exchange_api_http_error",
                path=path,
                status_code=e.response.status_code,
                response=e.response.text,
            )
            raise

        except httpx.TimeoutException:
            logger.warning("exchange_api_timeout", path=path)
            raise


__all__ = ["ApiClient"]
