"""Shared HTTP plumbing for explorer providers and the webhook forwarder."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HTTPClient:
    """Owns a lazily created httpx client bounded by a request timeout."""

    USER_AGENT = "ltc-tx-monitor/1.0"

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client holder.

        Args:
            timeout: Request timeout in seconds.
            client: Pre-built client, mainly for tests. Created on first use otherwise.
        """
        self._timeout = timeout
        self._client = client

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.USER_AGENT,
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


class HTTPProvider(HTTPClient):
    """Issues single-attempt JSON requests against a base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, client=client)
        self._base_url = base_url.rstrip("/")
        self._request_count = 0

    @property
    def request_count(self) -> int:
        """Number of requests issued by this provider."""
        return self._request_count

    async def _get_json(
        self, path: str, params: dict[str, Any] | None = None
    ) -> Any:
        """
        GET a resource and decode its JSON body.

        Raises:
            httpx.HTTPError: On transport errors and non-2xx statuses.
            ValueError: If the body is not valid JSON.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        client = await self._get_client()

        self._request_count += 1
        logger.debug(f"GET {url} - request #{self._request_count}")
        response = await client.get(url, params=params)
        response.raise_for_status()
        return response.json()
