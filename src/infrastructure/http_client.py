"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import HTTPClientError


class AsyncHTTPClient:
    """Thin async HTTP client returning decoded JSON."""

    def __init__(self, timeout: float = 10.0, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Total request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode the JSON body."""
        logger.debug(f"GET {url} params={params}")

        # A session per request avoids async cleanup issues with curl_cffi
        try:
            async with AsyncSession(impersonate=self.impersonate, timeout=self.timeout) as session:
                response = await session.get(url, params=params)
        except Exception as e:
            raise HTTPClientError(f"Request to {url} failed: {e}", url=url) from e

        try:
            payload = response.json()
        except Exception as e:
            raise HTTPClientError(
                f"Invalid JSON from {url}", url=url, status_code=response.status_code
            ) from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return payload
