"""Infrastructure: HTTP clients, storage backends, configuration."""

from .codeforces_client import CodeforcesApiClient
from .errors import CodeforcesAPIError, HTTPClientError
from .http_client import AsyncHTTPClient

__all__ = [
    "AsyncHTTPClient",
    "CodeforcesAPIError",
    "CodeforcesApiClient",
    "HTTPClientError",
]
