"""Errors raised by infrastructure clients."""


class HTTPClientError(Exception):
    """Request failed at the transport level or returned an error status."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CodeforcesAPIError(Exception):
    """Codeforces API answered with a non-OK status or an unexpected body."""

    def __init__(self, message: str, comment: str | None = None):
        super().__init__(message)
        self.comment = comment
