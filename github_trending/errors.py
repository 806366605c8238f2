"""Error taxonomy for trending scraping and API calls.

Every failure that reaches a caller is one of:

- NetworkError: connection, DNS or timeout failure; the request never
  produced a response.
- HttpError: the server answered with a non-2xx status.
- DecodeError: a response arrived but its body could not be decoded
  (broken JSON/YAML, corrupt compressed payload).

Nothing in this package retries; errors propagate on the first failure.
"""

from typing import Optional


class TrendingError(Exception):
    """Base exception for all package errors."""

    def __init__(self, message: str, url: Optional[str] = None, **context):
        """Initialize error with context.

        Args:
            message: Error message
            url: URL of the request that failed, if any
            **context: Additional context information
        """
        super().__init__(message)
        self.url = url
        self.context = context

    def __str__(self):
        base = super().__str__()
        if self.url:
            return f"[{self.url}] {base}"
        return base


class NetworkError(TrendingError):
    """Connection-level failure; no HTTP response was received."""


class HttpError(TrendingError):
    """Non-2xx HTTP response."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        **context,
    ):
        """Initialize HTTP error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the server
            url: URL of the request
            **context: Additional context
        """
        super().__init__(message, url, **context)
        self.status_code = status_code


class DecodeError(TrendingError):
    """Response body could not be decoded into the expected structure."""
