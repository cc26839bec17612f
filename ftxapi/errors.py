"""
Exception hierarchy for the FTX REST client.

Every failure a call can produce is raised as a subclass of ``FTXError``
so callers can catch the whole family at once, or branch on the specific
kind (rate limiting, already-closed orders, ...) without string matching.
"""

from __future__ import annotations

from typing import Optional


class FTXError(Exception):
    """Base class for all errors raised by this package."""


class ConstructionError(FTXError):
    """Raised when a request URL cannot be built."""


class TransportError(FTXError):
    """Raised on network-level failures (DNS, connection reset, timeout)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class RateLimited(FTXError):
    """Raised when the exchange answers with HTTP 429."""

    status_code = 429

    def __init__(self) -> None:
        super().__init__("[HTTP 429] rate limit exceeded")


class BodyReadError(FTXError):
    """Raised when the response body could not be read in full."""


class UnexpectedStatus(FTXError):
    """Raised on a non-200 response whose body is not a JSON envelope."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected status code = {status_code}")


class APIError(FTXError):
    """Raised on a non-200 response carrying an error envelope."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[HTTP {status_code}] FTX error: {message}")


class OrderAlreadyClosed(APIError):
    """The order being cancelled or modified is already closed."""


class OrderAlreadyQueued(APIError):
    """The order is already queued for cancellation."""


class EnvelopeError(FTXError):
    """Raised when an HTTP 200 envelope reports ``success: false``."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DecodeError(FTXError):
    """Raised when an HTTP 200 body is not a JSON envelope."""
