"""
Sends prepared requests and classifies the outcome.

The dispatcher knows nothing about individual endpoints: it returns the
raw body of a 200 response and raises one of the ``ftxapi.errors`` kinds
for everything else.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import requests

from .errors import (
    APIError,
    BodyReadError,
    OrderAlreadyClosed,
    OrderAlreadyQueued,
    RateLimited,
    TransportError,
    UnexpectedStatus,
)

# Exchange error strings with a dedicated exception type
KNOWN_ERRORS = {
    "Order already closed": OrderAlreadyClosed,
    "Order already queued for cancellation": OrderAlreadyQueued,
}


def classify_error(status_code: int, body: bytes) -> Exception:
    """Map a non-200 response to the matching exception instance."""
    try:
        envelope = json.loads(body)
    except ValueError:
        return UnexpectedStatus(status_code)
    if not isinstance(envelope, dict):
        return UnexpectedStatus(status_code)

    message = envelope.get("error")
    if message is None:
        message = ""
    elif not isinstance(message, str):
        return UnexpectedStatus(status_code)
    error_cls = KNOWN_ERRORS.get(message, APIError)
    return error_cls(status_code, message)


class Dispatcher:
    """Owns the HTTP session and executes prepared requests on it."""

    def __init__(
        self,
        session: requests.Session,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self.timeout = timeout
        self.logger = logger or logging.getLogger("ftxapi")

    def dispatch(
        self, prepared: requests.PreparedRequest, timeout: Optional[float] = None
    ) -> bytes:
        """
        Send *prepared* and return the body of a successful response.

        Raises
        ------
        TransportError
            On connection failures and timeouts.
        RateLimited
            On HTTP 429; the body is not read.
        BodyReadError
            If the body cannot be read.
        UnexpectedStatus, APIError, OrderAlreadyClosed, OrderAlreadyQueued
            On any other non-200 status.
        """
        self.logger.debug("API request  -> %s %s", prepared.method, prepared.url)

        try:
            response = self.session.send(
                prepared,
                stream=True,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{prepared.method} {prepared.url} failed: {exc}", exc) from exc

        try:
            if response.status_code == 429:
                self.logger.debug("API response <- 429 (rate limited)")
                raise RateLimited()

            try:
                body = response.content
            except requests.RequestException as exc:
                raise BodyReadError(f"failed to read body: {exc}") from exc
        finally:
            response.close()

        self.logger.debug(
            "API response <- %s (%.1f KB)", response.status_code, len(body) / 1024
        )

        if response.status_code != 200:
            raise classify_error(response.status_code, body)
        return body
