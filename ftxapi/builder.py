"""
Turns request descriptors into transport-ready requests.

The signature covers the request line exactly as sent, so the URL
(including the query string) is finalised before the payload is signed.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote, urlsplit

import requests

from .config import ClientConfig
from .errors import ConstructionError
from .request import Method, Request, canonical_payload
from .signer import sign

HEADER_KEY = "FTX-KEY"
HEADER_TS = "FTX-TS"
HEADER_SIGN = "FTX-SIGN"
HEADER_SUBACCOUNT = "FTX-SUBACCOUNT"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_ms(moment: datetime) -> int:
    """Integer milliseconds since the epoch; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def build_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_request(
    config: ClientConfig, descriptor: Request, now: Optional[datetime] = None
) -> requests.PreparedRequest:
    """
    Build a ``PreparedRequest`` for *descriptor*.

    Parameters
    ----------
    config : ClientConfig
        Supplies base URL, credentials and sub-account.
    descriptor : Request
        The call to build.  Never modified.
    now : datetime, optional
        Signing time; defaults to the current UTC time.

    Raises
    ------
    ConstructionError
        If the resulting URL is malformed.
    """
    url = build_url(config.base_url, descriptor.path)
    query = descriptor.query_string
    if query:
        url = f"{url}?{query}"

    headers = {}
    body = None
    if descriptor.method is not Method.GET:
        headers["Content-Type"] = "application/json"
        body = descriptor.body

    try:
        prepared = requests.Request(
            descriptor.method.value, url, headers=headers, data=body
        ).prepare()
    except (requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL) as exc:
        raise ConstructionError(f"cannot build URL for {descriptor.path!r}: {exc}") from exc

    parts = urlsplit(prepared.url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConstructionError(f"cannot build URL for {descriptor.path!r}: {prepared.url}")

    if descriptor.signed:
        nonce = timestamp_ms(now or datetime.now(timezone.utc))
        payload = canonical_payload(
            nonce, prepared.method, parts.path or "/", parts.query, body
        )
        prepared.headers[HEADER_KEY] = config.api_key
        prepared.headers[HEADER_TS] = str(nonce)
        prepared.headers[HEADER_SIGN] = sign(config.api_secret, payload)

    if config.subaccount is not None:
        # header values must stay latin-1, so the name is sent URI-encoded
        prepared.headers[HEADER_SUBACCOUNT] = quote(config.subaccount, safe="")

    return prepared
