"""
Request descriptors.

A ``Request`` describes one intended API call before it is signed or sent:
HTTP verb, exchange-relative path, query parameters, body and whether the
call must be authenticated.  Descriptors are frozen; the builder turns
them into ``requests.PreparedRequest`` objects.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

Query = Tuple[Tuple[str, str], ...]


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PUT = "PUT"


def format_param(value: Any) -> str:
    """Render a query value the way the exchange expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp()))
    return str(value)


def normalize_query(params: Optional[Mapping[str, Any]]) -> Query:
    """Drop ``None`` values, stringify the rest and sort by key."""
    if not params:
        return ()
    return tuple(
        sorted((str(k), format_param(v)) for k, v in params.items() if v is not None)
    )


def encode_query(query: Union[Query, Mapping[str, Any], None]) -> str:
    """Encode parameters into a query string that is stable for a given set."""
    if isinstance(query, Mapping) or query is None:
        query = normalize_query(query)
    return urlencode(sorted(query))


def encode_body(payload: Any) -> bytes:
    """Compact JSON encoding, matching what the exchange signs against."""
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def canonical_payload(
    nonce: int, method: str, path: str, query: str = "", body: Optional[bytes] = None
) -> bytes:
    """
    Build the signable string ``<nonce><METHOD><path>[?<query>][<body>]``.

    *path* is the path exactly as it appears on the request line
    (including any base path such as ``/api``), *query* the already
    encoded query string.
    """
    payload = f"{nonce}{method.upper()}{path}"
    if query:
        payload += "?" + query
    data = payload.encode("utf-8")
    if body:
        data += body
    return data


@dataclass(frozen=True)
class Request:
    """Immutable description of a single API call."""

    method: Method
    path: str
    query: Query = ()
    body: Optional[bytes] = None
    signed: bool = False

    @classmethod
    def create(
        cls,
        method: Union[Method, str],
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        signed: bool = False,
    ) -> "Request":
        """
        Build a descriptor from loose arguments.

        *body* may be raw ``bytes`` or any JSON-serialisable object; it is
        encoded once here so the bytes that are signed are the bytes that
        are sent.
        """
        if body is not None and not isinstance(body, bytes):
            body = encode_body(body)
        return cls(
            method=Method(str(getattr(method, "value", method)).upper()),
            path=path,
            query=normalize_query(params),
            body=body,
            signed=signed,
        )

    @property
    def query_string(self) -> str:
        return encode_query(self.query)
