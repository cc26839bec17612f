"""HMAC-SHA256 request signing."""

from __future__ import annotations

import hashlib
import hmac
from typing import Union


def sign(secret: str, payload: Union[str, bytes]) -> str:
    """Return the lowercase hex HMAC-SHA256 of *payload* keyed by *secret*."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
