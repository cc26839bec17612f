"""
Client configuration.

``ClientConfig`` is the single value a client is built from: credentials,
optional sub-account, base URL, timeout and the optional transport and
logger overrides.  It is frozen so it can be shared between threads.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

DEFAULT_BASE_URL = "https://ftx.com/api"
DEFAULT_TIMEOUT = 10.0

# Connection pool size per host
_POOL_SIZE = 10


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = ""
    api_secret: str = field(default="", repr=False)
    subaccount: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    session: Optional[requests.Session] = field(default=None, repr=False, compare=False)
    logger: Optional[logging.Logger] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_env(cls, prefix: str = "FTX_") -> "ClientConfig":
        """
        Read configuration from environment variables.

        Recognised variables (with the default ``FTX_`` prefix):
        ``FTX_API_KEY``, ``FTX_API_SECRET``, ``FTX_SUBACCOUNT``,
        ``FTX_BASE_URL`` and ``FTX_TIMEOUT``.

        Raises
        ------
        ValueError
            If ``FTX_TIMEOUT`` is set but is not a positive number.
        """
        timeout_raw = os.getenv(prefix + "TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(f"Invalid {prefix}TIMEOUT '{timeout_raw}'. Must be a number.")
            if timeout <= 0:
                raise ValueError(f"{prefix}TIMEOUT must be positive, got {timeout}.")

        return cls(
            api_key=os.getenv(prefix + "API_KEY", ""),
            api_secret=os.getenv(prefix + "API_SECRET", ""),
            subaccount=os.getenv(prefix + "SUBACCOUNT") or None,
            base_url=os.getenv(prefix + "BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)


def make_session(pool_size: int = _POOL_SIZE) -> requests.Session:
    """Return a ``requests.Session`` with a bounded keep-alive pool."""
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
