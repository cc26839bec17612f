"""Shared fixtures: a real ``requests.Session`` wired to an in-memory adapter."""

from __future__ import annotations

import io
import json
from typing import Any, List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from ftxapi.client import FTXClient
from ftxapi.config import ClientConfig

BASE_URL = "https://ftx.test/api"
API_KEY = "test-key"
API_SECRET = "test-secret"


class StubAdapter(BaseAdapter):
    """Answers requests from a queue of canned responses and records them."""

    def __init__(self) -> None:
        super().__init__()
        self.sent: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self._queue: List[Any] = []

    def reply(
        self,
        status: int = 200,
        body: Any = b"",
        raw: Optional[Any] = None,
        headers: Optional[dict] = None,
    ) -> None:
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._queue.append((status, body, raw, headers or {}))

    def fail(self, exc: Exception) -> None:
        self._queue.append(exc)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.sent[-1]

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent.append(request)
        self.timeouts.append(timeout)
        item = self._queue.pop(0) if self._queue else (200, b'{"success":true,"result":null}', None, {})
        if isinstance(item, Exception):
            raise item
        status, body, raw, headers = item

        response = requests.Response()
        response.status_code = status
        response.headers = CaseInsensitiveDict(headers)
        response.raw = raw if raw is not None else io.BytesIO(body)
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        return response

    def close(self) -> None:
        pass


class BrokenStream(io.RawIOBase):
    """A body stream that fails on the first read."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        raise requests.exceptions.ChunkedEncodingError("connection broken mid-body")


def envelope(result: Any = None, success: bool = True, error: Optional[str] = None) -> dict:
    data = {"success": success, "result": result}
    if error is not None:
        data["error"] = error
    return data


@pytest.fixture
def stub() -> StubAdapter:
    return StubAdapter()


@pytest.fixture
def session(stub):
    s = requests.Session()
    s.mount("https://ftx.test", stub)
    yield s
    s.close()


@pytest.fixture
def config(session) -> ClientConfig:
    return ClientConfig(
        api_key=API_KEY,
        api_secret=API_SECRET,
        base_url=BASE_URL,
        session=session,
    )


@pytest.fixture
def client(config):
    with FTXClient(config) as c:
        yield c
