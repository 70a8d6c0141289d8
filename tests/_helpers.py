from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from adapters.v0_client import V0Client
from core.config import AppSettings

API_KEY = "v0_test_key"


class MockV0API:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def queue(self, *responses: Any, status_code: int = 200) -> "MockV0API":
        for item in responses:
            if isinstance(item, httpx.Response) or callable(item):
                self._responses.append(item)
            else:
                self._responses.append(httpx.Response(status_code, json=item))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        item = self._responses.pop(0)
        if callable(item) and not isinstance(item, httpx.Response):
            return item(request)
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)

    def client(self, settings: AppSettings) -> V0Client:
        return V0Client(settings, transport=httpx.MockTransport(self.handler))
