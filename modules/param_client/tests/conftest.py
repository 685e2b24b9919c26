from __future__ import annotations

import json as _json
from typing import Any, Dict, List

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return _json.loads(self.text)


class FakeDevice:
    """Records outgoing calls and answers from a queue of canned responses."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.replies: List[Any] = []

    def reply(self, status_code: int = 200, text: str = "") -> None:
        self.replies.append(FakeResponse(status_code, text))

    def fail(self, exc: Exception) -> None:
        self.replies.append(exc)

    def _handle(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        nxt = self.replies.pop(0) if self.replies else FakeResponse(200, "ok")
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._handle("DELETE", url, **kwargs)


@pytest.fixture
def device(monkeypatch) -> FakeDevice:
    fake = FakeDevice()
    monkeypatch.setattr("modules.param_client.services.client.requests.get", fake.get)
    monkeypatch.setattr("modules.param_client.services.client.requests.post", fake.post)
    monkeypatch.setattr("modules.param_client.services.client.requests.delete", fake.delete)
    return fake


@pytest.fixture
def connection_refused() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
