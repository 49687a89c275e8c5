from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from alpaca_rest.auth import Alpaca


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = ""

    def json(self) -> Any:
        return json.loads(self.text)


@dataclass
class FakeHttp:
    """Stands in for `requests.request`; replays queued responses and records calls."""

    responses: list[FakeResponse | Exception] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def reply(self, body: Any = None, status_code: int = 200) -> None:
        text = "" if body is None else (body if isinstance(body, str) else json.dumps(body))
        self.responses.append(FakeResponse(status_code=status_code, text=text))

    def fail(self, exc: Exception) -> None:
        self.responses.append(exc)

    def __call__(self, **kwargs: Any) -> FakeResponse:
        self.calls.append(kwargs)
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHttp:
    http = FakeHttp()
    monkeypatch.setattr("alpaca_rest.transport.requests.request", http)
    return http


@pytest.fixture
def client() -> Alpaca:
    return Alpaca(api_key="key-id", api_secret="secret-key")
