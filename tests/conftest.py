"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    s = Settings()
    s.football_api_key = "football-key"
    s.guardian_api_key = "guardian-key"
    s.cors_origins = ["*"]
    s.environment = "test"
    return s


class RecordingUpstream:
    """MockTransport handler that records requests and replies from a route table.

    ``routes`` maps a URL path to (status code, JSON body). ``respond``, when
    set, takes over for every request.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.respond: Callable[[httpx.Request], httpx.Response] | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.respond is not None:
            return self.respond(request)
        status, body = self.routes.get(request.url.path, (404, {"message": "not found"}))
        return httpx.Response(status, json=body)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def football_upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def guardian_upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def client(settings, football_upstream, guardian_upstream) -> TestClient:
    app = create_app(
        settings,
        football_transport=httpx.MockTransport(football_upstream),
        guardian_transport=httpx.MockTransport(guardian_upstream),
    )
    return TestClient(app)


def guardian_payload(*titles: str) -> dict:
    results = [
        {"id": f"football/{i}", "webTitle": title, "fields": {"headline": title}}
        for i, title in enumerate(titles)
    ]
    return {"response": {"status": "ok", "total": len(results), "results": results}}
