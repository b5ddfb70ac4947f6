"""
Shared fixtures for Actions Gateway tests.
"""

from collections import Counter
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from shared.config import get_config


TEST_API_KEY = "test-key-123"


class FakeClock:
    """Monotonic clock under test control."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class UpstreamRecorder:
    """``httpx.MockTransport`` handler that serves canned responses per host.

    Routes are keyed by ``(host, path)``; a route value is either an
    ``httpx.Response`` or a callable producing one from the request.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.requests: List[httpx.Request] = []
        self.calls: Counter = Counter()

    def add(self, host: str, path: str, response: Any) -> None:
        self.routes[(host, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.calls[request.url.host] += 1
        route = self.routes.get((request.url.host, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if callable(route):
            return route(request)
        return route

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def service_config():
    """Configuration pointing every upstream at a test host."""
    return get_config(
        api_key=TEST_API_KEY,
        translation_cache_ttl=60,
        chuck_norris_url="https://chuck.test",
        dad_joke_url="https://dad.test",
        lingva_url="https://lingva.test",
        mymemory_url="https://mymemory.test",
    )


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Build a route that answers with a fresh JSON response on each call."""
    def _respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return _respond
