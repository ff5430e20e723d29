"""
Unit Test Fixtures.

Fixtures for unit tests - the LightWave server is faked.
Unit tests should be fast and isolated, never touching the network.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from lightwave.cli.client import LightWaveClient


# =============================================================================
# Fake Server
# =============================================================================


class FakeLedServer:
    """
    In-process stand-in for a LightWave server.

    Routes are keyed by (method, path) where path includes the /api prefix.
    Unknown routes answer 404 like the real server. Every request is recorded.

    Usage:
        def test_list(fake_server: FakeLedServer):
            fake_server.add("GET", "/api/effects", json={"effects": []})
            ...
            assert fake_server.last.method == "GET"
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        """Register a canned response."""

        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self._routes[(method, path)] = respond

    def fail_with(self, error: type[httpx.HTTPError], message: str = "Connection refused") -> None:
        """Make every request raise a transport error."""

        def raise_error(request: httpx.Request) -> httpx.Response:
            raise error(message, request=request)

        self._routes.clear()
        self._fallback = raise_error

    def _fallback(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Not Found"})

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path), self._fallback)
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decoded body of the most recent request, None if it had none."""
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def fake_server(monkeypatch) -> FakeLedServer:
    """
    Route every LightWaveClient through a FakeLedServer.

    Patches the class-level transport so clients created inside CLI
    commands use the fake as well.
    """
    server = FakeLedServer()
    monkeypatch.setattr(LightWaveClient, "transport", httpx.MockTransport(server.handle))
    return server


# =============================================================================
# Sample Payloads
# =============================================================================


@pytest.fixture
def effects_payload() -> dict[str, Any]:
    return {
        "effects": [
            {"name": "rainbow", "description": "Cycles through the color wheel"},
            {"name": "pulse", "description": "  Breathes a single color  "},
        ]
    }


@pytest.fixture
def effect_info_payload() -> dict[str, Any]:
    return {
        "name": "rainbow",
        "description": "Cycles through the color wheel",
        "parameters": [
            {
                "name": "speed",
                "type": "float",
                "description": "Cycle speed",
                "default": 1.0,
                "min_value": 0.1,
                "max_value": 5.0,
            },
            {
                "name": "direction",
                "type": "str",
                "description": "Travel direction",
                "default": "forward",
                "options": ["forward", "reverse"],
            },
        ],
    }


@pytest.fixture
def running_payload() -> dict[str, Any]:
    return {
        "running": True,
        "name": "rainbow",
        "description": "Cycles through the color wheel",
        "parameters": {"speed": 2.5, "reverse": False},
        "start_time": "2024-05-01T12:00:00",
        "runtime": 125.0,
    }
