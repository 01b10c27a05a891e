"""
HueMatch — Client SDK tests
HueClient runs against the app through TestClient (an httpx.Client), AsyncHueClient
through httpx.ASGITransport. Unit tests cover status → exception mapping without network.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from huematch.builder import build
from huematch.client import (
    AsyncHueClient,
    HueClient,
    HueError,
    HueNotFoundError,
    HueRateLimitError,
    HueServerError,
    HueValidationError,
    _raise_for_status,
)
from huematch.main import create_app
from huematch.models import HealthResponse
from huematch.reference_store import Color
from huematch.resolver import Resolver

from .conftest import BLUE, RED, FakeProvider


@pytest.fixture
def app(tmp_path):
    provider = FakeProvider(fail_on=("\x00",))
    resolver = Resolver(provider, build([("love", RED), ("sad", BLUE)], provider))
    return create_app(resolver=resolver, static_dir=str(tmp_path))


def _make_client(app) -> HueClient:
    """HueClient wired to the in-process app."""
    hc = HueClient.__new__(HueClient)
    hc.base_url = "http://testserver"
    hc._client = TestClient(app)
    return hc


def _make_async_client(app) -> AsyncHueClient:
    """AsyncHueClient wired to the in-process app (ASGITransport is async only)."""
    hc = AsyncHueClient.__new__(AsyncHueClient)
    hc.base_url = "http://testserver"
    hc._client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
    return hc


# ── Unit: _raise_for_status ──────────────────────────────────────────────────


class TestRaiseForStatus:
    def test_success_does_not_raise(self):
        _raise_for_status(httpx.Response(200, json={"r": 1, "g": 2, "b": 3}))

    def test_404(self):
        with pytest.raises(HueNotFoundError) as exc_info:
            _raise_for_status(httpx.Response(404, json={"detail": "Not Found"}))
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Not Found"

    def test_422(self):
        with pytest.raises(HueValidationError):
            _raise_for_status(httpx.Response(422, json={"detail": [{"loc": ["body", "text"]}]}))

    def test_429_plain_text(self):
        with pytest.raises(HueRateLimitError) as exc_info:
            _raise_for_status(httpx.Response(429, text="Too many requests, retry in 0.20s"))
        assert "Too many requests" in exc_info.value.detail

    def test_500_plain_text(self):
        with pytest.raises(HueServerError) as exc_info:
            _raise_for_status(httpx.Response(500, text="Failed to embed text"))
        assert exc_info.value.detail == "Failed to embed text"

    def test_other_status(self):
        with pytest.raises(HueError) as exc_info:
            _raise_for_status(httpx.Response(418, json={"detail": "teapot"}))
        assert exc_info.value.status_code == 418


# ── Sync client ──────────────────────────────────────────────────────────────


class TestHueClient:
    def test_color(self, app):
        with _make_client(app) as hue:
            assert hue.color("love") == RED
            assert hue.color("sad") == Color(0, 0, 255)

    def test_health(self, app):
        with _make_client(app) as hue:
            health = hue.health()
        assert isinstance(health, HealthResponse)
        assert health.entries == 2

    def test_server_error(self, app):
        with _make_client(app) as hue:
            with pytest.raises(HueServerError) as exc_info:
                hue.color("\x00")
        assert "tokenizer rejected" in exc_info.value.detail

    def test_base_url_trailing_slash_stripped(self):
        hue = HueClient("http://localhost:8090/")
        try:
            assert hue.base_url == "http://localhost:8090"
        finally:
            hue.close()


# ── Async client ─────────────────────────────────────────────────────────────


class TestAsyncHueClient:
    @pytest.mark.anyio
    async def test_color(self, app):
        async with _make_async_client(app) as hue:
            assert await hue.color("love") == RED

    @pytest.mark.anyio
    async def test_health(self, app):
        async with _make_async_client(app) as hue:
            health = await hue.health()
        assert health.dimensions == 8

    @pytest.mark.anyio
    async def test_pooling_failure_is_server_error(self, app):
        async with _make_async_client(app) as hue:
            with pytest.raises(HueServerError):
                await hue.color("   ")
