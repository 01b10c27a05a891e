"""
HueMatch — Python SDK Client
Client for the HueMatch color server via HTTP.
Supports both synchronous (HueClient) and asynchronous (AsyncHueClient) usage.

Usage:
    from huematch import HueClient

    with HueClient("http://localhost:8090") as hue:
        color = hue.color("a stormy night")
        print(color.as_tuple())
"""

from __future__ import annotations

from typing import Any

import httpx

from .models import ColorOutput, HealthResponse
from .reference_store import Color

# ── Exceptions ───────────────────────────────────────────────────────────────


class HueError(Exception):
    """Base error class for the HueMatch client."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class HueNotFoundError(HueError):
    """Resource not found (404)."""


class HueValidationError(HueError):
    """Request body rejected (422)."""


class HueRateLimitError(HueError):
    """Rate limit exceeded (429)."""


class HueServerError(HueError):
    """Server-side error (5xx), including texts the resolver could not embed."""


# ── Helpers ──────────────────────────────────────────────────────────────────


def _raise_for_status(response: httpx.Response) -> None:
    """Converts HTTP errors into typed HueMatch exceptions."""
    if response.is_success:
        return

    status = response.status_code
    try:
        body = response.json()
        detail = body.get("detail", body) if isinstance(body, dict) else body
    except ValueError:
        detail = response.text

    if status == 404:
        raise HueNotFoundError("Resource not found", status, detail)
    if status == 422:
        raise HueValidationError("Validation error", status, detail)
    if status == 429:
        raise HueRateLimitError("Rate limit exceeded", status, detail)
    if status >= 500:
        raise HueServerError("Server error", status, detail)

    raise HueError(f"HTTP {status}", status, detail)


def _to_color(response: httpx.Response) -> Color:
    body = ColorOutput(**response.json())
    return Color(body.r, body.g, body.b)


# ── Synchronous client ───────────────────────────────────────────────────────


class HueClient:
    """
    Synchronous client for the HueMatch API.

    Args:
        base_url: HueMatch server URL (default: http://localhost:8090)
        timeout: Request timeout in seconds (default: 10.0)
    """

    def __init__(self, base_url: str = "http://localhost:8090", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout)

    def __enter__(self) -> HueClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Closes the HTTP client."""
        self._client.close()

    def color(self, text: str) -> Color:
        """Resolves text to its closest reference color."""
        r = self._client.post("/color", json={"text": text})
        _raise_for_status(r)
        return _to_color(r)

    def health(self) -> HealthResponse:
        r = self._client.get("/health")
        _raise_for_status(r)
        return HealthResponse(**r.json())


# ── Asynchronous client ──────────────────────────────────────────────────────


class AsyncHueClient:
    """
    Asynchronous client for the HueMatch API.

    Usage:
        async with AsyncHueClient() as hue:
            color = await hue.color("sunrise over the desert")
    """

    def __init__(self, base_url: str = "http://localhost:8090", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncHueClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def color(self, text: str) -> Color:
        r = await self._client.post("/color", json={"text": text})
        _raise_for_status(r)
        return _to_color(r)

    async def health(self) -> HealthResponse:
        r = await self._client.get("/health")
        _raise_for_status(r)
        return HealthResponse(**r.json())
