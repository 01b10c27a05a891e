"""
HueMatch — FastAPI application
Text in, color out: POST /color resolves free text to the RGB color of its
nearest reference embedding.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from . import config
from .errors import ResolutionError
from .models import ColorOutput, HealthResponse, TextInput
from .resolver import Resolver, load_resolver

logger = logging.getLogger(__name__)

# ── Rate limiter in-memory (GCRA) ────────────────────────────────────────────

# client ip -> theoretical arrival time (monotonic ns) of its next request
_rate_buckets: dict[str, int] = {}
_rate_lock = threading.Lock()
_rate_last_cleanup = 0


def _get_client_ip(request: Request) -> str:
    """Extract client IP. Forwarding headers are only honored behind a trusted proxy."""
    if not config.TRUST_PROXY:
        return request.client.host if request.client else "unknown"
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else "unknown"


def _check_rate_limit(client_ip: str, now: int | None = None) -> float | None:
    """
    One request every RATE_PERIOD_MS per client, with RATE_BURST allowed at once.
    Returns None if admitted, otherwise the seconds to wait.
    """
    burst = config.RATE_BURST
    if burst <= 0:
        return None
    period = config.RATE_PERIOD_MS * 1_000_000
    now = time.monotonic_ns() if now is None else now

    with _rate_lock:
        # Periodic cleanup of fully replenished buckets (every 60s)
        global _rate_last_cleanup
        if now - _rate_last_cleanup > 60_000_000_000:
            stale_keys = [k for k, tat in _rate_buckets.items() if tat <= now]
            for k in stale_keys:
                del _rate_buckets[k]
            _rate_last_cleanup = now

        tat = max(_rate_buckets.get(client_ip, now), now) + period
        if tat - now > burst * period:
            return (tat - now - burst * period) / 1e9

        _rate_buckets[client_ip] = tat
        return None


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        retry_after = _check_rate_limit(_get_client_ip(request))
        if retry_after is not None:
            return PlainTextResponse(
                f"Too many requests, retry in {retry_after:.2f}s",
                status_code=429,
                headers={"Retry-After": str(max(1, math.ceil(retry_after)))},
            )
        return await call_next(request)


# ── Routes ───────────────────────────────────────────────────────────────────

router = APIRouter()


def _get_resolver(request: Request) -> Resolver:
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Resolver not initialized")
    return resolver


_Resolver = Depends(_get_resolver)


@router.post("/color", response_model=ColorOutput)
def color(req: TextInput, resolver: Resolver = _Resolver) -> ColorOutput:
    """Return the color closest in meaning to the given text."""
    result = resolver.resolve(req.text)
    return ColorOutput(r=result.r, g=result.g, b=result.b)


@router.get("/health", response_model=HealthResponse)
def health(request: Request, resolver: Resolver = _Resolver) -> HealthResponse:
    return HealthResponse(
        status="ok",
        entries=len(resolver.store),
        dimensions=resolver.store.dimensions,
        version=request.app.version,
    )


@router.get("/", include_in_schema=False)
def index(request: Request) -> Response:
    index_path = Path(request.app.state.static_dir) / "index.html"
    if index_path.is_file():
        return FileResponse(index_path)
    return Response(status_code=404)


# ── App factory ──────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Reference store must be loaded before any traffic; ReferenceLoadError aborts startup
    if app.state.resolver is None:
        app.state.resolver = load_resolver()
    logger.info(
        "Resolver ready: %d reference entries, %d dimensions",
        len(app.state.resolver.store),
        app.state.resolver.store.dimensions,
    )
    yield


async def _resolution_error_handler(request: Request, exc: ResolutionError) -> PlainTextResponse:
    logger.warning("Resolution failed: %s", exc)
    return PlainTextResponse(str(exc), status_code=500)


# Global handler for unhandled exceptions — no stack trace exposed to client
async def _global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Unhandled error: %s", exc, exc_info=True)
    return PlainTextResponse("Internal server error", status_code=500)


def create_app(resolver: Resolver | None = None, static_dir: str | None = None) -> FastAPI:
    """Build the app. Pass a resolver to skip loading the model and store at startup."""
    app = FastAPI(
        title="HueMatch",
        description="Maps free text to a representative color via semantic embeddings.",
        version=config.VERSION,
        lifespan=lifespan,
    )
    app.state.resolver = resolver
    app.state.static_dir = static_dir or config.STATIC_DIR

    # CORS wraps the rate limiter
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(ResolutionError, _resolution_error_handler)
    app.add_exception_handler(Exception, _global_exception_handler)

    app.include_router(router)
    if Path(app.state.static_dir).is_dir():
        app.mount("/static", StaticFiles(directory=app.state.static_dir), name="static")
    else:
        logger.warning("Static directory %s not found, /static is disabled", app.state.static_dir)
    return app


app = create_app()
