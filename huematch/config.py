"""
HueMatch — Centralized configuration
All environment variables and constants in a single place.
"""

import os

# ── Paths ─────────────────────────────────────────────────────────────────────

# Persisted reference store (built offline by `huematch-build`)
DEFAULT_REFERENCE_PATH = "custom/ref_embeddings.json"
REFERENCE_PATH = os.getenv("HUEMATCH_REFERENCE_PATH", DEFAULT_REFERENCE_PATH)

# Static assets served under /static, index.html served at /
STATIC_DIR = os.getenv("HUEMATCH_STATIC_DIR", "static")

# ── Server ────────────────────────────────────────────────────────────────────

HOST = os.getenv("HUEMATCH_HOST", "0.0.0.0")
PORT = int(os.getenv("HUEMATCH_PORT", "8090"))
TRUST_PROXY = os.getenv("HUEMATCH_TRUST_PROXY", "0") == "1"

# ── CORS ──────────────────────────────────────────────────────────────────────

CORS_ORIGINS = [o.strip() for o in os.getenv("HUEMATCH_CORS_ORIGINS", "").split(",") if o.strip()]

# ── Rate limiting ─────────────────────────────────────────────────────────────

# One request replenished every RATE_PERIOD_MS per client, up to RATE_BURST queued
RATE_PERIOD_MS = int(os.getenv("HUEMATCH_RATE_PERIOD_MS", "200"))
RATE_BURST = int(os.getenv("HUEMATCH_RATE_BURST", "10"))

# ── Embedder ──────────────────────────────────────────────────────────────────

EMBED_MODEL = os.getenv("HUEMATCH_EMBED_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
EMBED_BACKEND = os.getenv("HUEMATCH_EMBED_BACKEND", "")
MAX_EMBED_CHARS = int(os.getenv("HUEMATCH_MAX_EMBED_CHARS", "2000"))
SERIALIZE_EMBED = os.getenv("HUEMATCH_SERIALIZE_EMBED", "1") == "1"

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "0.3.0"
