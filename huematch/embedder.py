"""
HueMatch — Embedder
Lazy-loaded token embeddings from a sentence-transformers model.
Default: sentence-transformers/all-MiniLM-L6-v2 (~90MB, 384 dim)

Supports:
- ONNX backend for faster inference (optional: pip install 'huematch[onnx]')
- Custom models via HUEMATCH_EMBED_MODEL env var

The provider returns one vector per token (special tokens included); pooling
to a sentence vector happens in huematch.pooling so the build and the
service share exactly the same reduction.
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer

from . import config
from .errors import EmbeddingFailure

logger = logging.getLogger(__name__)

_PROBE_TEXT = "color"
_load_lock = threading.Lock()


class EmbeddingProvider(Protocol):
    """Anything that turns text into an (N tokens, D) matrix."""

    @property
    def dimensions(self) -> int: ...

    def embed(self, text: str) -> np.ndarray: ...


@lru_cache(maxsize=4)
def get_model(model_name: str, backend: str = "") -> SentenceTransformer:
    """Load a model once and keep it cached."""
    from sentence_transformers import SentenceTransformer

    kwargs = {}
    if backend:
        kwargs["backend"] = backend
        logger.info("Loading model %s with %s backend", model_name, backend)

    model = SentenceTransformer(model_name, **kwargs)
    logger.info("Loaded model %s (dim=%s)", model_name, model.get_sentence_embedding_dimension())
    return model


def _truncate(text: str, max_chars: int) -> str:
    """Truncate text to max chars to prevent OOM."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars]


class SentenceTransformerEmbedder:
    """
    Embedding provider backed by sentence-transformers.

    Args:
        model_name: model id or local path (default: HUEMATCH_EMBED_MODEL)
        backend: "" for torch, "onnx" for ONNX runtime (default: HUEMATCH_EMBED_BACKEND)
        serialize: hold a lock around inference (default: HUEMATCH_SERIALIZE_EMBED)
        max_chars: input truncation length (default: HUEMATCH_MAX_EMBED_CHARS)
    """

    def __init__(
        self,
        model_name: str | None = None,
        backend: str | None = None,
        serialize: bool | None = None,
        max_chars: int | None = None,
    ):
        self.model_name = model_name or config.EMBED_MODEL
        self.backend = config.EMBED_BACKEND if backend is None else backend
        self.max_chars = max_chars or config.MAX_EMBED_CHARS
        serialize = config.SERIALIZE_EMBED if serialize is None else serialize
        # The inference runtime is not assumed to be thread-safe
        self._infer_lock = threading.Lock() if serialize else nullcontext()
        self._dimensions: int | None = None

    @property
    def model(self) -> SentenceTransformer:
        with _load_lock:
            try:
                return get_model(self.model_name, self.backend)
            except Exception as exc:
                raise EmbeddingFailure(f"Failed to load embedding model {self.model_name}: {exc}") from exc

    @property
    def dimensions(self) -> int:
        """Token vector size, discovered by embedding a probe word once."""
        if self._dimensions is None:
            self._dimensions = int(self.embed(_PROBE_TEXT).shape[1])
        return self._dimensions

    def embed(self, text: str) -> np.ndarray:
        """Return the (tokens, dimensions) matrix for a single text."""
        if not isinstance(text, str):
            raise EmbeddingFailure(f"Expected text, got {type(text).__name__}")
        model = self.model
        truncated = _truncate(text, self.max_chars)

        try:
            with self._infer_lock:
                tokens = model.encode(
                    truncated,
                    output_value="token_embeddings",
                    convert_to_numpy=False,
                    show_progress_bar=False,
                )
        except Exception as exc:
            raise EmbeddingFailure(f"Failed to embed text: {exc}") from exc

        if hasattr(tokens, "detach"):
            tokens = tokens.detach().cpu().float().numpy()
        matrix = np.asarray(tokens, dtype=np.float32)
        if matrix.ndim != 2:
            raise EmbeddingFailure(f"Model returned token embeddings of shape {matrix.shape}")
        return matrix


@lru_cache(maxsize=1)
def get_embedder() -> SentenceTransformerEmbedder:
    """Process-wide default provider, configured from the environment."""
    return SentenceTransformerEmbedder()
