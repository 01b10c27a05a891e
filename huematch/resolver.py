"""
HueMatch — Resolver pipeline
text → token embeddings → mean pooling → best match → Color

A Resolver holds the provider and the reference store for the lifetime of the
process and never writes to either, so one instance serves concurrent requests.
"""

from __future__ import annotations

import logging
import os

import numpy as np

from . import config
from .embedder import EmbeddingProvider, get_embedder
from .errors import EmbeddingFailure, ReferenceLoadError
from .matcher import scan
from .pooling import mean_pool
from .reference_store import Color, ReferenceStore

logger = logging.getLogger(__name__)


def sentence_vector(provider: EmbeddingProvider, text: str) -> np.ndarray:
    """Embed and pool one text. Shared by the resolver and the reference builder."""
    try:
        tokens = provider.embed(text)
    except EmbeddingFailure:
        raise
    except Exception as exc:
        raise EmbeddingFailure(f"Embedding provider failed: {exc}") from exc
    return mean_pool(tokens)


class Resolver:
    def __init__(self, provider: EmbeddingProvider, store: ReferenceStore):
        self.provider = provider
        self.store = store

    def resolve(self, text: str) -> Color:
        """
        Map text to the color of its nearest reference embedding.
        Raises EmbeddingFailure or PoolingFailure (both ResolutionError).
        """
        query = sentence_vector(self.provider, text)
        match = scan(query, self.store)
        logger.debug("Resolved %r to entry %d (score=%.4f)", text[:80], match.index, match.score)
        return match.color


def load_resolver(
    reference_path: str | os.PathLike[str] | None = None,
    provider: EmbeddingProvider | None = None,
) -> Resolver:
    """
    Startup step: load the store and check it against the provider.
    Any problem raises ReferenceLoadError, and the service must not start.
    """
    provider = provider or get_embedder()
    path = reference_path or config.REFERENCE_PATH

    try:
        dimensions = provider.dimensions
    except EmbeddingFailure as exc:
        raise ReferenceLoadError(f"Cannot determine embedding dimensions: {exc}") from exc

    store = ReferenceStore.load(path, expected_dimensions=dimensions)
    return Resolver(provider, store)
