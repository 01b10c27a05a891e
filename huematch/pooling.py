"""
HueMatch — Vector pooling
Reduces per-token embeddings to a single sentence vector (mean pooling).
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import PoolingFailure


def mean_pool(token_vectors: Any) -> np.ndarray:
    """
    Element-wise mean of an (N, D) sequence of token vectors.

    Raises PoolingFailure when N == 0, the input is not a 2-D matrix, or any
    value is NaN or infinite.
    Used identically when building the reference store and at request time.
    """
    try:
        tokens = np.asarray(token_vectors, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise PoolingFailure(f"Token vectors are not numeric: {exc}") from exc

    if tokens.ndim != 2:
        if tokens.size == 0:
            raise PoolingFailure("Cannot pool zero token vectors")
        raise PoolingFailure(f"Expected a (tokens, dimensions) matrix, got shape {tokens.shape}")

    count, dimensions = tokens.shape
    if count == 0:
        raise PoolingFailure("Cannot pool zero token vectors")
    if dimensions == 0:
        raise PoolingFailure("Token vectors have zero dimensions")

    # Offset by the first token: identical tokens pool back to themselves exactly
    first = tokens[0]
    pooled = first + (tokens - first).sum(axis=0) / count
    if not np.isfinite(pooled).all():
        raise PoolingFailure("Token vectors contain non-finite values")
    return pooled
