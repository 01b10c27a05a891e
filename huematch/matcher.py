"""
HueMatch — Similarity matcher
Cosine similarity and brute-force best-match over the reference store.

The store is small (a few hundred entries), so every request scans all of it.
Ties go to the entry that appears first in the store.
"""

from __future__ import annotations

from typing import Any, NamedTuple

import numpy as np

from .reference_store import Color, ReferenceStore


class Match(NamedTuple):
    index: int
    score: float
    color: Color


def score(a: Any, b: Any) -> float:
    """Cosine similarity in [-1, 1]. Zero-magnitude vectors score 0.0, NaN or inf raise ValueError."""
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise ValueError(f"Dimension mismatch: {va.shape} vs {vb.shape}")

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    similarity = float(np.dot(va, vb)) / (norm_a * norm_b)
    if not np.isfinite(similarity):
        raise ValueError("Similarity is not finite")
    return min(1.0, max(-1.0, similarity))


def scan(query: Any, store: ReferenceStore) -> Match:
    """Linear scan returning the first entry with the strictly highest score."""
    if len(store) == 0:
        raise ValueError("Cannot match against an empty reference store")

    query_vec = np.asarray(query, dtype=np.float64)
    best_index = -1
    best_score = float("-inf")

    for index, vector in enumerate(store.matrix):
        similarity = score(query_vec, vector)
        if similarity > best_score:
            best_index, best_score = index, similarity

    return Match(index=best_index, score=best_score, color=store[best_index].color)


def best_match(query: Any, store: ReferenceStore) -> Color:
    """Color of the closest reference entry."""
    return scan(query, store).color
