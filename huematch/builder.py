"""
HueMatch — Reference builder (offline)
Embeds a vocabulary of (word, color) pairs and persists the reference store.

Fail-fast: one word that cannot be embedded aborts the build and nothing is written.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .embedder import EmbeddingProvider
from .errors import BuildError, ResolutionError
from .reference_store import Color, ReferenceEntry, ReferenceStore
from .resolver import sentence_vector

logger = logging.getLogger(__name__)


def build(vocabulary: Iterable[tuple[str, Color]], provider: EmbeddingProvider) -> ReferenceStore:
    """Embed every word in vocabulary order. Duplicates stay distinct entries."""
    entries: list[ReferenceEntry] = []
    for word, color in vocabulary:
        try:
            vector = sentence_vector(provider, word)
        except ResolutionError as exc:
            raise BuildError(f"Failed to embed {word!r}: {exc}") from exc

        entries.append(ReferenceEntry(embedding=tuple(float(x) for x in vector), color=color))
        logger.info("Embedded word: %s", word)

    if not entries:
        raise BuildError("Vocabulary is empty")

    try:
        return ReferenceStore(entries)
    except ValueError as exc:
        raise BuildError(str(exc)) from exc


def build_and_save(
    vocabulary: Iterable[tuple[str, Color]],
    provider: EmbeddingProvider,
    path: str | os.PathLike[str],
) -> ReferenceStore:
    store = build(vocabulary, provider)
    store.save(path)
    return store
