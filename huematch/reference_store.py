"""
HueMatch — Reference store
Ordered, immutable (embedding, color) pairs persisted as a single JSON file.

File format (order is significant: it decides ties at match time):

    [
      {"embedding": [0.12, -0.03, ...], "color": [255, 0, 0]},
      ...
    ]
"""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np

from .errors import ReferenceLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """RGB triple, each channel 0-255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} out of range 0-255: {value}")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        if len(values) != 3:
            raise ValueError(f"Color needs exactly 3 channels, got {len(values)}")
        return cls(*values)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class ReferenceEntry:
    embedding: tuple[float, ...]
    color: Color


class ReferenceStore:
    """
    Read-only sequence of ReferenceEntry, loaded once and shared by all requests.

    All embeddings share the same dimensionality. The embeddings are also kept
    as a non-writeable float64 matrix so lookups never copy them.
    """

    def __init__(self, entries: Iterable[ReferenceEntry]) -> None:
        self._entries: tuple[ReferenceEntry, ...] = tuple(entries)

        dimensions = {len(e.embedding) for e in self._entries}
        if len(dimensions) > 1:
            raise ValueError(f"Reference embeddings have mixed dimensions: {sorted(dimensions)}")
        self._dimensions = dimensions.pop() if dimensions else 0

        matrix = np.array([e.embedding for e in self._entries], dtype=np.float64)
        matrix = matrix.reshape(len(self._entries), self._dimensions)
        matrix.setflags(write=False)
        self._matrix = matrix

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ReferenceEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> ReferenceEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"ReferenceStore(entries={len(self)}, dimensions={self._dimensions})"

    @property
    def entries(self) -> tuple[ReferenceEntry, ...]:
        return self._entries

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def matrix(self) -> np.ndarray:
        """(entries, dimensions) embedding matrix, in store order."""
        return self._matrix

    # ── Serialization ────────────────────────────────────────────────────

    def to_records(self) -> list[dict[str, Any]]:
        return [
            {"embedding": list(entry.embedding), "color": list(entry.color.as_tuple())}
            for entry in self._entries
        ]

    @classmethod
    def from_records(cls, records: Any, expected_dimensions: int | None = None) -> ReferenceStore:
        """Validate decoded JSON records. Raises ReferenceLoadError on any defect."""
        if not isinstance(records, list):
            raise ReferenceLoadError(f"Reference store must be a list of records, got {type(records).__name__}")
        if not records:
            raise ReferenceLoadError("Reference store is empty")

        entries = [_parse_record(i, record) for i, record in enumerate(records)]

        try:
            store = cls(entries)
        except ValueError as exc:
            raise ReferenceLoadError(str(exc)) from exc

        if expected_dimensions is not None and store.dimensions != expected_dimensions:
            raise ReferenceLoadError(
                f"Reference store has {store.dimensions} dimensions, "
                f"embedding provider produces {expected_dimensions}"
            )
        return store

    @classmethod
    def load(cls, path: str | os.PathLike[str], expected_dimensions: int | None = None) -> ReferenceStore:
        """Load and validate a persisted store. Fatal (ReferenceLoadError) on any problem."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                records = json.load(f)
        except FileNotFoundError:
            raise ReferenceLoadError(f"Reference store not found: {path}") from None
        except OSError as exc:
            raise ReferenceLoadError(f"Cannot read reference store {path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ReferenceLoadError(f"Reference store {path} is not valid JSON: {exc}") from exc

        store = cls.from_records(records, expected_dimensions=expected_dimensions)
        logger.info("Loaded %d reference embeddings (dim=%d) from %s", len(store), store.dimensions, path)
        return store

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the store atomically: a temp file in the target dir, then rename."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.to_records(), f, indent=2, allow_nan=False)
                f.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Saved %d reference embeddings to %s", len(self), path)


def _parse_record(index: int, record: Any) -> ReferenceEntry:
    if not isinstance(record, dict):
        raise ReferenceLoadError(f"Record {index} is not an object")
    if "embedding" not in record or "color" not in record:
        raise ReferenceLoadError(f"Record {index} must have 'embedding' and 'color' fields")

    raw_embedding = record["embedding"]
    if not isinstance(raw_embedding, list) or not raw_embedding:
        raise ReferenceLoadError(f"Record {index}: embedding must be a non-empty list of numbers")
    embedding = []
    for value in raw_embedding:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ReferenceLoadError(f"Record {index}: embedding contains invalid value {value!r}")
        embedding.append(float(value))

    raw_color = record["color"]
    if not isinstance(raw_color, list):
        raise ReferenceLoadError(f"Record {index}: color must be a list of 3 integers")
    try:
        color = Color.from_sequence(raw_color)
    except ValueError as exc:
        raise ReferenceLoadError(f"Record {index}: {exc}") from exc

    return ReferenceEntry(embedding=tuple(embedding), color=color)
