import hashlib
import os
import tempfile

# Keep the module-level app away from the repo's static dir — set BEFORE any huematch import
os.environ["HUEMATCH_STATIC_DIR"] = tempfile.mkdtemp(prefix="huematch-static-")
os.environ["HUEMATCH_TRUST_PROXY"] = "0"

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from huematch.errors import EmbeddingFailure  # noqa: E402
from huematch.main import _rate_buckets  # noqa: E402
from huematch.reference_store import Color, ReferenceEntry, ReferenceStore  # noqa: E402

FAKE_DIM = 8

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
TEAL = Color(0, 128, 128)


def word_vector(word: str) -> np.ndarray:
    """Deterministic pseudo-embedding for a single word."""
    seed = int.from_bytes(hashlib.sha256(word.encode("utf-8")).digest()[:8], "little")
    return np.random.default_rng(seed).standard_normal(FAKE_DIM).astype(np.float32)


class FakeProvider:
    """Embedding provider stand-in: one deterministic vector per whitespace token."""

    dimensions = FAKE_DIM

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.fail_on = set(fail_on)
        self.calls: list[str] = []

    def embed(self, text: str) -> np.ndarray:
        self.calls.append(text)
        if text in self.fail_on:
            raise EmbeddingFailure(f"tokenizer rejected {text!r}")
        words = text.split()
        return np.array([word_vector(w) for w in words], dtype=np.float32).reshape(len(words), FAKE_DIM)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def two_entry_store() -> ReferenceStore:
    """[1, 0] → red, [0, 1] → blue."""
    return ReferenceStore(
        [
            ReferenceEntry(embedding=(1.0, 0.0), color=RED),
            ReferenceEntry(embedding=(0.0, 1.0), color=BLUE),
        ]
    )


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter state between tests."""
    _rate_buckets.clear()
    yield
    _rate_buckets.clear()
