# HueMatch package

from .client import (
    AsyncHueClient,
    HueClient,
    HueError,
    HueNotFoundError,
    HueRateLimitError,
    HueServerError,
    HueValidationError,
)
from .config import VERSION as __version__
from .errors import (
    BuildError,
    EmbeddingFailure,
    HueMatchError,
    PoolingFailure,
    ReferenceLoadError,
    ResolutionError,
)
from .reference_store import Color, ReferenceEntry, ReferenceStore
from .resolver import Resolver, load_resolver

__all__ = [
    "__version__",
    "Color",
    "ReferenceEntry",
    "ReferenceStore",
    "Resolver",
    "load_resolver",
    "HueMatchError",
    "ResolutionError",
    "EmbeddingFailure",
    "PoolingFailure",
    "ReferenceLoadError",
    "BuildError",
    "HueClient",
    "AsyncHueClient",
    "HueError",
    "HueNotFoundError",
    "HueValidationError",
    "HueRateLimitError",
    "HueServerError",
]
