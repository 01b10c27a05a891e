"""
HueMatch — Error taxonomy

Request-level errors (ResolutionError and subclasses) are turned into a 500
response by the API layer. ReferenceLoadError and BuildError are fatal to the
service startup and to the offline build respectively.
"""


class HueMatchError(Exception):
    """Base error class for HueMatch."""


class ResolutionError(HueMatchError):
    """A single text could not be resolved to a color."""


class EmbeddingFailure(ResolutionError):
    """The embedding provider could not tokenize or embed the text."""


class PoolingFailure(ResolutionError):
    """Token vectors could not be pooled (e.g. zero tokens)."""


class ReferenceLoadError(HueMatchError):
    """The persisted reference store is missing, malformed or incompatible."""


class BuildError(HueMatchError):
    """The reference store could not be built."""


# Names used by the provider contract
ProviderError = EmbeddingFailure
PoolingError = PoolingFailure
