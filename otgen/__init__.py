"""otgen - Optimality-Theoretic candidate generation and typology search spaces.

GEN, the stress-length family of linguistic systems, and the
combinatorial generators that build factorial-typology competitions.
"""

__version__ = "0.1.0"

# Observability exports for convenience
from otgen.observ import get_logger, timer, timed
from otgen.errors import (
    OTGenError,
    ErrorCode,
    ValidationError,
    InvalidLength,
    InvalidMorphologicalType,
    InvalidFeatureType,
    InvalidFeatureValue,
    FrozenElementError,
    MorphologyError,
    LexiconError,
    UnknownSystemError,
)

__all__ = [
    # Version
    "__version__",
    # Logging
    "get_logger",
    "timer",
    "timed",
    # Errors
    "OTGenError",
    "ErrorCode",
    "ValidationError",
    "InvalidLength",
    "InvalidMorphologicalType",
    "InvalidFeatureType",
    "InvalidFeatureValue",
    "FrozenElementError",
    "MorphologyError",
    "LexiconError",
    "UnknownSystemError",
]
