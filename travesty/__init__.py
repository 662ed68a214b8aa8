"""Travesty: k-th order character Markov text generation."""

__version__ = "1.0.0"

from .errors import (
    TravestyError,
    InvalidParameter,
    InsufficientInput,
    NoContinuation,
)
from .generation import generate, GenerationResult, TravestyGenerator

__all__ = [
    "__version__",
    "TravestyError",
    "InvalidParameter",
    "InsufficientInput",
    "NoContinuation",
    "generate",
    "GenerationResult",
    "TravestyGenerator",
]
