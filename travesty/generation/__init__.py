"""Generation engine: skip index, context matching, sampling and formatting."""

from .skip_index import SkipIndex
from .sampler import FrequencyTable, Sampler
from .matcher import match_pattern
from .pattern import first_pattern, advance
from .formatter import OutputFormatter, VERSE_INDENT
from .generator import (
    TravestyGenerator,
    GenerationResult,
    generate,
)

__all__ = [
    "SkipIndex",
    "FrequencyTable",
    "Sampler",
    "match_pattern",
    "first_pattern",
    "advance",
    "OutputFormatter",
    "VERSE_INDENT",
    "TravestyGenerator",
    "GenerationResult",
    "generate",
]
