"""Travesty generation loop.

Builds the corpus buffer and skip index once, then repeats
match -> sample -> format -> advance until the requested number of
characters has been produced and the last symbol was a space.
"""

import random
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import GenerationConfig, check_core_parameters
from ..corpus.buffer import CorpusBuffer, build_buffer
from ..utils.logging import get_logger
from .formatter import OutputFormatter
from .matcher import match_pattern
from .pattern import advance, first_pattern
from .sampler import FrequencyTable, Sampler
from .skip_index import SkipIndex

logger = get_logger(__name__)

OutputCallback = Callable[[str], None]


@dataclass
class GenerationResult:
    """Output of a generation run."""
    text: str
    char_count: int
    seed_text: str
    steps: int = 0


class TravestyGenerator:
    """Generates text that mimics a corpus at the character level.

    Args:
        corpus_text: Raw corpus text; it is normalized here.
        config: Generation parameters.
        rng: Random source; overrides config.seed when given.
    """

    def __init__(
        self,
        corpus_text: str,
        config: Optional[GenerationConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GenerationConfig()
        check_core_parameters(
            self.config.buffer_size,
            self.config.pattern_length,
            self.config.out_chars,
            self.config.line_width,
        )
        self.buffer: CorpusBuffer = build_buffer(
            corpus_text, self.config.buffer_size, self.config.pattern_length
        )
        self.index = SkipIndex.build(self.buffer)
        self.sampler = Sampler(rng=rng, seed=self.config.seed)

    def debug_info(self) -> str:
        """Summary of parameters and buffer sizes."""
        return (
            f"buffer_size={self.config.buffer_size} "
            f"pattern_length={self.config.pattern_length} "
            f"out_chars={self.config.out_chars} "
            f"line_width={self.config.line_width} "
            f"verse={self.config.verse} "
            f"corpus size={self.buffer.source_length} "
            f"body size={self.buffer.body_length} "
            f"buffer_array size={len(self.buffer)} "
            f"wraparound={self.buffer.tail!r}"
        )

    def run(self, on_output: Optional[OutputCallback] = None) -> GenerationResult:
        """Generate text.

        Args:
            on_output: Called with each printable fragment as it is produced.

        Returns:
            GenerationResult with the full text and the character count.
        """
        logger.debug(self.debug_info())

        pattern = first_pattern(self.buffer)
        formatter = OutputFormatter(
            self.config.line_width,
            verse=self.config.verse,
            chars_emitted=self.config.pattern_length,
        )
        table = FrequencyTable()
        pieces = [pattern]
        if on_output:
            on_output(pattern)

        steps = 0
        while not formatter.finished(self.config.out_chars):
            match_pattern(pattern, self.index, self.buffer, table)
            symbol = self.sampler.sample(table)
            fragment = formatter.emit(symbol)
            if fragment:
                pieces.append(fragment)
                if on_output:
                    on_output(fragment)
            pattern = advance(pattern, symbol)
            table.clear()
            steps += 1

        logger.info(f"Generated {formatter.chars_emitted} characters in {steps} steps")
        return GenerationResult(
            text="".join(pieces),
            char_count=formatter.chars_emitted,
            seed_text=self.buffer.text[:self.config.pattern_length],
            steps=steps,
        )


def generate(
    corpus_text: str,
    buffer_capacity: int,
    pattern_length: int,
    out_chars: int,
    line_width: int,
    verse_mode: bool = False,
    rng_seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    on_output: Optional[OutputCallback] = None,
) -> GenerationResult:
    """Generate travesty text from a corpus.

    Raises:
        InvalidParameter: If a parameter is out of range.
        InsufficientInput: If the normalized corpus is shorter than pattern_length.
        NoContinuation: If a pattern has no observed continuation.
    """
    config = GenerationConfig(
        buffer_size=buffer_capacity,
        pattern_length=pattern_length,
        out_chars=out_chars,
        line_width=line_width,
        verse=verse_mode,
        seed=rng_seed,
    )
    return TravestyGenerator(corpus_text, config, rng=rng).run(on_output)
