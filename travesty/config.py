"""Configuration management for the travesty generator."""

import json
import numbers
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

from .corpus.buffer import minimum_capacity
from .errors import InvalidParameter
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationConfig:
    """Parameters for a single generation run."""
    buffer_size: int = 3000  # Characters of corpus analyzed, wraparound included
    pattern_length: int = 9  # Order of the Markov context
    out_chars: int = 2000  # Characters to output before stopping at a space
    line_width: int = 50  # Approximate output line length
    verse: bool = False
    seed: Optional[int] = None


@dataclass
class LimitsConfig:
    """Bounds enforced on user supplied parameters."""
    max_buffer_size: int = 10000
    min_pattern_length: int = 3
    max_pattern_length: int = 15


@dataclass
class Config:
    """Main configuration container."""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False


def _resolve_env_vars(value: Any) -> Any:
    """Resolve environment variables in string values."""
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_var = value[2:-1]
        resolved = os.environ.get(env_var, "")
        if not resolved:
            logger.warning(f"Environment variable {env_var} not set")
        return resolved
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


def _as_int(section: str, key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{section}.{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{section}.{key} must be an integer, got {value!r}")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _parse_generation_config(data: Dict) -> GenerationConfig:
    """Parse the generation section."""
    defaults = GenerationConfig()
    seed = data.get("seed", defaults.seed)
    if seed in ("", None):
        seed = None
    else:
        seed = _as_int("generation", "seed", seed)

    return GenerationConfig(
        buffer_size=_as_int("generation", "buffer_size", data.get("buffer_size", defaults.buffer_size)),
        pattern_length=_as_int("generation", "pattern_length", data.get("pattern_length", defaults.pattern_length)),
        out_chars=_as_int("generation", "out_chars", data.get("out_chars", defaults.out_chars)),
        line_width=_as_int("generation", "line_width", data.get("line_width", defaults.line_width)),
        verse=_as_bool(data.get("verse", defaults.verse)),
        seed=seed,
    )


def _parse_limits_config(data: Dict) -> LimitsConfig:
    """Parse the limits section."""
    defaults = LimitsConfig()
    return LimitsConfig(
        max_buffer_size=_as_int("limits", "max_buffer_size", data.get("max_buffer_size", defaults.max_buffer_size)),
        min_pattern_length=_as_int("limits", "min_pattern_length", data.get("min_pattern_length", defaults.min_pattern_length)),
        max_pattern_length=_as_int("limits", "max_pattern_length", data.get("max_pattern_length", defaults.max_pattern_length)),
    )


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Copy config.json.sample to config.json and adjust it."
        )

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError("Invalid config file: top level must be an object")

    data = _resolve_env_vars(data)
    config = Config()

    if "generation" in data:
        config.generation = _parse_generation_config(data["generation"])

    if "limits" in data:
        config.limits = _parse_limits_config(data["limits"])

    config.debug = _as_bool(data.get("debug", False))
    config.log_level = data.get("log_level", "INFO")
    config.log_json = _as_bool(data.get("log_json", False))

    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    return {
        "generation": {
            "buffer_size": 3000,
            "pattern_length": 9,
            "out_chars": 2000,
            "line_width": 50,
            "verse": False,
            "seed": None,
        },
        "limits": {
            "max_buffer_size": 10000,
            "min_pattern_length": 3,
            "max_pattern_length": 15,
        },
        "debug": False,
        "log_level": "INFO",
        "log_json": False,
    }


def check_core_parameters(
    buffer_capacity: int,
    pattern_length: int,
    out_chars: int,
    line_width: int,
) -> None:
    """Check the constraints the generation core relies on.

    Raises:
        InvalidParameter: If any constraint is violated.
    """
    for name, value in (
        ("buffer_capacity", buffer_capacity),
        ("pattern_length", pattern_length),
        ("out_chars", out_chars),
        ("line_width", line_width),
    ):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidParameter(f"{name} must be an integer, got {value!r}")

    if pattern_length < 1:
        raise InvalidParameter(f"pattern_length must be at least 1, got {pattern_length}")
    if buffer_capacity < minimum_capacity(pattern_length):
        raise InvalidParameter(
            f"buffer_capacity ({buffer_capacity}) must be at least "
            f"2 * pattern_length + 1 ({minimum_capacity(pattern_length)})"
        )
    if out_chars < 0:
        raise InvalidParameter(f"out_chars must not be negative, got {out_chars}")
    if line_width < 1:
        raise InvalidParameter(f"line_width must be at least 1, got {line_width}")


def validate_generation_config(generation: GenerationConfig, limits: Optional[LimitsConfig] = None) -> None:
    """Validate user supplied parameters against the core constraints and limits.

    Raises:
        InvalidParameter: If a parameter is out of range.
    """
    check_core_parameters(
        generation.buffer_size,
        generation.pattern_length,
        generation.out_chars,
        generation.line_width,
    )
    if limits is None:
        return

    if generation.buffer_size > limits.max_buffer_size:
        raise InvalidParameter(
            f"buffer_size ({generation.buffer_size}) exceeds the maximum of {limits.max_buffer_size}"
        )
    if not limits.min_pattern_length <= generation.pattern_length <= limits.max_pattern_length:
        raise InvalidParameter(
            f"pattern_length must be between {limits.min_pattern_length} and "
            f"{limits.max_pattern_length}, got {generation.pattern_length}"
        )
