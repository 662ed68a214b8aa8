"""Logging helpers.

All modules obtain their logger through get_logger() so that a single call
to setup_logging() configures the whole package.
"""

import json
import logging
import sys
import uuid
from typing import Optional

ROOT_LOGGER_NAME = "travesty"

_run_id: Optional[str] = None


class RunIdFilter(logging.Filter):
    """Attach the current run id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _run_id or "-"
        return True


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "run_id": getattr(record, "run_id", "-"),
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package hierarchy.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger whose name starts with the package root.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", json_format: bool = False, stream=None) -> logging.Logger:
    """Configure the package logger.

    Logs go to stderr by default so they never mix with generated text.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...).
        json_format: Emit JSON lines instead of plain text.
        stream: Output stream (defaults to sys.stderr).

    Returns:
        The configured package root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    root.setLevel(numeric_level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(RunIdFilter())
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(run_id)s): %(message)s"
        ))
    root.addHandler(handler)
    root.propagate = False
    return root


def set_run_id(run_id: Optional[str] = None) -> str:
    """Set the run id attached to log records, generating one if omitted."""
    global _run_id
    _run_id = run_id or uuid.uuid4().hex[:8]
    return _run_id


def get_run_id() -> Optional[str]:
    """Return the current run id, if any."""
    return _run_id
