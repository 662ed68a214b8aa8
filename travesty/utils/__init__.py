"""Utility modules for the travesty generator."""

from .logging import (
    get_logger,
    setup_logging,
    set_run_id,
    get_run_id,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "set_run_id",
    "get_run_id",
]
