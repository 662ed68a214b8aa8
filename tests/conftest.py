"""Shared fixtures for the test suite."""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

SAMPLE_CORPUS = """
The cat sat on the mat. The dog sat on the log and the cat watched the dog.
On Saturday the cat sat down by the door, and the dog lay down on the mat.
Then the rain came down on the roof and the cat and the dog slept on the mat
until the sun came out again and the day was done.
"""


@pytest.fixture
def corpus_text():
    """A small prose corpus without sentinel symbols."""
    return SAMPLE_CORPUS


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    root = logging.getLogger("travesty")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)
