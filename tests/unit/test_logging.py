"""Tests for the logging helpers."""

import io
import json

import pytest

from travesty.utils.logging import get_logger, set_run_id, get_run_id, setup_logging


class TestGetLogger:
    """Tests for logger naming."""

    def test_prefixes_package_root(self):
        assert get_logger("corpus").name == "travesty.corpus"

    def test_keeps_package_names(self):
        assert get_logger("travesty.generation.generator").name == "travesty.generation.generator"


class TestSetupLogging:
    """Tests for handler configuration."""

    def test_json_output_includes_run_id(self):
        stream = io.StringIO()
        setup_logging("INFO", json_format=True, stream=stream)
        set_run_id("run42")
        get_logger("tests").info("hello")
        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "hello"
        assert record["run_id"] == "run42"
        assert record["logger"] == "travesty.tests"

    def test_level_filters_messages(self):
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)
        get_logger("tests").info("quiet")
        get_logger("tests").warning("loud")
        output = stream.getvalue()
        assert "quiet" not in output
        assert "loud" in output

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError):
            setup_logging("CHATTY")

    def test_generated_run_id(self):
        run_id = set_run_id()
        assert run_id == get_run_id()
        assert len(run_id) == 8
