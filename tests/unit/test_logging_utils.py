"""Unit tests for gaps_e2e.utils.logging_utils – Loguru JSON routing."""

from __future__ import annotations

import json
import logging
import sys

import pytest
from loguru import logger as loguru_logger

from gaps_e2e.utils.logging_utils import InterceptHandler, configure_json_logging


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)


@pytest.mark.unit
@pytest.mark.usefixtures("restore_logging")
class TestConfigureJsonLogging:

    def test_installs_intercept_handler(self):
        configure_json_logging("debug")

        root = logging.getLogger()
        assert any(isinstance(h, InterceptHandler) for h in root.handlers)
        assert root.level == logging.DEBUG

    def test_records_are_serialized_with_logger_name(self, capsys):
        configure_json_logging("info")

        logging.getLogger("gaps-e2e.pom").info("Navigating to %s", "http://gaps.test/libraries")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["record"]["message"] == "Navigating to http://gaps.test/libraries"
        assert payload["record"]["extra"]["logger_name"] == "gaps-e2e.pom"

    def test_level_filters_debug(self, capsys):
        configure_json_logging("warning")

        logging.getLogger("gaps-e2e.polling").info("quiet")

        assert capsys.readouterr().err == ""
