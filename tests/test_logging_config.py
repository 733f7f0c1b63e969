"""Tests for logging setup."""

from __future__ import annotations

import logging
import sys

import pytest

from mdbook_private.utils.logging_config import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_module_loggers_reach_package_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        configure_logging("INFO")

        get_logger("mdbook_private.preprocessor").info("Processing chapter '%s'", "Intro")

        assert "Processing chapter 'Intro'" in caplog.text
        assert caplog.records[-1].name == "mdbook_private.preprocessor"

    def test_level_filters_records(self, caplog: pytest.LogCaptureFixture) -> None:
        configure_logging("WARNING")

        get_logger("mdbook_private.chapters").debug("Removing private chapter")

        assert "Removing private chapter" not in caplog.text

    def test_handler_writes_to_stderr(self) -> None:
        logger = configure_logging("INFO")

        streams = [
            handler.stream for handler in logger.handlers if isinstance(handler, logging.StreamHandler)
        ]

        assert streams == [sys.stderr]

    def test_installs_a_single_handler(self) -> None:
        logger = configure_logging("DEBUG")
        handler_count = len(logger.handlers)

        configure_logging("WARNING")

        assert len(logger.handlers) == handler_count
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert configure_logging("chatty").level == logging.INFO
