"""
Unit Tests for Centralized Logging.

Tests handler wiring, level overrides and output streams.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from lightwave.core.config_schema import LoggingSchema
from lightwave.core.logging import get_logger, setup_logging


def _our_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers
        if type(h) in (logging.StreamHandler, RotatingFileHandler)
    ]


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_defaults_to_warning_on_stderr(self) -> None:
        setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING

        handlers = _our_handlers()
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_level_override(self) -> None:
        setup_logging(LoggingSchema(level="ERROR"), level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_config_level_is_used(self) -> None:
        setup_logging(LoggingSchema(level="info"))
        assert logging.getLogger().level == logging.INFO

    def test_console_handler_can_be_disabled(self) -> None:
        config = LoggingSchema(handlers={"console": {"enabled": False}})
        setup_logging(config)
        assert _our_handlers() == []

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(_our_handlers()) == 1

    def test_file_handler_writes_json_lines(self, tmp_path) -> None:
        log_path = tmp_path / "logs" / "cli.jsonl"
        config = LoggingSchema(
            level="DEBUG",
            handlers={
                "console": {"enabled": False},
                "file": {"enabled": True, "path": str(log_path), "max_bytes": 4096, "backup_count": 1},
            },
        )
        setup_logging(config)

        get_logger("lightwave.test").info("API request", method="GET", path="/status")
        for handler in _our_handlers():
            handler.flush()

        record = json.loads(log_path.read_text().strip().splitlines()[-1])
        assert record["event"] == "API request"
        assert record["level"] == "info"
        assert record["logger"] == "lightwave.test"
        assert record["method"] == "GET"
        assert record["path"] == "/status"
        assert "timestamp" in record
        assert "func_name" in record


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_structlog_logger(self) -> None:
        setup_logging()
        logger = get_logger("lightwave.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")

    def test_unknown_format_is_rejected_by_schema(self) -> None:
        with pytest.raises(ValueError):
            LoggingSchema(format="xml")


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
