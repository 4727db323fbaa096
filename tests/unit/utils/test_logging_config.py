"""Tests for igsearch.utils.logging_config module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from igsearch.utils.logging_config import (
    JsonFormatter,
    LogFormat,
    LogLevel,
    SearchLogger,
    StructuredFormatter,
    get_logger,
)


class TestEnums:
    def test_values(self):
        assert LogLevel.WARNING == "WARNING"
        assert LogFormat.STRUCTURED == "structured"


class TestSearchLogger:
    """Tests for SearchLogger class."""

    def test_init_default(self):
        logger = SearchLogger(name="igsearch-test-default")
        assert logger.level == LogLevel.WARNING
        assert logger.logger.level == logging.WARNING

    def test_with_file_logging(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "igsearch.log"
        logger = SearchLogger(
            name="igsearch-test-file",
            level=LogLevel.INFO,
            log_file=log_file,
            enable_file=True,
            enable_console=False,
        )
        logger.log_search_complete("Patient", files=2, total_matches=5, elapsed_ms=3.0)
        for handler in logger.logger.handlers:
            handler.flush()
        assert "Search completed: term='Patient', files=2, matches=5" in log_file.read_text()

    def test_file_error_is_warning(self, caplog):
        logger = SearchLogger(name="igsearch-test-warn", enable_console=False)
        with caplog.at_level(logging.WARNING, logger="igsearch-test-warn"):
            logger.log_file_error("input/a.md", "denied", operation="read")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.file_path == "input/a.md"
        assert record.operation == "read"

    def test_get_logger_singleton(self):
        assert get_logger() is get_logger()


class TestFormatters:
    def _record(self) -> logging.LogRecord:
        return logging.makeLogRecord(
            {"name": "igsearch", "msg": "scan done", "levelname": "INFO", "category": "fsh"}
        )

    def test_json(self):
        data = json.loads(JsonFormatter().format(self._record()))
        assert data["message"] == "scan done"
        assert data["level"] == "INFO"
        assert data["category"] == "fsh"

    def test_structured(self):
        line = StructuredFormatter().format(self._record())
        assert "[INFO] igsearch: scan done" in line
        assert "category=fsh" in line
