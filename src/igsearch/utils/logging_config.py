"""
Logging for igsearch.

One process-wide SearchLogger wraps the stdlib ``igsearch`` logger. Structured
fields are passed as keyword arguments and travel on the log record, so the
JSON and structured formats can print them next to the message.

Example:
    >>> from igsearch.utils.logging_config import LogLevel, configure_logging
    >>> log = configure_logging(level=LogLevel.DEBUG)
    >>> log.log_category_scan("inputPages", locations=1, files=3)
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import orjson


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        return logging.getLevelName(self.value)


class LogFormat(str, Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.makeLogRecord({}).__dict__.keys() | {"message", "asctime", "taskName"}
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, structured fields included."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": record.created,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(_extra_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode("utf-8")


class StructuredFormatter(logging.Formatter):
    """``time [LEVEL] logger: message | key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        record.asctime = self.formatTime(record, self.datefmt)
        out = f"{record.asctime} [{record.levelname}] {record.name}: {record.getMessage()}"

        fields = _extra_fields(record)
        if fields:
            out += " | " + " ".join(f"{k}={v}" for k, v in fields.items())
        if record.exc_info:
            out += "\n" + self.formatException(record.exc_info)
        return out


_FORMATTERS: dict[LogFormat, Any] = {
    LogFormat.SIMPLE: lambda: logging.Formatter("%(levelname)s: %(message)s"),
    LogFormat.DETAILED: lambda: logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    ),
    LogFormat.JSON: JsonFormatter,
    LogFormat.STRUCTURED: StructuredFormatter,
}


class SearchLogger:
    """
    Logging front end used across igsearch.

    Creating a SearchLogger replaces the handlers of the named stdlib logger:
    a stderr handler when ``enable_console`` is set and a size-rotated file
    handler when ``enable_file`` and ``log_file`` are both given.
    """

    def __init__(
        self,
        name: str = "igsearch",
        level: LogLevel = LogLevel.WARNING,
        format_type: LogFormat = LogFormat.SIMPLE,
        log_file: Path | None = None,
        max_file_size: int = 5 * 1024 * 1024,
        backup_count: int = 3,
        enable_console: bool = True,
        enable_file: bool = False,
    ):
        self.name = name
        self.level = level
        self.format_type = format_type
        self.log_file = log_file

        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.numeric)
        self.logger.handlers.clear()

        handlers: list[logging.Handler] = []
        if enable_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if enable_file and log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    log_file, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8"
                )
            )
        for handler in handlers:
            handler.setLevel(level.numeric)
            handler.setFormatter(_FORMATTERS[format_type]())
            self.logger.addHandler(handler)

    def debug(self, message: str, **fields: Any) -> None:
        self.logger.debug(message, extra=fields)

    def info(self, message: str, **fields: Any) -> None:
        self.logger.info(message, extra=fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.logger.warning(message, extra=fields)

    def error(self, message: str, **fields: Any) -> None:
        self.logger.error(message, extra=fields)

    def exception(self, message: str, **fields: Any) -> None:
        self.logger.exception(message, extra=fields)

    # -- search events -----------------------------------------------------

    def log_search_start(self, term: str, project_root: str, categories: list[str]) -> None:
        self.info(
            f"Starting search for '{term}' in {project_root} (categories: {categories})",
            operation="search_start",
            term=term,
            project_root=project_root,
            categories=categories,
        )

    def log_search_complete(
        self, term: str, files: int, total_matches: int, elapsed_ms: float, **fields: Any
    ) -> None:
        self.info(
            f"Search completed: term='{term}', files={files}, matches={total_matches}, "
            f"time={elapsed_ms:.2f}ms",
            operation="search_complete",
            term=term,
            files=files,
            total_matches=total_matches,
            elapsed_ms=elapsed_ms,
            **fields,
        )

    def log_category_scan(self, category: str, locations: int, files: int) -> None:
        self.debug(
            f"Category {category}: {locations} locations, {files} files with matches",
            operation="category_scan",
            category=category,
            locations=locations,
            files=files,
        )

    def log_file_error(self, file_path: str, error: str, **fields: Any) -> None:
        """An unreadable file was left out of the result."""
        self.warning(
            f"File skipped: {file_path} - {error}",
            operation="file_error",
            file_path=file_path,
            error=error,
            **fields,
        )


_global_logger: SearchLogger | None = None


def get_logger() -> SearchLogger:
    """The process-wide SearchLogger, created with defaults on first use."""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger()
    return _global_logger


def configure_logging(
    level: LogLevel = LogLevel.WARNING,
    format_type: LogFormat = LogFormat.SIMPLE,
    log_file: Path | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
    **kwargs: Any,
) -> SearchLogger:
    """Replace the process-wide SearchLogger."""
    global _global_logger
    _global_logger = SearchLogger(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_console=enable_console,
        enable_file=enable_file,
        **kwargs,
    )
    return _global_logger


def disable_logging() -> None:
    if _global_logger is not None:
        _global_logger.logger.setLevel(logging.CRITICAL + 1)


def enable_debug_logging() -> None:
    if _global_logger is None:
        return
    _global_logger.level = LogLevel.DEBUG
    _global_logger.logger.setLevel(logging.DEBUG)
    for handler in _global_logger.logger.handlers:
        handler.setLevel(logging.DEBUG)
