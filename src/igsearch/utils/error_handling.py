"""
Error handling and reporting for igsearch.

Search failures are contained where they are detected. A file that cannot be
read is classified, logged and collected, and the search moves on to the next
candidate; only the engine's top level turns an unexpected exception into the
``error`` string of a search outcome.

Classes:
    ErrorSeverity: How much a problem affects the search result
    ErrorCategory: What kind of problem it is
    ErrorInfo: One collected problem
    ErrorCollector: The problems met by one search
    SearchError: Base exception class for igsearch errors

Functions:
    handle_file_error: Classify, log and collect a file-level failure
    create_error_report: Human-readable report of collected errors

Example:
    >>> from igsearch.utils.error_handling import ErrorCollector, handle_file_error
    >>> collector = ErrorCollector()
    >>> try:
    ...     Path("input/missing.fsh").read_text()
    ... except OSError as e:
    ...     handle_file_error(Path("input/missing.fsh"), "read", e, collector)
    >>> collector.get_summary()["total_errors"]
    1
"""

from __future__ import annotations

import builtins
import time
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """How much a problem affects the search result."""

    LOW = "low"  # one file partly unreadable
    MEDIUM = "medium"  # one file skipped
    HIGH = "high"  # the search could not run as asked
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Kinds of problems met while searching a project."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    file_path: Path | None = None
    exception_type: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)


class SearchError(Exception):
    """
    Base exception for igsearch.

    Subclasses pin ``category``, ``severity`` and ``suggestions`` as class
    attributes; instances carry the message, the file involved and free-form
    context.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    suggestions: tuple[str, ...] = ()

    def __init__(
        self,
        message: str,
        file_path: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file_path = file_path
        self.context: dict[str, Any] = dict(context or {})
        self.timestamp = time.time()


class FileAccessError(SearchError):
    """A candidate file vanished or is not a regular file."""

    category = ErrorCategory.FILE_ACCESS
    suggestions = ("The file may have been removed by a running build; search again",)

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, file_path, context)


class PermissionError(SearchError):
    """The current user may not read a candidate file."""

    category = ErrorCategory.PERMISSION
    suggestions = (
        "Check file permissions",
        "Verify the project folder is readable by the current user",
    )

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, file_path, context)


class PatternError(SearchError):
    """The search term could not be turned into a match pattern."""

    category = ErrorCategory.PATTERN
    severity = ErrorSeverity.HIGH

    def __init__(self, message: str, term: str) -> None:
        super().__init__(message, context={"term": term})


class ConfigurationError(SearchError):
    """A SearchConfig value is out of range."""

    category = ErrorCategory.CONFIGURATION
    severity = ErrorSeverity.HIGH
    suggestions = ("Fall back to SearchConfig() defaults",)

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)


# Order matters: the more specific OSError subclasses come first.
_OS_ERROR_CATEGORIES: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    ((FileNotFoundError, IsADirectoryError, NotADirectoryError), ErrorCategory.FILE_ACCESS),
    (BuiltinPermissionError, ErrorCategory.PERMISSION),
    (OSError, ErrorCategory.FILE_ACCESS),
)


class ErrorCollector:
    """
    Problems met by one search.

    Only the first ``max_errors`` problems are kept in detail; every problem
    is counted.
    """

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.errors: list[ErrorInfo] = []
        self.error_counts: Counter[ErrorCategory] = Counter()

    def add_error(
        self,
        exception: Exception,
        category: ErrorCategory | None = None,
        severity: ErrorSeverity | None = None,
        file_path: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if isinstance(exception, SearchError):
            info = ErrorInfo(
                category=exception.category,
                severity=exception.severity,
                message=exception.message,
                file_path=exception.file_path or file_path,
                exception_type=type(exception).__name__,
                context={**exception.context, **(context or {})},
                suggestions=list(exception.suggestions),
            )
        else:
            info = ErrorInfo(
                category=category or self._classify_exception(exception),
                severity=severity or ErrorSeverity.MEDIUM,
                message=str(exception),
                file_path=file_path,
                exception_type=type(exception).__name__,
                context=dict(context or {}),
            )

        if len(self.errors) < self.max_errors:
            self.errors.append(info)
        self.error_counts[info.category] += 1

    def _classify_exception(self, exception: Exception) -> ErrorCategory:
        for types, category in _OS_ERROR_CATEGORIES:
            if isinstance(exception, types):
                return category
        return ErrorCategory.UNKNOWN

    def get_errors_by_category(self, category: ErrorCategory) -> list[ErrorInfo]:
        return [e for e in self.errors if e.category == category]

    def has_critical_errors(self) -> bool:
        return any(e.severity == ErrorSeverity.CRITICAL for e in self.errors)

    def skipped_files(self) -> list[Path]:
        """Files that were left out of the result because of a problem."""
        return [e.file_path for e in self.errors if e.file_path is not None]

    def get_summary(self) -> dict[str, Any]:
        by_severity = Counter(e.severity for e in self.errors)
        return {
            "total_errors": sum(self.error_counts.values()),
            "by_category": {cat.value: n for cat, n in self.error_counts.items()},
            "by_severity": {sev.value: by_severity[sev] for sev in ErrorSeverity},
            "has_critical": self.has_critical_errors(),
        }

    def clear(self) -> None:
        self.errors.clear()
        self.error_counts.clear()


def handle_file_error(
    file_path: Path,
    operation: str,
    exception: Exception,
    error_collector: ErrorCollector | None = None,
    logger: Any | None = None,
) -> SearchError:
    """
    Turn an I/O failure on one file into a SearchError and report it.

    Args:
        file_path: The file being processed
        operation: What was being done to it ("read", "sniff", ...)
        exception: The exception raised by the I/O call
        error_collector: Collector of the running search, if any
        logger: SearchLogger to report the skipped file to, if any

    Returns:
        The classified SearchError.
    """
    error: SearchError
    if isinstance(exception, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        error = FileAccessError(f"Cannot {operation} file: {exception}", file_path)
    elif isinstance(exception, BuiltinPermissionError):
        error = PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    elif isinstance(exception, OSError):
        error = FileAccessError(f"I/O error during {operation}: {exception}", file_path)
    else:
        error = SearchError(f"Unexpected error during {operation}: {exception}", file_path)

    if error_collector is not None:
        error_collector.add_error(error)
    if logger is not None:
        logger.log_file_error(str(file_path), str(error), operation=operation)
    return error


def create_error_report(error_collector: ErrorCollector) -> str:
    if not error_collector.errors:
        return "No errors occurred during the search operation."

    summary = error_collector.get_summary()
    lines = [
        "Search Error Report",
        "=" * 50,
        "",
        f"Total errors: {summary['total_errors']}",
        "",
        "Errors by category:",
    ]
    lines.extend(f"  {cat}: {n}" for cat, n in summary["by_category"].items())

    skipped = [e for e in error_collector.errors if e.file_path is not None]
    other = [e for e in error_collector.errors if e.file_path is None]
    if skipped:
        lines.extend(["", "Skipped files:"])
        lines.extend(f"  - {e.file_path}: {e.message}" for e in skipped)
    if other:
        lines.extend(["", "Other errors:"])
        lines.extend(f"  - {e.message}" for e in other)
    return "\n".join(lines)
