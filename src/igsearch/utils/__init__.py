"""
Utility functions and helper modules.

- Error classification, collection and reporting
- Logging configuration
- Safe file reading helpers
- Output formatting and highlighting
"""

from .error_handling import (
    ConfigurationError,
    ErrorCollector,
    FileAccessError,
    PatternError,
    PermissionError,
    SearchError,
    create_error_report,
    handle_file_error,
)
from .formatter import format_result, render_highlight_console
from .helpers import read_text, relative_display_path
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCollector",
    "FileAccessError",
    "PatternError",
    "PermissionError",
    "SearchError",
    "create_error_report",
    "handle_file_error",
    # Formatting
    "format_result",
    "render_highlight_console",
    # Helpers
    "read_text",
    "relative_display_path",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
