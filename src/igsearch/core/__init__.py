"""
Core functionality for the igsearch package.

This module contains the fundamental components of the search engine:
- The IGSearch engine
- Configuration
- Per-project search state
- Core data types
"""

from .api import CategoryScan, IGSearch
from .config import SearchConfig
from .state import SearchStateStore
from .types import (
    Category,
    FileMatchResult,
    LineMatch,
    OutputFormat,
    SearchLocation,
    SearchOutcome,
    SearchState,
    SearchStats,
    default_categories,
)

__all__ = [
    # Main classes
    "IGSearch",
    "CategoryScan",
    "SearchConfig",
    "SearchStateStore",
    # Data types
    "Category",
    "FileMatchResult",
    "LineMatch",
    "OutputFormat",
    "SearchLocation",
    "SearchOutcome",
    "SearchState",
    "SearchStats",
    "default_categories",
]
