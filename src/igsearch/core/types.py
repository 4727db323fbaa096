"""
Core data types for igsearch.

This module contains the value records produced by a search, the per-project
search state, and the fixed set of file categories an IG project is searched in.

Key Types:
    Category: The six fixed file-classification buckets
    SearchState: Per-project search configuration and last results
    SearchLocation: A resolved directory scope contributing candidate files
    LineMatch: One matching line in a file
    FileMatchResult: All matching lines of one file
    SearchStats: Counters collected while a search runs
    SearchOutcome: What a search returns to its caller

Example:
    >>> from igsearch.core.types import Category, default_categories
    >>> Category("outputHtml").is_output
    True
    >>> [name for name, on in default_categories().items() if on]
    ['fsh', 'inputResources', 'inputPages', 'translations']
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class Category(str, Enum):
    """File categories of an IG project. Values are the names callers use."""

    FSH = "fsh"
    INPUT_RESOURCES = "inputResources"
    INPUT_PAGES = "inputPages"
    TRANSLATIONS = "translations"
    OUTPUT_RESOURCES = "outputResources"
    OUTPUT_HTML = "outputHtml"

    @property
    def is_output(self) -> bool:
        """True for categories whose files are produced by a build."""
        return self in OUTPUT_CATEGORIES

    @classmethod
    def parse(cls, name: str | Category) -> Category | None:
        """Look up a category by wire name, returning None for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None


OUTPUT_CATEGORIES = frozenset({Category.OUTPUT_RESOURCES, Category.OUTPUT_HTML})


def default_categories() -> dict[str, bool]:
    """Category enablement for a project that has never been searched."""
    return {
        Category.FSH.value: True,
        Category.INPUT_RESOURCES.value: True,
        Category.INPUT_PAGES.value: True,
        Category.TRANSLATIONS.value: True,
        Category.OUTPUT_RESOURCES.value: False,
        Category.OUTPUT_HTML.value: False,
    }


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


@dataclass(slots=True)
class SearchLocation:
    """
    A directory scope searched for one category.

    Attributes:
        path: Absolute directory to enumerate
        extensions: Lower-case extensions to keep; empty means every file
        recursive: Whether to descend into subdirectories
        file_filter: Optional content predicate applied to each candidate
    """

    path: Path
    extensions: tuple[str, ...] = ()
    recursive: bool = True
    file_filter: Callable[[Path], bool] | None = None

    def accepts(self, file_path: Path) -> bool:
        return self.file_filter is None or self.file_filter(file_path)


@dataclass(slots=True)
class LineMatch:
    """
    One matching line.

    ``match_count`` is the number of hits counted toward the result budget.
    On the line where the budget runs out it is clipped to the hits that
    still fit and can be lower than the hits in ``line``.
    """

    line_number: int
    line: str
    match_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"lineNumber": self.line_number, "line": self.line, "matchCount": self.match_count}


@dataclass(slots=True)
class FileMatchResult:
    """
    Matches found in a single file.

    Attributes:
        file_path: Absolute path of the file
        file_name: Base name of the file
        relative_path: Path relative to the project root, for display
        category: Wire name of the category the file was found in
        matches: Matching lines in file order
        total_matches: Sum of ``match_count`` over ``matches``
    """

    file_path: Path
    file_name: str
    relative_path: str
    category: str
    matches: list[LineMatch] = field(default_factory=list)
    total_matches: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "filePath": str(self.file_path),
            "fileName": self.file_name,
            "relativePath": self.relative_path,
            "category": self.category,
            "matches": [m.to_dict() for m in self.matches],
            "totalMatches": self.total_matches,
        }


@dataclass(slots=True)
class SearchState:
    """
    Search configuration and last results of one project.

    ``results`` always holds the output of the most recent search, minus any
    output-category entries dropped when a build started.
    """

    search_term: str = ""
    case_sensitive: bool = False
    whole_words: bool = False
    categories: dict[str, bool] = field(default_factory=default_categories)
    results: list[FileMatchResult] = field(default_factory=list)
    last_search_time: float | None = None


@dataclass(slots=True)
class SearchStats:
    """
    Counters for a single search.

    Attributes:
        files_scanned: Candidate files whose content was scanned
        files_matched: Files with at least one matching line
        files_skipped: Files that could not be read
        categories_searched: Enabled categories that were visited
        elapsed_ms: Wall-clock time of the search
    """

    files_scanned: int = 0
    files_matched: int = 0
    files_skipped: int = 0
    categories_searched: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class SearchOutcome:
    """Result of ``IGSearch.perform_search``."""

    results: list[FileMatchResult] = field(default_factory=list)
    total_matches: int = 0
    error: str | None = None
    truncated: bool = False
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Shape consumed by presentation layers."""
        return {
            "results": [r.to_dict() for r in self.results],
            "totalMatches": self.total_matches,
            "error": self.error,
            "truncated": self.truncated,
        }
