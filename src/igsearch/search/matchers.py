"""
Pattern construction and per-file matching for igsearch.

Search terms are always literal: every regex metacharacter is escaped before
compiling, so ``Patient.name[0]`` only finds that exact text. Whole-word
search wraps the escaped term in word boundaries; case-insensitive search
compiles with ``IGNORECASE``. Files are scanned line by line and each line
with at least one hit becomes a LineMatch carrying the number of hits.

Functions:
    create_search_pattern: Compile a search term into a match pattern
    find_line_matches: Collect matching lines of a text
    search_in_file: Scan one file into a FileMatchResult

Example:
    >>> from igsearch.search.matchers import create_search_pattern, find_line_matches
    >>> rx = create_search_pattern("cat", case_sensitive=False, whole_words=True)
    >>> [m.line_number for m in find_line_matches("category\\nthe Cat sat", rx)]
    [2]
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import regex as regex_mod

from ..core.types import FileMatchResult, LineMatch
from ..utils.error_handling import ErrorCollector, PatternError, handle_file_error
from ..utils.helpers import read_text, relative_display_path
from ..utils.logging_config import SearchLogger


@lru_cache(maxsize=64)
def _get_compiled_regex(pattern: str, flags: int) -> regex_mod.Pattern:
    return regex_mod.compile(pattern, flags=flags)


def create_search_pattern(
    search_term: str, case_sensitive: bool = False, whole_words: bool = False
) -> regex_mod.Pattern:
    """
    Build the match pattern for a literal search term.

    Raises:
        PatternError: If the escaped term still fails to compile.
    """
    escaped = regex_mod.escape(search_term)
    if whole_words:
        escaped = rf"\b{escaped}\b"

    flags = 0 if case_sensitive else regex_mod.IGNORECASE
    try:
        return _get_compiled_regex(escaped, flags)
    except regex_mod.error as e:
        raise PatternError(f"Invalid search pattern: {e}", search_term) from e


def count_matches(line: str, pattern: regex_mod.Pattern) -> int:
    """Number of non-overlapping matches of ``pattern`` in ``line``."""
    return sum(1 for _ in pattern.finditer(line))


def find_line_matches(text: str, pattern: regex_mod.Pattern) -> list[LineMatch]:
    matches: list[LineMatch] = []
    if not text:
        return matches

    # split on "\n" only; a trailing "\r" is removed by strip()
    for i, line in enumerate(text.split("\n")):
        n = count_matches(line, pattern)
        if n:
            matches.append(LineMatch(line_number=i + 1, line=line.strip(), match_count=n))
    return matches


def search_in_file(
    path: Path,
    pattern: regex_mod.Pattern,
    category: str,
    project_root: Path,
    error_collector: ErrorCollector | None = None,
    logger: SearchLogger | None = None,
) -> FileMatchResult | None:
    """
    Scan a file for ``pattern``.

    Returns None when nothing matches, or when the file cannot be read; read
    failures are logged and collected, never raised.
    """
    try:
        text = read_text(path)
    except OSError as e:
        handle_file_error(path, "read", e, error_collector, logger)
        return None

    matches = find_line_matches(text, pattern)
    if not matches:
        return None

    return FileMatchResult(
        file_path=path,
        file_name=path.name,
        relative_path=relative_display_path(path, project_root),
        category=category,
        matches=matches,
        total_matches=sum(m.match_count for m in matches),
    )
