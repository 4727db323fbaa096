from __future__ import annotations

import regex as regex_mod

from ..core.types import FileMatchResult, LineMatch


def file_name_matches(result: FileMatchResult, pattern: regex_mod.Pattern) -> bool:
    return pattern.search(result.file_name) is not None


def sort_results(
    results: list[FileMatchResult], pattern: regex_mod.Pattern
) -> list[FileMatchResult]:
    """
    Rank results:
    - files whose name itself matches the pattern come first
    - then files with more matching lines
    Ties keep scan order.
    """
    return sorted(
        results,
        key=lambda r: (not file_name_matches(r, pattern), -len(r.matches)),
    )


def clip_to_budget(result: FileMatchResult, remaining: int) -> FileMatchResult:
    """
    Keep the leading line matches of ``result`` that fit in ``remaining`` hits.

    The line that crosses the budget is kept with its ``match_count`` lowered
    to the hits that still fit, so a clipped line can report fewer matches
    than its text holds. ``total_matches`` of the clipped result is
    ``min(total, remaining)`` and always equals the sum of the kept counts.
    """
    kept: list[LineMatch] = []
    used = 0
    for m in result.matches:
        if used >= remaining:
            break
        take = min(m.match_count, remaining - used)
        kept.append(m if take == m.match_count else LineMatch(m.line_number, m.line, take))
        used += take
    return FileMatchResult(
        file_path=result.file_path,
        file_name=result.file_name,
        relative_path=result.relative_path,
        category=result.category,
        matches=kept,
        total_matches=used,
    )


def apply_budget(results: list[FileMatchResult], max_results: int) -> list[FileMatchResult]:
    """Truncate a ranked result list to at most ``max_results`` files."""
    return results[:max_results]
