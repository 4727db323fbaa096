"""
Main API module for igsearch.

This module provides the IGSearch class, the engine the surrounding
application constructs once per session. It owns the per-project search
state and coordinates category resolution, file walking, matching, ranking
and the result budget.

Classes:
    IGSearch: Project search engine and state owner

Search flow:
    1. The caller supplies a project root, a term, the match flags and an
       ordered category enablement mapping.
    2. Each enabled category is resolved to its existing search locations.
    3. Candidate files are enumerated, content-filtered and scanned.
    4. Once the budget is full, scanning goes on only until one more match
       shows that the true total exceeds it.
    5. Results are ranked, capped and stored as the project's current results.

Example:
    >>> from igsearch import IGSearch
    >>> engine = IGSearch()
    >>> outcome = engine.perform_search(
    ...     "/work/my-ig", "Patient", categories={"inputPages": True}
    ... )
    >>> for r in outcome.results:
    ...     print(r.relative_path, r.total_matches)
    >>> engine.invalidate_output("/work/my-ig")  # a build just started
"""

from __future__ import annotations

import time
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import regex as regex_mod

from ..search.categories import resolve_locations
from ..search.matchers import create_search_pattern, search_in_file
from ..search.scorer import apply_budget, clip_to_budget, sort_results
from ..search.walker import iter_files
from ..utils.error_handling import ErrorCollector, create_error_report
from ..utils.logging_config import SearchLogger, get_logger
from .config import SearchConfig
from .state import SearchStateStore
from .types import (
    Category,
    FileMatchResult,
    SearchLocation,
    SearchOutcome,
    SearchState,
    SearchStats,
)


@dataclass(slots=True)
class CategoryScan:
    """Files found in one category and whether the budget cut the scan short."""

    category: str
    results: list[FileMatchResult] = field(default_factory=list)
    total_matches: int = 0
    truncated: bool = False


def _category_name(name: Category | str) -> str:
    return name.value if isinstance(name, Category) else str(name)


class IGSearch:
    """
    Full-text search over the file categories of IG projects.

    One instance is created per application session and shared by reference.
    It is not thread-safe: callers serialize searches per project.

    Attributes:
        cfg (SearchConfig): Budget, sniffing windows and walk settings
        states (SearchStateStore): Per-project search state
        logger (SearchLogger): Logging interface
        error_collector (ErrorCollector): Diagnostics of the last search
    """

    def __init__(
        self, config: SearchConfig | None = None, logger: SearchLogger | None = None
    ) -> None:
        self.cfg = config or SearchConfig()
        self.cfg.validate()
        self.states = SearchStateStore()
        self.logger = logger or get_logger()
        self.error_collector = ErrorCollector()

    @property
    def max_results(self) -> int:
        return self.cfg.max_results

    # -- state -------------------------------------------------------------

    def get_state(self, project_root: Path | str) -> SearchState:
        return self.states.get_state(project_root)

    def set_state(self, project_root: Path | str, state: SearchState) -> None:
        self.states.set_state(project_root, state)

    def invalidate_output(self, project_root: Path | str) -> None:
        """Forget output-category hits of a project whose build just started."""
        self.states.invalidate_output(project_root)
        self.logger.debug(f"Cleared output search results for {project_root}")

    def get_category_availability(self, project_root: Path | str) -> dict[str, bool]:
        """
        Report which categories make sense to offer for a project.

        FSH needs a SUSHI configuration at the root and the output categories
        need a built ``output`` directory. Input categories are always offered.
        Filesystem errors while checking count as "not available".
        """
        root = Path(project_root)
        availability = {
            Category.FSH.value: False,
            Category.INPUT_RESOURCES.value: True,
            Category.INPUT_PAGES.value: True,
            Category.TRANSLATIONS.value: True,
            Category.OUTPUT_RESOURCES.value: False,
            Category.OUTPUT_HTML.value: False,
        }

        try:
            availability[Category.FSH.value] = (root / self.cfg.sushi_config_name).exists()
            if (root / self.cfg.output_dir_name).is_dir():
                availability[Category.OUTPUT_RESOURCES.value] = True
                availability[Category.OUTPUT_HTML.value] = True
        except OSError as e:
            self.logger.debug(f"Error checking category availability: {e}")

        return availability

    # -- search ------------------------------------------------------------

    def _iter_candidates(self, locations: list[SearchLocation]) -> Iterator[Path]:
        for loc in locations:
            self.logger.debug(f"Searching path: {loc.path}")
            for path in iter_files(loc.path, loc.extensions, loc.recursive, self.cfg.skip_dirs):
                if loc.accepts(path):
                    yield path

    def search_category(
        self,
        project_root: Path | str,
        category: Category | str,
        pattern: regex_mod.Pattern,
        budget: int,
        stats: SearchStats | None = None,
    ) -> CategoryScan:
        """
        Scan one category until it is exhausted or proven to overflow ``budget``.

        Once the budget is used up, remaining candidates are still scanned,
        but only to find out whether any further match exists: the first one
        marks the scan as truncated and ends it. The file that crosses the
        budget is clipped to the matches that still fit, which also marks the
        scan as truncated. With a zero ``budget`` the scan only looks for one such match.
        """
        root = Path(project_root)
        name = _category_name(category)
        stats = stats if stats is not None else SearchStats()
        scan = CategoryScan(category=name)

        locations = resolve_locations(root, name, self.cfg)
        for path in self._iter_candidates(locations):
            stats.files_scanned += 1
            result = search_in_file(
                path, pattern, name, root, self.error_collector, self.logger
            )
            if result is None:
                continue

            remaining = budget - scan.total_matches
            if result.total_matches > remaining:
                scan.truncated = True
                if remaining > 0:
                    result = clip_to_budget(result, remaining)
                    stats.files_matched += 1
                    scan.results.append(result)
                    scan.total_matches += result.total_matches
                break

            stats.files_matched += 1
            scan.results.append(result)
            scan.total_matches += result.total_matches

        self.logger.log_category_scan(name, len(locations), len(scan.results))
        return scan

    def _run(
        self,
        root: Path,
        search_term: str,
        case_sensitive: bool,
        whole_words: bool,
        categories: Mapping[str, bool],
        stats: SearchStats,
    ) -> SearchOutcome:
        pattern = create_search_pattern(search_term, case_sensitive, whole_words)
        budget = self.cfg.max_results

        results: list[FileMatchResult] = []
        total = 0
        truncated = False

        for name, enabled in categories.items():
            if not enabled:
                self.logger.debug(f"Skipping category {name} - not enabled")
                continue

            # with the budget used up, later categories are only checked for overflow
            scan = self.search_category(root, name, pattern, budget - total, stats)
            stats.categories_searched += 1
            results.extend(scan.results)
            total += scan.total_matches
            if scan.truncated:
                self.logger.debug("Reached max results, stopping search")
                truncated = True
                break

        ranked = apply_budget(sort_results(results, pattern), budget)
        return SearchOutcome(
            results=ranked,
            total_matches=sum(r.total_matches for r in ranked),
            truncated=truncated,
            stats=stats,
        )

    def perform_search(
        self,
        project_root: Path | str,
        search_term: str,
        case_sensitive: bool = False,
        whole_words: bool = False,
        categories: Mapping[Category | str, bool] | None = None,
    ) -> SearchOutcome:
        """
        Search a project and remember the outcome as its current results.

        Args:
            project_root: The IG project folder
            search_term: Literal text to look for
            case_sensitive: Match case exactly
            whole_words: Only match the term between word boundaries
            categories: Ordered category enablement; categories are searched in
                this order. ``None`` uses the project's stored enablement.

        Returns:
            A SearchOutcome. Failures are reported in ``error``; this method
            does not raise.
        """
        root = Path(project_root)
        if categories is None:
            categories = self.states.get_state(root).categories
        enabled: dict[str, bool] = {
            _category_name(k): bool(v) for k, v in categories.items()
        }

        self.error_collector.clear()
        stats = SearchStats()
        t0 = time.perf_counter()

        if not search_term or not search_term.strip():
            self.states.record_search(
                root, search_term or "", case_sensitive, whole_words, enabled, []
            )
            return SearchOutcome(stats=stats)

        self.logger.log_search_start(
            search_term, str(root), [name for name, on in enabled.items() if on]
        )

        try:
            outcome = self._run(root, search_term, case_sensitive, whole_words, enabled, stats)
        except Exception as e:
            self.logger.exception(f"Search error: {e}")
            self.error_collector.add_error(e)
            outcome = SearchOutcome(error=str(e) or type(e).__name__, stats=stats)

        stats.files_skipped = len(self.error_collector.skipped_files())
        stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self.states.record_search(
            root, search_term, case_sensitive, whole_words, enabled, outcome.results
        )
        self.logger.log_search_complete(
            search_term,
            files=len(outcome.results),
            total_matches=outcome.total_matches,
            elapsed_ms=stats.elapsed_ms,
            truncated=outcome.truncated,
        )
        return outcome

    # -- diagnostics -------------------------------------------------------

    def get_error_summary(self) -> dict[str, Any]:
        """Summary of the problems met by the last search."""
        return self.error_collector.get_summary()

    def error_report(self) -> str:
        return create_error_report(self.error_collector)
