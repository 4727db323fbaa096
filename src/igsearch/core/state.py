"""
Per-project search state for the application session.

A SearchStateStore maps a project root to its SearchState. States are created
lazily with default category enablement and live until the store is dropped
or the project is forgotten. Every mutation swaps whole values in, so a reader
never sees a half-updated state.
"""

from __future__ import annotations

import time
from collections.abc import Iterator, Mapping
from dataclasses import replace
from pathlib import Path

from .types import Category, FileMatchResult, SearchState


def _key(project_root: Path | str) -> str:
    return str(project_root)


class SearchStateStore:
    """In-memory search state keyed by project root."""

    def __init__(self) -> None:
        self._states: dict[str, SearchState] = {}

    def get_state(self, project_root: Path | str) -> SearchState:
        """Return the project's state, creating a default one on first access."""
        key = _key(project_root)
        state = self._states.get(key)
        if state is None:
            state = SearchState()
            self._states[key] = state
        return state

    def set_state(self, project_root: Path | str, state: SearchState) -> None:
        self._states[_key(project_root)] = state

    def record_search(
        self,
        project_root: Path | str,
        search_term: str,
        case_sensitive: bool,
        whole_words: bool,
        categories: Mapping[str, bool],
        results: list[FileMatchResult],
    ) -> SearchState:
        """Store the configuration and results of a completed search."""
        state = replace(
            self.get_state(project_root),
            search_term=search_term,
            case_sensitive=case_sensitive,
            whole_words=whole_words,
            categories=dict(categories),
            results=list(results),
            last_search_time=time.time(),
        )
        self.set_state(project_root, state)
        return state

    def invalidate_output(self, project_root: Path | str) -> None:
        """
        Drop results found in build output.

        Called when a build starts: output files are about to be regenerated,
        so hits in them must not be shown as current. Term, flags, category
        enablement and non-output results are kept.
        """
        state = self.get_state(project_root)
        state.results = [
            r for r in state.results if not _is_output_category(r.category)
        ]

    def forget(self, project_root: Path | str) -> None:
        """Drop all state of a project that is no longer managed."""
        self._states.pop(_key(project_root), None)

    def project_roots(self) -> list[str]:
        return list(self._states)

    def __contains__(self, project_root: object) -> bool:
        return isinstance(project_root, (str, Path)) and _key(project_root) in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)


def _is_output_category(name: str) -> bool:
    cat = Category.parse(name)
    return cat is not None and cat.is_output
