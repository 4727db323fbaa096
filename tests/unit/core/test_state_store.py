"""Tests for igsearch.core.state module."""

from __future__ import annotations

from pathlib import Path

from igsearch.core.state import SearchStateStore
from igsearch.core.types import FileMatchResult, LineMatch, SearchState, default_categories


def _result(category: str, name: str = "a.md") -> FileMatchResult:
    return FileMatchResult(
        file_path=Path("/ig") / name,
        file_name=name,
        relative_path=name,
        category=category,
        matches=[LineMatch(1, "Patient", 1)],
        total_matches=1,
    )


class TestGetState:
    def test_default_state(self):
        store = SearchStateStore()
        state = store.get_state("/ig")
        assert state.search_term == ""
        assert state.case_sensitive is False
        assert state.whole_words is False
        assert state.results == []
        assert state.last_search_time is None
        assert state.categories == default_categories()

    def test_default_enablement(self):
        cats = SearchStateStore().get_state("/ig").categories
        assert cats["fsh"] and cats["inputResources"] and cats["inputPages"]
        assert cats["translations"]
        assert not cats["outputResources"]
        assert not cats["outputHtml"]

    def test_same_object_on_repeat(self):
        store = SearchStateStore()
        assert store.get_state("/ig") is store.get_state("/ig")

    def test_path_and_str_share_key(self):
        store = SearchStateStore()
        assert store.get_state(Path("/ig")) is store.get_state("/ig")

    def test_projects_are_independent(self):
        store = SearchStateStore()
        store.get_state("/a").categories["fsh"] = False
        assert store.get_state("/b").categories["fsh"] is True
        assert len(store) == 2


class TestSetState:
    def test_replaces_wholesale(self):
        store = SearchStateStore()
        store.get_state("/ig")
        new = SearchState(search_term="Observation", whole_words=True)
        store.set_state("/ig", new)
        assert store.get_state("/ig") is new

    def test_record_search(self):
        store = SearchStateStore()
        results = [_result("inputPages")]
        state = store.record_search("/ig", "Patient", True, False, {"inputPages": True}, results)
        assert state is store.get_state("/ig")
        assert state.search_term == "Patient"
        assert state.case_sensitive is True
        assert state.categories == {"inputPages": True}
        assert state.results == results
        assert state.last_search_time is not None


class TestInvalidateOutput:
    def test_removes_only_output_categories(self):
        store = SearchStateStore()
        kept = [_result("fsh", "p.fsh"), _result("inputPages"), _result("translations", "de.po")]
        dropped = [_result("outputResources", "x.json"), _result("outputHtml", "x.html")]
        store.record_search("/ig", "Patient", False, True, {"fsh": True}, kept + dropped)

        store.invalidate_output("/ig")

        state = store.get_state("/ig")
        assert state.results == kept
        assert state.search_term == "Patient"
        assert state.whole_words is True
        assert state.categories == {"fsh": True}

    def test_other_projects_untouched(self):
        store = SearchStateStore()
        store.record_search("/a", "x", False, False, {}, [_result("outputHtml")])
        store.record_search("/b", "x", False, False, {}, [_result("outputHtml")])
        store.invalidate_output("/a")
        assert store.get_state("/a").results == []
        assert len(store.get_state("/b").results) == 1

    def test_unknown_project_creates_default(self):
        store = SearchStateStore()
        store.invalidate_output("/new")
        assert "/new" in store
        assert store.get_state("/new").results == []


class TestForget:
    def test_forget(self):
        store = SearchStateStore()
        store.get_state("/ig")
        store.forget("/ig")
        assert "/ig" not in store
        assert store.project_roots() == []

    def test_forget_unknown_is_noop(self):
        SearchStateStore().forget("/nothing")
