"""Tests for igsearch.search.scorer module."""

from __future__ import annotations

from pathlib import Path

from igsearch.core.types import FileMatchResult, LineMatch
from igsearch.search.matchers import create_search_pattern
from igsearch.search.scorer import apply_budget, clip_to_budget, file_name_matches, sort_results


def _result(name: str, counts: list[int], category: str = "inputResources") -> FileMatchResult:
    matches = [LineMatch(i + 1, f"line {i + 1}", c) for i, c in enumerate(counts)]
    return FileMatchResult(
        file_path=Path("/ig") / name,
        file_name=name,
        relative_path=name,
        category=category,
        matches=matches,
        total_matches=sum(counts),
    )


class TestFileNameMatches:
    def test_name_match_uses_same_flags(self):
        r = _result("Patient-example.json", [1])
        assert file_name_matches(r, create_search_pattern("patient"))
        assert not file_name_matches(r, create_search_pattern("patient", case_sensitive=True))

    def test_whole_word_on_name(self):
        r = _result("ExamplePatient.json", [1])
        assert not file_name_matches(r, create_search_pattern("Patient", whole_words=True))


class TestSortResults:
    def test_name_matches_first(self):
        rx = create_search_pattern("patient")
        a = _result("obs.xml", [1, 1, 1, 1])
        b = _result("patient.json", [1])
        assert [r.file_name for r in sort_results([a, b], rx)] == ["patient.json", "obs.xml"]

    def test_more_lines_first(self):
        rx = create_search_pattern("patient")
        a = _result("a.json", [5])
        b = _result("b.json", [1, 1, 1])
        assert [r.file_name for r in sort_results([a, b], rx)] == ["b.json", "a.json"]

    def test_ranks_by_lines_not_hits(self):
        rx = create_search_pattern("x")
        a = _result("a.md", [10, 10])
        b = _result("b.md", [1, 1, 1])
        assert sort_results([a, b], rx)[0].file_name == "b.md"

    def test_ties_keep_scan_order(self):
        rx = create_search_pattern("zzz")
        results = [_result(f"{n}.md", [1, 1], category=c) for n, c in
                   [("c", "fsh"), ("a", "inputPages"), ("b", "outputHtml")]]
        assert [r.file_name for r in sort_results(results, rx)] == ["c.md", "a.md", "b.md"]

    def test_does_not_mutate_input(self):
        rx = create_search_pattern("patient")
        results = [_result("obs.xml", [1]), _result("patient.json", [1])]
        sort_results(results, rx)
        assert results[0].file_name == "obs.xml"


class TestClipToBudget:
    def test_fits_entirely(self):
        r = _result("a.md", [2, 3])
        clipped = clip_to_budget(r, 10)
        assert clipped.total_matches == 5
        assert len(clipped.matches) == 2

    def test_drops_trailing_lines(self):
        clipped = clip_to_budget(_result("a.md", [1, 1, 1, 1]), 2)
        assert [m.line_number for m in clipped.matches] == [1, 2]
        assert clipped.total_matches == 2

    def test_partial_line(self):
        clipped = clip_to_budget(_result("a.md", [2, 5]), 4)
        assert [(m.line_number, m.match_count) for m in clipped.matches] == [(1, 2), (2, 2)]
        assert clipped.total_matches == 4

    def test_keeps_identity_fields(self):
        r = _result("a.md", [3], category="translations")
        clipped = clip_to_budget(r, 1)
        assert clipped.file_path == r.file_path
        assert clipped.category == "translations"
        assert r.total_matches == 3


class TestApplyBudget:
    def test_caps_list(self):
        results = [_result(f"{i}.md", [1]) for i in range(5)]
        assert len(apply_budget(results, 3)) == 3
        assert apply_budget(results, 10) == results
