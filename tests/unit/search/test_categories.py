"""Tests for igsearch.search.categories module."""

from __future__ import annotations

from pathlib import Path

from igsearch.core.config import SearchConfig
from igsearch.core.types import Category
from igsearch.search.categories import build_locations, resolve_locations
from igsearch.search.walker import find_files


def _candidates(root: Path, category: str) -> set[str]:
    names: set[str] = set()
    for loc in resolve_locations(root, category):
        for path in find_files(loc.path, loc.extensions, loc.recursive):
            if loc.accepts(path):
                names.add(path.relative_to(root).as_posix())
    return names


class TestResolveLocations:
    def test_fsh(self, ig_project: Path):
        locs = resolve_locations(ig_project, "fsh")
        assert [loc.path for loc in locs] == [ig_project, ig_project / "input"]
        assert locs[0].recursive is False
        assert locs[0].extensions == (".yaml",)
        assert locs[1].extensions == (".fsh",)

    def test_fsh_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "fsh") == {"sushi-config.yaml", "input/fsh/patient.fsh"}

    def test_input_resources_includes_generated(self, ig_project: Path):
        locs = resolve_locations(ig_project, Category.INPUT_RESOURCES)
        assert [loc.path for loc in locs] == [ig_project / "input", ig_project / "fsh-generated"]

    def test_input_resources_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "inputResources") == {
            "input/maps/patient.map",
            "input/resources/obs.xml",
            "input/resources/patient.json",
            "fsh-generated/resources/StructureDefinition-example-patient.json",
        }

    def test_input_pages_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "inputPages") == {"input/pagecontent/intro.md"}

    def test_translations_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "translations") == {"input/translations/de.po"}

    def test_output_resources_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "outputResources") == {
            "output/StructureDefinition-example-patient.json"
        }

    def test_output_html_candidates(self, ig_project: Path):
        assert _candidates(ig_project, "outputHtml") == {"output/index.html"}

    def test_missing_locations_dropped(self, tmp_path: Path):
        (tmp_path / "input").mkdir()
        locs = resolve_locations(tmp_path, "inputPages")
        assert locs == []
        assert resolve_locations(tmp_path, "outputHtml") == []

    def test_without_generated_folder(self, tmp_path: Path):
        (tmp_path / "input").mkdir()
        locs = resolve_locations(tmp_path, "inputResources")
        assert [loc.path for loc in locs] == [tmp_path / "input"]

    def test_unknown_category(self, ig_project: Path):
        assert resolve_locations(ig_project, "images") == []

    def test_accepts_str_root(self, ig_project: Path):
        assert resolve_locations(str(ig_project), "outputHtml")[0].path == ig_project / "output"


class TestBuildLocations:
    def test_custom_sushi_name(self, tmp_path: Path, make_file):
        cfg = SearchConfig(sushi_config_name="custom.yaml")
        make_file(tmp_path / "custom.yaml", "x")
        make_file(tmp_path / "sushi-config.yaml", "x")
        loc = build_locations(tmp_path, Category.FSH, cfg)[0]
        assert loc.accepts(tmp_path / "custom.yaml")
        assert not loc.accepts(tmp_path / "sushi-config.yaml")

    def test_every_category_has_locations(self, tmp_path: Path):
        cfg = SearchConfig()
        for cat in Category:
            assert build_locations(tmp_path, cat, cfg)
