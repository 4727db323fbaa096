from pathlib import Path

import igsearch
from igsearch import IGSearch, OutputFormat, SearchConfig
from igsearch.utils.formatter import format_result


PAGE = """
# Profiles

The Patient profile constrains name and identifier.
"""


def test_public_api_exports():
    for name in igsearch.__all__:
        assert hasattr(igsearch, name), name
    assert igsearch.__version__ == "0.1.0"


def test_smoke_search_text(tmp_path: Path):
    # Prepare temp project
    p = tmp_path / "ig" / "input" / "pagecontent" / "profiles.md"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(PAGE, encoding="utf-8")

    engine = IGSearch(SearchConfig())
    res = engine.perform_search(tmp_path / "ig", "patient profile")
    assert res.ok
    assert res.total_matches == 1, "expected the page line to match"
    assert res.results[0].matches[0].line_number == 4

    text = format_result(res, OutputFormat.TEXT)
    assert "input/pagecontent/profiles.md" in text
