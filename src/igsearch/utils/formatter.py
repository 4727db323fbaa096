"""
Output formatting module for igsearch.

Renders a SearchOutcome as plain text, JSON or rich console output.

Key Functions:
    format_result: Main entry point for formatting an outcome in any format
    to_json_bytes: Fast JSON serialization using orjson
    format_text: Plain text listing grouped by file
    render_highlight_console: Rich console output with highlighted hits

Example:
    >>> from igsearch.utils.formatter import format_result
    >>> from igsearch.core.types import OutputFormat
    >>> print(format_result(outcome, OutputFormat.TEXT))
    input/pagecontent/intro.md [inputPages] (1 matches)
         3 | This IG defines Patient profiles.
    <BLANKLINE>
    # files=1 matches=1 truncated=false scanned=1 skipped=0 elapsed_ms=...
"""

from __future__ import annotations

import sys
from dataclasses import asdict

import orjson
import regex as regex_mod
from rich.console import Console
from rich.text import Text

from ..core.types import OutputFormat, SearchOutcome
from .helpers import highlight_spans


def _spans(line: str, pattern: regex_mod.Pattern | None) -> list[tuple[int, int]]:
    if pattern is None:
        return []
    return [m.span() for m in pattern.finditer(line)]


def to_json_bytes(outcome: SearchOutcome, include_stats: bool = False) -> bytes:
    """
    Serialize an outcome with orjson.

    The payload is the ``{results, totalMatches, error, truncated}`` shape,
    optionally with a ``stats`` block.
    """
    payload = outcome.to_dict()
    if include_stats:
        payload["stats"] = asdict(outcome.stats)
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def _stats_line(outcome: SearchOutcome) -> str:
    s = outcome.stats
    return (
        f"# files={len(outcome.results)} matches={outcome.total_matches} "
        f"truncated={str(outcome.truncated).lower()} scanned={s.files_scanned} "
        f"skipped={s.files_skipped} elapsed_ms={s.elapsed_ms:.2f}"
    )


def format_text(
    outcome: SearchOutcome,
    pattern: regex_mod.Pattern | None = None,
    highlight: bool = False,
) -> str:
    """
    Format an outcome as plain text, one block per file.

    When ``highlight`` is set and a pattern is given, hits are wrapped in
    ``[[`` and ``]]`` markers.
    """
    if outcome.error:
        return f"error: {outcome.error}"

    out: list[str] = []
    for r in outcome.results:
        out.append(f"{r.relative_path} [{r.category}] ({r.total_matches} matches)")
        for m in r.matches:
            content = m.line
            if highlight:
                content = highlight_spans(
                    content, _spans(content, pattern), marker_left="[[", marker_right="]]"
                )
            out.append(f"{m.line_number:6d} | {content}")
        out.append("")
    out.append(_stats_line(outcome))
    return "\n".join(out)


def render_highlight_console(
    outcome: SearchOutcome,
    pattern: regex_mod.Pattern | None = None,
    console: Console | None = None,
) -> None:
    """Render an outcome to the console with rich styling."""
    if console is None:
        console = Console()
    if outcome.error:
        console.print(Text(f"error: {outcome.error}", style="bold red"))
        return

    for r in outcome.results:
        header = Text(r.relative_path, style="bold")
        header.append(f"  {r.category}", style="cyan")
        header.append(f"  {r.total_matches} matches", style="dim")
        console.print(header)
        for m in r.matches:
            line = Text(f"{m.line_number:6d} | ", style="dim")
            body = Text(m.line)
            for a, b in _spans(m.line, pattern):
                body.stylize("bold yellow", a, b)
            line.append_text(body)
            console.print(line)
        console.print()
    if outcome.truncated:
        console.print("[yellow]Result limit reached; not all matches are shown.[/yellow]")
    console.print(Text(_stats_line(outcome), style="dim"))


def format_result(
    outcome: SearchOutcome,
    fmt: OutputFormat,
    pattern: regex_mod.Pattern | None = None,
    include_stats: bool = False,
) -> str:
    """Format an outcome according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(outcome, include_stats=include_stats).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT:
        if sys.stdout.isatty():
            render_highlight_console(outcome, pattern)
            return ""
        return format_text(outcome, pattern, highlight=True)
    return format_text(outcome, pattern)
