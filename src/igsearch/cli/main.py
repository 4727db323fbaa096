"""
Command-line interface for igsearch.

Commands:
    find: Search an IG project for a literal term
    categories: Show which search categories a project offers

Example Usage:
    Search authored pages and resources:
        $ igsearch find --project ./my-ig "Patient"

    Whole-word, case-sensitive search in the built HTML, as JSON:
        $ igsearch find --project ./my-ig --category outputHtml \\
          --whole-words --case-sensitive --format json "Observation"

    Category availability:
        $ igsearch categories --project ./my-ig
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import orjson

from .. import __version__
from ..core.api import IGSearch
from ..core.config import SearchConfig
from ..core.types import Category, OutputFormat
from ..search.matchers import create_search_pattern
from ..utils.error_handling import ConfigurationError
from ..utils.formatter import format_result
from ..utils.logging_config import LogFormat, LogLevel, configure_logging

CATEGORY_NAMES = [c.value for c in Category]


def _configure_logging(debug: bool, log_level: str, log_file: str | None, log_format: str) -> None:
    if debug:
        log_level = "DEBUG"
    configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        enable_file=bool(log_file),
        enable_console=True,
    )


@click.group()
@click.version_option(__version__, prog_name="igsearch")
def cli() -> None:
    """igsearch - Full-text search for FHIR Implementation Guide projects"""
    pass


@cli.command("find")
@click.option(
    "--project",
    "project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="IG project folder",
)
@click.option(
    "--category",
    "categories",
    multiple=True,
    type=click.Choice(CATEGORY_NAMES),
    help="Category to search, in order; may be repeated (default: all input categories)",
)
@click.option("--case-sensitive", is_flag=True, default=False, help="Match case exactly")
@click.option("--whole-words", is_flag=True, default=False, help="Match whole words only")
@click.option("--max-results", type=int, default=200, help="Maximum number of matches to return")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--stats", is_flag=True, default=False, help="Include search statistics")
@click.option("--show-errors", is_flag=True, default=False, help="Report files that were skipped")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Log level",
)
@click.option("--log-file", help="Log file path")
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
@click.argument("term")
def find_cmd(
    project: Path,
    categories: tuple[str, ...],
    case_sensitive: bool,
    whole_words: bool,
    max_results: int,
    fmt: str,
    stats: bool,
    show_errors: bool,
    debug: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
    term: str,
) -> None:
    """Execute a search in an IG project."""
    _configure_logging(debug, log_level, log_file, log_format)

    try:
        engine = IGSearch(SearchConfig(max_results=max_results))
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(2)

    enabled = {name: True for name in categories} if categories else None
    outcome = engine.perform_search(
        project.resolve(),
        term,
        case_sensitive=case_sensitive,
        whole_words=whole_words,
        categories=enabled,
    )

    pattern = None
    if outcome.ok and term.strip():
        pattern = create_search_pattern(term, case_sensitive, whole_words)

    output = OutputFormat(fmt)
    rendered = format_result(outcome, output, pattern, include_stats=stats)
    if rendered:
        sys.stdout.write(rendered)
        sys.stdout.write("\n")

    if show_errors and engine.get_error_summary()["total_errors"] > 0:
        sys.stderr.write(engine.error_report())
        sys.stderr.write("\n")

    if not outcome.ok:
        sys.exit(1)


@cli.command("categories")
@click.option(
    "--project",
    "project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="IG project folder",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON")
def categories_cmd(project: Path, as_json: bool) -> None:
    """Show which search categories are available for a project."""
    engine = IGSearch()
    availability = engine.get_category_availability(project.resolve())

    if as_json:
        sys.stdout.write(orjson.dumps(availability, option=orjson.OPT_INDENT_2).decode("utf-8"))
        sys.stdout.write("\n")
        return

    for name, available in availability.items():
        click.echo(f"{name:16s} {'yes' if available else 'no'}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
