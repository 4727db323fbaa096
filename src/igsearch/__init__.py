"""
igsearch: full-text search for FHIR Implementation Guide projects.

This package is the search engine of an IG publisher manager. An IG project
is a local folder that the IG Publisher turns into an implementation guide;
igsearch searches its files by category, ranks the hits, caps them under a
result budget and keeps per-project search state for the session.

Key Features:
    - **Fixed Categories**: FSH sources, input resources, input pages,
      translations, built resources and built HTML pages
    - **Literal Matching**: Search terms are escaped; case and whole-word options
    - **Content Sniffing**: FHIR resource and text detection on a file prefix
    - **Directory Pruning**: VCS, cache, scratch and IDE folders are skipped
    - **Result Budget**: At most 200 matches per search, with a truncation flag
    - **Session State**: Per-project term, flags, categories and last results
    - **Dual Interfaces**: Library API for the application and a CLI

Main Classes:
    IGSearch: Search engine and state owner
    SearchConfig: Budget, sniffing windows and walk settings
    SearchState: Per-project search configuration and results
    SearchOutcome: What a search returns
    FileMatchResult / LineMatch: Matches in one file / on one line

Example Usage:
    >>> from igsearch import IGSearch
    >>> engine = IGSearch()
    >>> engine.get_category_availability("/work/my-ig")
    {'fsh': True, 'inputResources': True, 'inputPages': True, 'translations': True,
     'outputResources': False, 'outputHtml': False}
    >>> outcome = engine.perform_search("/work/my-ig", "Patient", whole_words=True)
    >>> outcome.total_matches, outcome.truncated
    (12, False)

    CLI usage:
        $ igsearch find --project ./my-ig --category inputPages "Patient"
        $ igsearch categories --project ./my-ig
"""

from .core.api import IGSearch
from .core.config import SearchConfig
from .core.state import SearchStateStore
from .core.types import (
    Category,
    FileMatchResult,
    LineMatch,
    OutputFormat,
    SearchLocation,
    SearchOutcome,
    SearchState,
    SearchStats,
    default_categories,
)
from .search.categories import resolve_locations
from .search.matchers import create_search_pattern
from .search.walker import find_files
from .utils.error_handling import (
    ConfigurationError,
    FileAccessError,
    PatternError,
    PermissionError,
    SearchError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Full-text search for FHIR Implementation Guide projects"

# Public API
__all__ = [
    # Main classes
    "IGSearch",
    "SearchConfig",
    "SearchStateStore",
    # Data types
    "Category",
    "FileMatchResult",
    "LineMatch",
    "OutputFormat",
    "SearchLocation",
    "SearchOutcome",
    "SearchState",
    "SearchStats",
    "default_categories",
    # Building blocks
    "resolve_locations",
    "create_search_pattern",
    "find_files",
    # Logging and configuration
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "ConfigurationError",
    "FileAccessError",
    "PermissionError",
    "PatternError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
