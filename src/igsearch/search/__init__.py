"""
Search building blocks.

- Category resolution to existing search locations
- File enumeration with directory pruning
- Content sniffing for FHIR resources and text files
- Pattern construction and per-file matching
- Result ranking and budget enforcement
"""

from .categories import build_locations, resolve_locations
from .matchers import create_search_pattern, find_line_matches, search_in_file
from .scorer import apply_budget, clip_to_budget, sort_results
from .sniffing import is_resource_file, is_text_file
from .walker import find_files, iter_files, should_skip_directory

__all__ = [
    # Category resolution
    "build_locations",
    "resolve_locations",
    # Walking and sniffing
    "find_files",
    "iter_files",
    "should_skip_directory",
    "is_resource_file",
    "is_text_file",
    # Matching
    "create_search_pattern",
    "find_line_matches",
    "search_in_file",
    # Ranking
    "apply_budget",
    "clip_to_budget",
    "sort_results",
]
