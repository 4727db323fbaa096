"""
Command-line interface for igsearch.

The CLI exposes the project search engine to the terminal: running a
search with the same options the application's search dialog offers, and
reporting which categories a project supports.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
