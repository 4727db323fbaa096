"""
CLI entry point for igsearch.

This module serves as the entry point when igsearch.cli is executed as a module
with `python -m igsearch.cli`.
"""

from .main import cli

if __name__ == "__main__":
    cli()
