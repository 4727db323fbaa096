"""
Configuration module for igsearch.

This module defines the SearchConfig class, the single place holding the
constants that shape a search: the result budget, the content-sniffing
windows, the SUSHI configuration filename and the directory names pruned
while walking a project.

Example:
    >>> from igsearch.core.config import SearchConfig
    >>> cfg = SearchConfig(max_results=50)
    >>> cfg.validate()
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.error_handling import ConfigurationError

DEFAULT_SKIP_DIRS = frozenset(
    {
        # version control
        ".git",
        ".svn",
        ".hg",
        # dependency caches
        "node_modules",
        # build and publisher scratch
        "temp",
        "input-cache",
        "txcache",
        "bin",
        "obj",
        "target",
        "build",
        "dist",
        # IDE metadata
        ".vs",
        ".vscode",
        ".idea",
    }
)

DEFAULT_TEXT_EXTENSIONS = frozenset(
    {
        ".txt",
        ".md",
        ".json",
        ".xml",
        ".html",
        ".css",
        ".js",
        ".yaml",
        ".yml",
        ".properties",
    }
)

RESOURCE_EXTENSIONS = (".json", ".xml", ".map", ".ttl")


@dataclass(slots=True)
class SearchConfig:
    # Budget
    max_results: int = 200

    # Content sniffing windows
    resource_sniff_chars: int = 2000
    text_sniff_bytes: int = 512

    # Project layout
    sushi_config_name: str = "sushi-config.yaml"
    output_dir_name: str = "output"

    # Walking
    skip_dirs: frozenset[str] = field(default_factory=lambda: DEFAULT_SKIP_DIRS)
    text_extensions: frozenset[str] = field(default_factory=lambda: DEFAULT_TEXT_EXTENSIONS)

    def validate(self) -> None:
        """Validate configuration and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        if self.max_results <= 0:
            raise ConfigurationError(
                "Result budget must be positive",
                context={"field": "max_results", "value": self.max_results},
            )

        if self.resource_sniff_chars <= 0:
            raise ConfigurationError(
                "Resource sniff window must be positive",
                context={"field": "resource_sniff_chars", "value": self.resource_sniff_chars},
            )

        if self.text_sniff_bytes <= 0:
            raise ConfigurationError(
                "Text sniff window must be positive",
                context={"field": "text_sniff_bytes", "value": self.text_sniff_bytes},
            )

        if not self.sushi_config_name:
            raise ConfigurationError(
                "SUSHI configuration filename must not be empty",
                context={"field": "sushi_config_name"},
            )

        if any(name != name.lower() for name in self.skip_dirs):
            raise ConfigurationError(
                "Skipped directory names must be lower case",
                context={"field": "skip_dirs"},
            )
