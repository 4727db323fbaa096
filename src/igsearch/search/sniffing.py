"""
Content sniffing filters for candidate files.

Both filters look at a fixed-size prefix of the file only. They are heuristics,
not parsers: a resource whose marker sits past the window is not recognized.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.helpers import read_bytes_prefix, read_text_prefix
from ..utils.logging_config import get_logger

FHIR_XML_NAMESPACE_DECL = 'xmlns="http://hl7.org/fhir"'
FHIR_NAMESPACE = "http://hl7.org/fhir"
JSON_RESOURCE_MARKER = '"resourceType"'


def is_resource_file(path: Path, sniff_chars: int = 2000) -> bool:
    """
    Return True if ``path`` looks like a FHIR resource.

    JSON files must mention ``"resourceType"`` and XML files the FHIR namespace
    within the first ``sniff_chars`` characters. FHIR mapping language and
    Turtle files are accepted on extension alone. Unreadable files are rejected.
    """
    ext = path.suffix.lower()
    if ext in (".map", ".ttl"):
        return True
    if ext not in (".json", ".xml"):
        return False

    try:
        sample = read_text_prefix(path, sniff_chars)
    except OSError as e:
        get_logger().debug(f"Could not read file {path}: {e}", file_path=str(path))
        return False

    if ext == ".json":
        return JSON_RESOURCE_MARKER in sample
    return FHIR_XML_NAMESPACE_DECL in sample or FHIR_NAMESPACE in sample


def is_text_file(
    path: Path, text_extensions: frozenset[str] | set[str], sniff_bytes: int = 512
) -> bool:
    """Known text extensions pass; anything else must have no NUL in its first bytes."""
    if path.suffix.lower() in text_extensions:
        return True

    try:
        sample = read_bytes_prefix(path, sniff_bytes)
    except OSError as e:
        get_logger().debug(f"Could not sniff file {path}: {e}", file_path=str(path))
        return False

    return b"\x00" not in sample
