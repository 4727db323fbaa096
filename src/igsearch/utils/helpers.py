"""
File reading and text helpers shared by the search components.

The readers decode as UTF-8 and replace undecodable bytes, so a stray
Latin-1 character in an IG page never aborts a scan. They raise ``OSError``
on access problems; callers decide whether that is a diagnostic or silence.
"""

from __future__ import annotations

from pathlib import Path

TEXT_ENCODING = "utf-8"


def read_text(path: Path) -> str:
    """Read a whole file as text."""
    with path.open("r", encoding=TEXT_ENCODING, errors="replace", newline="") as f:
        return f.read()


def read_text_prefix(path: Path, max_chars: int) -> str:
    """Read at most ``max_chars`` decoded characters from the start of a file."""
    with path.open("r", encoding=TEXT_ENCODING, errors="replace", newline="") as f:
        return f.read(max_chars)


def read_bytes_prefix(path: Path, max_bytes: int) -> bytes:
    """Read at most ``max_bytes`` raw bytes from the start of a file."""
    with path.open("rb") as f:
        return f.read(max_bytes)


def relative_display_path(file_path: Path, project_root: Path) -> str:
    """Path of ``file_path`` relative to the project root, or its base name."""
    try:
        return file_path.relative_to(project_root).as_posix()
    except ValueError:
        return file_path.name


def highlight_spans(
    line: str, spans: list[tuple[int, int]], marker_left: str = "[", marker_right: str = "]"
) -> str:
    """Lightweight span highlighting for plain text output."""
    if not spans:
        return line
    spans = sorted(spans, key=lambda x: x[0])
    out: list[str] = []
    last = 0
    for a, b in spans:
        a = max(0, min(len(line), a))
        b = max(0, min(len(line), b))
        if a < last:
            a = last
        if b < a:
            continue
        out.append(line[last:a])
        out.append(marker_left)
        out.append(line[a:b])
        out.append(marker_right)
        last = b
    out.append(line[last:])
    return "".join(out)
