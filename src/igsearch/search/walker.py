"""
File enumeration under a search location.

Walks a directory with ``os.walk``, pruning conventionally irrelevant
directories (version control metadata, dependency caches, publisher scratch
folders, IDE metadata) in place so their subtrees are never visited.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..core.config import DEFAULT_SKIP_DIRS
from ..utils.logging_config import get_logger


def should_skip_directory(name: str, skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS) -> bool:
    """Case-insensitive lookup of a bare directory name in the skip set."""
    return name.lower() in skip_dirs


def _is_regular_file(path: str) -> bool:
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except OSError:
        return False


def _extension_allowed(name: str, extensions: tuple[str, ...] | list[str]) -> bool:
    if not extensions:
        return True
    return os.path.splitext(name)[1].lower() in extensions


def iter_files(
    directory: Path,
    extensions: tuple[str, ...] | list[str] = (),
    recursive: bool = True,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """
    Yield files under ``directory`` whose extension is in ``extensions``.

    Only regular files are yielded: symlinks to regular files count, broken
    links and special files (pipes, sockets, devices) do not. An empty
    ``extensions`` matches every file. Directories that cannot be listed are
    logged and skipped; the walk carries on with their siblings.
    Entries are yielded in sorted order within each directory.
    """
    logger = get_logger()
    skip = frozenset(skip_dirs)

    def on_error(err: OSError) -> None:
        logger.debug(f"Error reading directory {err.filename}: {err}", file_path=str(err.filename))

    for dirpath, dirnames, filenames in os.walk(
        directory, onerror=on_error, followlinks=follow_symlinks
    ):
        if recursive:
            # prune in place so os.walk never descends into skipped subtrees
            dirnames[:] = sorted(d for d in dirnames if not should_skip_directory(d, skip))
        else:
            dirnames.clear()

        for name in sorted(filenames):
            if not _extension_allowed(name, extensions):
                continue
            # pipes, sockets and devices would block or fail on read
            full = os.path.join(dirpath, name)
            if _is_regular_file(full):
                yield Path(full)


def find_files(
    directory: Path,
    extensions: tuple[str, ...] | list[str] = (),
    recursive: bool = True,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """List the files ``iter_files`` would yield. Missing directories give ``[]``."""
    if not directory.is_dir():
        return []
    return list(iter_files(directory, extensions, recursive, skip_dirs))
