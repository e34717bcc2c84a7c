"""Filesystem traversal helpers."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

__all__ = ["list_files", "remove_path"]


LOGGER = logging.getLogger(__name__)


def list_files(root: str | Path) -> list[Path]:
    """Return the absolute path of every regular file below ``root``.

    Directories are visited in lexicographic order and symlinked directories
    are not descended into. A missing ``root`` yields an empty list so callers
    can merge optional template trees without special casing them.
    """

    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        return []

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, followlinks=False):
        dirnames.sort()
        directory = Path(dirpath)
        for name in sorted(filenames):
            candidate = directory / name
            if candidate.is_file():
                files.append(candidate)
    return files


def remove_path(path: str | Path) -> None:
    """Delete a file, a symlink or a whole directory tree."""

    target = Path(path)
    if target.is_symlink() or not target.is_dir():
        LOGGER.debug("Deleting file %s", target)
        target.unlink()
        return

    LOGGER.debug("Deleting directory %s", target)
    shutil.rmtree(target)
