"""Replace the working directory with the materialized output tree.

Committing happens in three steps: everything in the working root except
the scratch directory is deleted, every scratch file is moved to the same
relative position under the root, and the emptied scratch tree is removed.
Moves are not transactional; an interrupted promotion leaves a partially
promoted tree behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection

from .files import list_files, remove_path

__all__ = ["DIRECTORY_MODE", "cleanup", "promote", "purge"]


LOGGER = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755


def purge(root: str | Path, keep: Collection[str]) -> list[Path]:
    """Delete every entry directly below ``root`` whose name is not in ``keep``.

    Dotfiles are not special: they are removed like any other entry. Errors
    while listing or deleting propagate to the caller.
    """

    root_path = Path(root)
    removed: list[Path] = []
    for entry in sorted(root_path.iterdir()):
        if entry.name in keep:
            continue
        remove_path(entry)
        removed.append(entry)

    LOGGER.info("Removed %d entries from %s", len(removed), root_path)
    return removed


def promote(scratch: str | Path, root: str | Path) -> list[Path]:
    """Move every file below ``scratch`` to the same relative path below ``root``."""

    scratch_path = Path(scratch).resolve()
    root_path = Path(root).resolve()
    promoted: list[Path] = []
    for source in list_files(scratch_path):
        destination = root_path / source.relative_to(scratch_path)
        if not destination.parent.is_dir():
            destination.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        LOGGER.debug("Moving %s -> %s", source, destination)
        source.replace(destination)
        promoted.append(destination)

    LOGGER.info("Promoted %d files into %s", len(promoted), root_path)
    return promoted


def cleanup(scratch: str | Path) -> None:
    scratch_path = Path(scratch)
    if scratch_path.exists():
        remove_path(scratch_path)

