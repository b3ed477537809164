"""Filesystem scanning for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import ListingUnavailable
from .types import Entry, EntryKind, Listing

logger = logging.getLogger(__name__)


def absolute_directory_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` made absolute against the cwd, without resolving links."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return Path(os.path.abspath(candidate))


def classify_mode(mode: int) -> EntryKind:
    """Map an ``lstat`` mode to an entry kind.

    ``lstat`` describes the link itself rather than its target, so a link to a
    directory never has a directory mode and is reported as ``SYMLINK``.
    """
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    return EntryKind.FILE


def build_listing(path: str | os.PathLike[str]) -> Listing:
    """Enumerate the immediate children of ``path``.

    Children whose metadata cannot be read are left out. Raises
    ``ListingUnavailable`` when the directory itself cannot be opened.
    """
    directory = absolute_directory_path(path)
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    mode = child.stat(follow_symlinks=False).st_mode
                except OSError as exc:
                    logger.debug("skipping %s: %s", child.path, exc)
                    continue
                entries.append(Entry(path=directory / child.name, kind=classify_mode(mode)))
    except OSError as exc:
        raise ListingUnavailable(directory, exc) from exc

    logger.debug("listed %s (%d entries)", directory, len(entries))
    return Listing(path=directory, entries=tuple(entries))


__all__ = [
    "absolute_directory_path",
    "classify_mode",
    "build_listing",
]
