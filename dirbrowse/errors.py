"""Exception types raised by dirbrowse."""

from __future__ import annotations

from pathlib import Path


class DirbrowseError(Exception):
    """Base class for dirbrowse failures."""


class ListingUnavailable(DirbrowseError):
    """A directory could not be enumerated (missing, not a directory, denied)."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(f"cannot list {path}: {detail}")
