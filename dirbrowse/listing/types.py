"""Domain datatypes for one captured directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Classification of a directory child, fixed when the listing is built."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class Entry:
    """One immediate child of a listed directory."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        """Final path component, used as the display label."""
        return self.path.name


@dataclass(frozen=True)
class Listing:
    """Children of ``path`` in filesystem enumeration order.

    Order is whatever ``os.scandir`` yields and may differ between rebuilds.
    """

    path: Path
    entries: tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries


__all__ = [
    "EntryKind",
    "Entry",
    "Listing",
]
