"""Navigation state for the directory browser.

``BrowserState`` owns one listing plus an optional selection index. Moving the
selection never touches the filesystem; entering a directory, going up, and
refreshing rebuild the listing and clear the selection. A failed rebuild
raises ``ListingUnavailable`` and leaves the previous listing in place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .listing import Entry, EntryKind, Listing, build_listing

logger = logging.getLogger(__name__)


class EnterStatus(Enum):
    NOTHING_SELECTED = "nothing_selected"
    DESCENDED = "descended"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class EnterOutcome:
    """Result of ``BrowserState.enter``.

    ``UNSUPPORTED`` marks files and symlinks, which have no enter action yet.
    """

    status: EnterStatus
    kind: EntryKind | None = None

    @property
    def descended(self) -> bool:
        return self.status is EnterStatus.DESCENDED


NOTHING_SELECTED = EnterOutcome(EnterStatus.NOTHING_SELECTED)


@dataclass(frozen=True)
class BrowserView:
    """Render-ready projection of the browser state."""

    path: Path
    rows: tuple[tuple[str, EntryKind], ...]
    selected: int | None


class BrowserState:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._listing = build_listing(path)
        self._selection: int | None = None

    @property
    def path(self) -> Path:
        return self._listing.path

    @property
    def listing(self) -> Listing:
        return self._listing

    @property
    def selection(self) -> int | None:
        return self._selection

    def selected_entry(self) -> Entry | None:
        if self._selection is None:
            return None
        return self._listing.entries[self._selection]

    def move_next(self) -> None:
        count = len(self._listing)
        if count == 0:
            return
        if self._selection is None or self._selection >= count - 1:
            self._selection = 0
        else:
            self._selection += 1

    def move_previous(self) -> None:
        count = len(self._listing)
        if count == 0:
            return
        if self._selection is None or self._selection == 0:
            self._selection = count - 1
        else:
            self._selection -= 1

    def deselect(self) -> None:
        self._selection = None

    def enter(self) -> EnterOutcome:
        """Descend into the selected directory.

        Files and symlinks report ``UNSUPPORTED`` without changing state.
        """
        entry = self.selected_entry()
        if entry is None:
            return NOTHING_SELECTED
        if entry.kind is not EntryKind.DIRECTORY:
            return EnterOutcome(EnterStatus.UNSUPPORTED, entry.kind)
        self._navigate(self.path / entry.name)
        return EnterOutcome(EnterStatus.DESCENDED, entry.kind)

    def go_up(self) -> bool:
        """Move to the parent directory; returns ``False`` at the filesystem root."""
        parent = self.path.parent
        if parent == self.path:
            return False
        self._navigate(parent)
        return True

    def refresh(self) -> None:
        """Re-read the current directory, dropping the selection."""
        self._navigate(self.path)

    def current_view(self) -> BrowserView:
        rows = tuple((entry.name, entry.kind) for entry in self._listing.entries)
        return BrowserView(path=self.path, rows=rows, selected=self._selection)

    def _navigate(self, target: Path) -> None:
        # build_listing raises before any assignment, so a failure keeps the old state.
        listing = build_listing(target)
        logger.info("navigated %s -> %s", self.path, listing.path)
        self._listing = listing
        self._selection = None
