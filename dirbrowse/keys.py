"""Key-token dispatch onto browser operations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .browser import BrowserState, EnterStatus
from .errors import ListingUnavailable
from .listing import EntryKind

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "CTRL_C")
DESELECT_KEYS = ("ESC",)
NEXT_KEYS = ("DOWN", "j")
PREVIOUS_KEYS = ("UP", "k")
ENTER_KEYS = ("RIGHT", "l", "ENTER")
UP_KEYS = ("LEFT", "h", "BACKSPACE")
REFRESH_KEYS = ("r",)

_UNSUPPORTED_MESSAGES: dict[EntryKind, str] = {
    EntryKind.FILE: "opening files is not supported yet",
    EntryKind.SYMLINK: "following symlinks is not supported yet",
}


@dataclass(frozen=True)
class KeyResult:
    """Outcome of one dispatched key."""

    handled: bool = False
    quit: bool = False
    message: str = ""
    is_error: bool = False


IGNORED = KeyResult()
HANDLED = KeyResult(handled=True)


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens that all trigger one browser action."""

    combos: tuple[str, ...]
    handler: Callable[[], KeyResult]


class KeyComboRegistry:
    """Token-to-action table; a later binding for a token replaces the earlier one."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], KeyResult]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, key: str) -> KeyResult:
        """Run the action bound to ``key``; unbound tokens yield ``IGNORED``."""
        handler = self._handlers.get(key)
        if handler is None:
            return IGNORED
        return handler()


def _selection_action(action: Callable[[], None]) -> Callable[[], KeyResult]:
    def run() -> KeyResult:
        action()
        return HANDLED

    return run


def _navigation_action(action: Callable[[], object]) -> Callable[[], KeyResult]:
    """Wrap a listing-rebuilding action so failures become status errors."""

    def run() -> KeyResult:
        try:
            action()
        except ListingUnavailable as exc:
            logger.warning("%s", exc)
            return KeyResult(handled=True, message=str(exc), is_error=True)
        return HANDLED

    return run


def build_browser_registry(state: BrowserState) -> KeyComboRegistry:
    """Return the default key bindings for ``state``."""

    def enter() -> KeyResult:
        try:
            outcome = state.enter()
        except ListingUnavailable as exc:
            logger.warning("%s", exc)
            return KeyResult(handled=True, message=str(exc), is_error=True)
        if outcome.status is EnterStatus.UNSUPPORTED and outcome.kind is not None:
            return KeyResult(handled=True, message=_UNSUPPORTED_MESSAGES[outcome.kind])
        return HANDLED

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS, lambda: KeyResult(handled=True, quit=True)),
        KeyComboBinding(DESELECT_KEYS, _selection_action(state.deselect)),
        KeyComboBinding(NEXT_KEYS, _selection_action(state.move_next)),
        KeyComboBinding(PREVIOUS_KEYS, _selection_action(state.move_previous)),
        KeyComboBinding(ENTER_KEYS, enter),
        KeyComboBinding(UP_KEYS, _navigation_action(state.go_up)),
        KeyComboBinding(REFRESH_KEYS, _navigation_action(state.refresh)),
    )


def dispatch_key(state: BrowserState, key: str) -> KeyResult:
    """Dispatch one key token against a freshly bound registry for ``state``."""
    return build_browser_registry(state).dispatch(key)
