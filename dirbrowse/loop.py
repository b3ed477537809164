"""Main interactive event loop for the terminal UI.

Each iteration renders when needed, reads one key token, and dispatches it to
the browser state. Feature logic lives in ``keys`` and ``browser``.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from .browser import BrowserState
from .input import read_key
from .keys import KeyResult, build_browser_registry
from .render import MIN_TABLE_WIDTH, build_frame_lines, render_frame, table_width_for
from .terminal import TerminalController
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120
STATUS_MESSAGE_SECONDS = 4.0
PANE_RESIZE_STEP = 2
SHRINK_KEYS = frozenset({"<"})
GROW_KEYS = frozenset({">"})


@dataclass
class LoopState:
    """Per-session render bookkeeping kept alongside the browser state."""

    pane_percent: float
    status_message: str = ""
    status_is_error: bool = False
    status_message_until: float = 0.0
    dirty: bool = True
    last_size: tuple[int, int] = (0, 0)

    def show_status(self, message: str, is_error: bool, now: float) -> None:
        self.status_message = message
        self.status_is_error = is_error
        self.status_message_until = now + STATUS_MESSAGE_SECONDS
        self.dirty = True

    def expire_status(self, now: float) -> None:
        if self.status_message and now >= self.status_message_until:
            self.status_message = ""
            self.status_is_error = False
            self.status_message_until = 0.0
            self.dirty = True


@dataclass(frozen=True)
class RuntimeLoopOptions:
    theme: UITheme
    pane_percent: float
    save_pane_percent: Callable[[int, int], None] | None = None


def resize_pane(loop_state: LoopState, columns: int, delta: int) -> bool:
    """Widen or narrow the table by ``delta`` columns; returns whether it changed."""
    columns = max(1, columns)
    current = table_width_for(columns, loop_state.pane_percent)
    target = max(min(MIN_TABLE_WIDTH, columns), min(columns, current + delta))
    if target == current:
        return False
    loop_state.pane_percent = max(1.0, min(99.0, (target / columns) * 100.0))
    loop_state.dirty = True
    return True


def run_main_loop(
    state: BrowserState,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions,
    key_reader: Callable[[int, int | None], str] = read_key,
) -> None:
    """Run the interactive loop until the quit key is pressed."""
    loop_state = LoopState(pane_percent=options.pane_percent)
    registry = build_browser_registry(state)

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            now = time.monotonic()
            loop_state.expire_status(now)
            size = (term.columns, term.lines)
            if size != loop_state.last_size:
                loop_state.last_size = size
                loop_state.dirty = True

            if loop_state.dirty:
                render_frame(
                    build_frame_lines(
                        state.current_view(),
                        term.columns,
                        term.lines,
                        options.theme,
                        pane_percent=loop_state.pane_percent,
                        status_message=loop_state.status_message,
                        status_is_error=loop_state.status_is_error,
                    )
                )
                loop_state.dirty = False

            try:
                key = key_reader(stdin_fd, KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            if key in SHRINK_KEYS or key in GROW_KEYS:
                delta = PANE_RESIZE_STEP if key in GROW_KEYS else -PANE_RESIZE_STEP
                if resize_pane(loop_state, term.columns, delta) and options.save_pane_percent is not None:
                    options.save_pane_percent(
                        term.columns,
                        table_width_for(term.columns, loop_state.pane_percent),
                    )
                continue

            result: KeyResult = registry.dispatch(key)
            if result.quit:
                logger.info("quit requested")
                break
            if not result.handled:
                continue
            if result.message:
                loop_state.show_status(result.message, result.is_error, time.monotonic())
            loop_state.dirty = True
