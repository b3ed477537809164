"""Runtime composition layer for dirbrowse.

Builds the initial browser state, prepares the terminal, and starts the loop.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .browser import BrowserState
from .config import load_browser_config, save_pane_percent
from .errors import ListingUnavailable
from .loop import RuntimeLoopOptions, run_main_loop
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


def run_browser(path: Path, theme_name: str | None = None, no_color: bool = False) -> None:
    """Browse ``path`` interactively until the user quits.

    Startup failures raise ``SystemExit`` with a message before the terminal
    mode is touched.
    """
    try:
        state = BrowserState(path)
    except ListingUnavailable as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(f"dirbrowse: {exc}") from exc

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("dirbrowse: interactive mode requires a terminal")

    config = load_browser_config()
    theme = resolve_theme(theme_name if theme_name is not None else config.theme, no_color=no_color)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    options = RuntimeLoopOptions(
        theme=theme,
        pane_percent=config.pane_percent,
        save_pane_percent=save_pane_percent,
    )
    logger.info("browsing %s (pid %d)", state.path, os.getpid())
    run_main_loop(state, terminal, stdin_fd, options)
