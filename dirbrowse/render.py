"""Rendering for the listing table and status line.

Frames are composed as lists of ANSI-styled lines and written to stdout in a
single call. Composition never mutates browser state.
"""

from __future__ import annotations

import os
import sys

from .ansi import clip_ansi_line, display_width, fit_ansi_line, sanitize_label
from .browser import BrowserView
from .listing import EntryKind
from .ui_theme import UITheme

TABLE_TITLE = " Table "
HIGHLIGHT_SYMBOL = " --> "
DEFAULT_PANE_PERCENT = 33.0
MIN_TABLE_WIDTH = 12
STATUS_HINT = "│ q quit  h/← up  l/→ open"

_KIND_SUFFIX: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "/",
    EntryKind.SYMLINK: "@",
    EntryKind.FILE: "",
}


def table_width_for(width: int, pane_percent: float) -> int:
    """Return table width in columns for a terminal ``width`` wide."""
    width = max(1, width)
    desired = int(width * pane_percent / 100.0)
    return max(min(MIN_TABLE_WIDTH, width), min(width, desired))


def scroll_start(selected: int | None, row_count: int, visible_rows: int) -> int:
    """Return the first visible row index keeping ``selected`` on screen."""
    if visible_rows <= 0 or selected is None or selected < visible_rows:
        return 0
    max_start = max(0, row_count - visible_rows)
    return min(selected - visible_rows + 1, max_start)


def build_status_line(left_text: str, width: int, right_text: str = STATUS_HINT) -> str:
    """Lay out ``left_text`` and the key hint within ``width - 1`` columns.

    The last column stays empty so the bottom row never wraps. When space is
    short the message is clipped first, then the hint.
    """
    usable = max(1, width - 1)
    hint_cols = display_width(right_text)
    if usable <= hint_cols:
        return clip_ansi_line(left_text, usable) if left_text else clip_ansi_line(right_text, usable)
    left = clip_ansi_line(left_text, max(0, usable - hint_cols - 1))
    gap = " " * (usable - display_width(left) - hint_cols)
    return f"{left}{gap}{right_text}"


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _top_border(inner: int, theme: UITheme) -> str:
    title = clip_ansi_line(TABLE_TITLE, inner)
    rule = "─" * max(0, inner - display_width(title))
    return (
        _styled(theme.border, "┌", theme)
        + _styled(theme.title, title, theme)
        + _styled(theme.border, rule + "┐", theme)
    )


def _boxed(cell: str, theme: UITheme) -> str:
    side = _styled(theme.border, "│", theme)
    return f"{side}{cell}{side}"


def _entry_cell(label: str, kind: EntryKind, is_selected: bool, inner: int, theme: UITheme) -> str:
    label = sanitize_label(label)
    if is_selected:
        return _styled(theme.selected, fit_ansi_line(HIGHLIGHT_SYMBOL + label, inner), theme)
    padding = " " * len(HIGHLIGHT_SYMBOL)
    text = fit_ansi_line(padding + label, inner)
    return _styled(theme.entry_style(kind), text, theme)


def build_table_lines(view: BrowserView, table_width: int, height: int, theme: UITheme) -> list[str]:
    """Compose the bordered table: title, path header, and visible entry rows."""
    if height <= 0 or table_width <= 0:
        return []
    if table_width < 2 or height < 3:
        return [clip_ansi_line(sanitize_label(str(view.path)), table_width)] + [""] * (height - 1)

    inner = table_width - 2
    lines = [_top_border(inner, theme)]
    header_text = fit_ansi_line(" " * len(HIGHLIGHT_SYMBOL) + sanitize_label(str(view.path)), inner)
    lines.append(_boxed(_styled(theme.header, header_text, theme), theme))

    visible = max(0, height - 3)
    start = scroll_start(view.selected, len(view.rows), visible)
    for offset in range(visible):
        idx = start + offset
        if idx < len(view.rows):
            label, kind = view.rows[idx]
            cell = _entry_cell(label, kind, idx == view.selected, inner, theme)
        else:
            cell = " " * inner
        lines.append(_boxed(cell, theme))

    lines.append(_styled(theme.border, "└" + "─" * inner + "┘", theme))
    return lines


def build_frame_lines(
    view: BrowserView,
    width: int,
    height: int,
    theme: UITheme,
    pane_percent: float = DEFAULT_PANE_PERCENT,
    status_message: str = "",
    status_is_error: bool = False,
) -> list[str]:
    """Compose one full frame: the table plus a bottom status line."""
    width = max(1, width)
    height = max(1, height)
    table = build_table_lines(view, table_width_for(width, pane_percent), height - 1, theme)

    if status_message:
        left = status_message
    else:
        count = len(view.rows)
        left = f"{count} entr{'y' if count == 1 else 'ies'}"
        if view.selected is not None:
            left = f"{view.selected + 1}/{count}"
    status = build_status_line(sanitize_label(left), width)
    style = theme.status_error if status_message and status_is_error else theme.status
    return table + [_styled(style, status, theme)]


def render_frame(lines: list[str]) -> None:
    """Write a composed frame to stdout, replacing the previous screen."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(lines))
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))


def render_plain_listing(view: BrowserView) -> str:
    """Return a colorless text rendering: the path, then one entry per line."""
    out = [f"{view.path}\n"]
    for label, kind in view.rows:
        out.append(f"{sanitize_label(label)}{_KIND_SUFFIX[kind]}\n")
    return "".join(out)
