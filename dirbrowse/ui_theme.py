"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing table and status line.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    header: str
    selected: str
    entry_dir: str
    entry_file: str
    entry_symlink: str
    status: str
    status_error: str

    def entry_style(self, kind: EntryKind) -> str:
        if kind is EntryKind.DIRECTORY:
            return self.entry_dir
        if kind is EntryKind.SYMLINK:
            return self.entry_symlink
        return self.entry_file


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    title="\033[1m",
    header="\033[1;4;97;104m",
    selected="\033[3;30;104m",
    entry_dir="\033[1;94m",
    entry_file="",
    entry_symlink="\033[92m",
    status="\033[7m",
    status_error="\033[1;97;41m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    header="\033[1;4;38;5;153;48;5;24m",
    selected="\033[3;30;48;5;45m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_symlink="\033[38;5;84m",
    status="\033[38;5;153;48;5;24m",
    status_error="\033[1;38;5;231;48;5;124m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    header="",
    selected="",
    entry_dir="",
    entry_file="",
    entry_symlink="",
    status="",
    status_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
