"""Persistent JSON config helpers.

Stores the UI theme and table pane width.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .render import DEFAULT_PANE_PERCENT
from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "dirbrowse"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class BrowserConfig:
    theme: str = "default"
    pane_percent: float = DEFAULT_PANE_PERCENT


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_percent(value: object) -> float | None:
    """Accept numbers in the open interval (0, 100); booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def load_browser_config() -> BrowserConfig:
    data = load_config()
    theme = data.get("theme")
    pane_percent = _coerce_percent(data.get("pane_percent"))
    return BrowserConfig(
        theme=normalize_theme_name(theme if isinstance(theme, str) else None),
        pane_percent=pane_percent if pane_percent is not None else DEFAULT_PANE_PERCENT,
    )


def save_pane_percent(total_width: int, table_width: int) -> None:
    """Store the table width as a percentage clamped to ``[1.0, 99.0]``."""
    if total_width <= 0:
        return
    percent = max(1.0, min(99.0, (table_width / total_width) * 100.0))
    config = load_config()
    config["pane_percent"] = round(percent, 2)
    save_config(config)
