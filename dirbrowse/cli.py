"""Command-line front door for dirbrowse.

Parses CLI options, resolves the starting directory, and configures logging.
Then dispatches into the interactive browser or the plain ``--render`` output.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .app import run_browser
from .browser import BrowserState
from .errors import ListingUnavailable
from .logs import LOG_LEVELS, configure_logging
from .render import render_plain_listing
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirbrowse",
        description="Browse directories in an interactive terminal table.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", metavar="PATH", help="Print the listing of PATH and exit.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Minimum level written to the log file.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Log file location.")
    return parser


def render_listing_text(path: Path) -> str:
    """Return the plain listing for ``path``; raises ``ListingUnavailable``."""
    return render_plain_listing(BrowserState(path).current_view())


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch dirbrowse.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_level, args.log_file)

    if args.render is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --render.")
        try:
            text = render_listing_text(Path(args.render))
        except ListingUnavailable as exc:
            raise SystemExit(f"dirbrowse: {exc}") from exc
        sys.stdout.write(text)
        return

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    run_browser(path, args.theme, args.no_color)


if __name__ == "__main__":
    main()
