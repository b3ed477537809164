"""File-based logging setup.

The TUI owns the terminal, so log records only ever go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_PATH = Path(user_log_dir("dirbrowse", appauthor=False)) / "dirbrowse.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> Path | None:
    """Attach a file handler to the ``dirbrowse`` logger.

    Returns the log path in use, or ``None`` when the file cannot be opened;
    logging is then disabled instead of falling back to stderr.
    """
    path = log_file if log_file is not None else DEFAULT_LOG_PATH
    package_logger = logging.getLogger("dirbrowse")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    return path
