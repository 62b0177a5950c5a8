from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .lib.env import PATHS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    verbose: bool = False,
) -> Optional[str]:
    """Configure diagnostic logging on the root logger.

    The coloured status lines the user sees are printed by the console
    reporter; this log carries the command lines and captured output behind
    them.

    - A file handler is added only when log_path is given. If that path
      cannot be opened, the log goes to ./nerdfont-installer.log instead.
    - verbose adds a stderr handler at DEBUG.

    Returns the file path actually used, or None when no file is written.
    """

    root = logging.getLogger()

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(root, "_nerdfont_configured", False):
        return getattr(root, "_nerdfont_log_path", log_path)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = []
    chosen_path: Optional[str] = None

    if log_path:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler: logging.Handler = logging.FileHandler(log_path)
            chosen_path = log_path
        except OSError:
            fallback = str(Path.cwd() / PATHS.log_fallback)
            file_handler = logging.FileHandler(fallback)
            chosen_path = fallback
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if verbose:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)
        level = logging.DEBUG

    if not handlers:
        # Keep library warnings from falling through to logging.lastResort.
        handlers.append(logging.NullHandler())

    root.setLevel(level)
    for h in handlers:
        root.addHandler(h)

    setattr(root, "_nerdfont_configured", True)
    setattr(root, "_nerdfont_log_path", chosen_path)
    setattr(root, "_nerdfont_handlers", handlers)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path


def reset_logging() -> None:
    """Drop handlers installed by configure_logging()."""

    root = logging.getLogger()
    if not getattr(root, "_nerdfont_configured", False):
        return
    for h in getattr(root, "_nerdfont_handlers", []):
        root.removeHandler(h)
        h.close()
    setattr(root, "_nerdfont_handlers", [])
    setattr(root, "_nerdfont_configured", False)
    setattr(root, "_nerdfont_log_path", None)
