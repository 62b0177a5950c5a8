"""Coloured status lines for the person at the terminal.

Every line is also written to the diagnostic log so a ``--log`` file reads as
a complete transcript of the run.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class Reporter:
    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def _print(self, console: Console, text: str, style: str = "") -> None:
        # Package ids are printed literally, never parsed as markup.
        console.print(text, style=style or None, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def step(self, msg: str) -> None:
        logger.info("STEP %s", msg)
        self.console.print()
        self._print(self.console, f"➜  {msg}", "cyan")
        self.console.print()

    def success(self, msg: str) -> None:
        logger.info("OK %s", msg)
        self.console.print()
        self._print(self.console, f"✅  {msg}", "green")
        self.console.print()

    def warn(self, msg: str) -> None:
        logger.warning("%s", msg)
        self._print(self.console, f"⚠️  {msg}", "yellow")

    def error(self, msg: str) -> None:
        logger.error("%s", msg)
        self._print(self.err_console, f"❗  {msg}", "red")

    def info(self, msg: str) -> None:
        logger.info("%s", msg)
        self._print(self.console, msg)
