from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lib.command import CmdResult


class InstallerError(RuntimeError):
    """Fatal condition. The message is shown to the user as-is."""


class UsageError(InstallerError):
    pass


class CommandError(InstallerError):
    def __init__(self, message: str, result: CmdResult) -> None:
        super().__init__(message)
        self.result = result
