from __future__ import annotations

import logging
import shutil

from ..config import InstallerConfig
from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


def brew_available(cfg: InstallerConfig) -> bool:
    return shutil.which(cfg.brew_binary) is not None


def brew_search(cfg: InstallerConfig, pattern: str) -> CmdResult:
    """`brew search <pattern>`; raises CommandError on a non-zero exit."""
    return run_cmd([cfg.brew_binary, "search", pattern])


def brew_cask_installed(cfg: InstallerConfig, name: str) -> bool:
    """Return True if Homebrew lists the cask as installed.

    `brew list --cask` exits non-zero for casks that are not installed, which
    is an ordinary negative answer here.
    """
    return run_cmd([cfg.brew_binary, "list", "--cask", name], check=False).ok


def brew_install(
    cfg: InstallerConfig,
    name: str,
    *,
    cask: bool = False,
    dry_run: bool = False,
) -> bool:
    argv = [cfg.brew_binary, "install"]
    if cask:
        argv.append("--cask")
    argv.append(name)
    # Homebrew's download/progress output goes straight to the terminal.
    r = run_cmd(argv, check=False, capture_stdout=False, capture_stderr=False, dry_run=dry_run)
    if not r.ok:
        logger.warning("brew install %s exited with %s", name, r.returncode)
    return r.ok
