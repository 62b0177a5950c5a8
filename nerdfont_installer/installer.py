from __future__ import annotations

import enum
import logging
from typing import Iterable

from .config import InstallerConfig
from .console import Reporter
from .lib.brew import brew_cask_installed, brew_install

logger = logging.getLogger(__name__)


class InstallOutcome(enum.Enum):
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    FAILED = "failed"


def is_installed(cfg: InstallerConfig, name: str) -> bool:
    return brew_cask_installed(cfg, name)


def install_one(
    cfg: InstallerConfig,
    name: str,
    out: Reporter,
    *,
    dry_run: bool = False,
) -> InstallOutcome:
    """Install one font cask unless Homebrew already has it.

    A failed install is reported and returned, never raised: one broken cask
    must not stop the rest of the batch.
    """

    if is_installed(cfg, name):
        out.warn(f"{name} is already installed. Skipping.")
        return InstallOutcome.ALREADY_INSTALLED

    out.info(f"Installing {name}...")
    if not brew_install(cfg, name, cask=True, dry_run=dry_run):
        out.warn(f"Failed to install {name}.")
        return InstallOutcome.FAILED

    if dry_run:
        out.success(f"Would install {name} (dry run).")
    else:
        out.success(f"Successfully installed {name}.")
    return InstallOutcome.INSTALLED


def install_many(
    cfg: InstallerConfig,
    names: Iterable[str],
    out: Reporter,
    *,
    dry_run: bool = False,
) -> None:
    for name in names:
        name = name.strip()
        if not name:
            continue
        outcome = install_one(cfg, name, out, dry_run=dry_run)
        logger.info("%s: %s", name, outcome.value)
