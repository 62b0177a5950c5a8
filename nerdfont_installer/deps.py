from __future__ import annotations

import logging

from .config import InstallerConfig
from .console import Reporter
from .errors import InstallerError
from .lib.brew import brew_available, brew_install
from .lib.fzf import fzf_available

logger = logging.getLogger(__name__)


def ensure_brew_available(cfg: InstallerConfig) -> None:
    """Homebrew is a hard requirement and is never installed for the user."""

    if not brew_available(cfg):
        raise InstallerError("Homebrew is not installed. Please install it first: https://brew.sh")
    logger.info("Found %s", cfg.brew_binary)


def ensure_fzf_available(cfg: InstallerConfig, out: Reporter) -> None:
    # Installed for real even under --dry-run: the selection step cannot run without it.
    if fzf_available(cfg):
        logger.info("Found %s", cfg.fzf_binary)
        return

    out.warn("fzf is not installed. Attempting to install it with Homebrew...")
    if not brew_install(cfg, "fzf"):
        raise InstallerError("Failed to install fzf. Please install it manually and re-run this command.")
    out.success("fzf successfully installed.")


def check_dependencies(cfg: InstallerConfig, out: Reporter) -> None:
    """Validate everything the workflow shells out to. Safe to call repeatedly."""

    ensure_brew_available(cfg)
    ensure_fzf_available(cfg, out)
