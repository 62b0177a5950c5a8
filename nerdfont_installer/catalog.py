from __future__ import annotations

import logging
from typing import List

from .config import InstallerConfig
from .errors import CommandError, InstallerError
from .lib.brew import brew_search

logger = logging.getLogger(__name__)

SEARCH_RECOVERY_HINT = """\
Failed to search Nerd Fonts via Homebrew.

Suggested manual recovery steps (use with caution):

  rm -rf "$(brew --repo homebrew/core)"
  brew tap homebrew/core --force
  brew untap --force homebrew/cask || true
  brew tap homebrew/cask --force

After that, re-run this command."""


def parse_search_output(text: str) -> List[str]:
    """Return the first token of every listing line, in order.

    Blank lines and Homebrew section headers ("==> Casks") are dropped. A line
    with several words contributes only its first word.
    """

    names: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("==>"):
            continue
        names.append(line.split()[0])
    return names


def fetch_catalog(cfg: InstallerConfig) -> List[str]:
    try:
        r = brew_search(cfg, cfg.search_pattern)
    except CommandError as e:
        logger.error("brew search failed (%s): %s", e.result.returncode, e.result.stderr.strip())
        raise InstallerError(SEARCH_RECOVERY_HINT) from e

    names = parse_search_output(r.stdout)
    logger.info("Catalog has %d entries (pattern=%s)", len(names), cfg.search_pattern)
    return names
