from __future__ import annotations

import logging
from typing import List, Sequence

from .config import InstallerConfig
from .errors import InstallerError
from .lib.fzf import fzf_select

logger = logging.getLogger(__name__)

# 1: nothing matched the query, 130: ESC / CTRL-C inside fzf
FZF_EMPTY_EXITS = {1, 130}


def select_from(cfg: InstallerConfig, catalog: Sequence[str]) -> List[str]:
    """Let the user pick any number of catalog entries.

    Cancelling and confirming an empty pick both give [].
    """

    r = fzf_select(cfg, catalog)
    if r.returncode in FZF_EMPTY_EXITS:
        logger.info("fzf returned %s; nothing selected", r.returncode)
        return []
    if not r.ok:
        raise InstallerError(f"fzf failed with exit status {r.returncode}.")

    picked = [line.strip() for line in r.stdout.splitlines() if line.strip()]
    logger.info("Selected %d of %d", len(picked), len(catalog))
    return picked
