from __future__ import annotations

import shutil
from typing import Sequence

from ..config import InstallerConfig
from .command import CmdResult, run_cmd


def fzf_available(cfg: InstallerConfig) -> bool:
    return shutil.which(cfg.fzf_binary) is not None


def fzf_select(cfg: InstallerConfig, lines: Sequence[str]) -> CmdResult:
    """Run a multi-select fzf session over lines.

    fzf draws on the terminal and reads keys from it; only the picked lines
    come back on stdout.
    """
    argv = [
        cfg.fzf_binary,
        "--multi",
        f"--prompt={cfg.fzf_prompt}",
        f"--height={cfg.fzf_height}",
        f"--layout={cfg.fzf_layout}",
    ]
    return run_cmd(
        argv,
        check=False,
        input_text="".join(f"{line}\n" for line in lines),
        capture_stderr=False,
    )
