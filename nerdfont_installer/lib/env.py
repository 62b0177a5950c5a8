from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "NERDFONT_INSTALLER_CONFIG"


@dataclass(frozen=True)
class Paths:
    config_default: str = "~/.config/nerdfont-installer/config.yaml"
    log_fallback: str = "nerdfont-installer.log"


PATHS = Paths()


def default_config_path() -> str | None:
    """Config file to use when --config is not given, or None for built-in defaults."""

    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return from_env
    p = Path(PATHS.config_default).expanduser()
    if p.is_file():
        return str(p)
    return None
