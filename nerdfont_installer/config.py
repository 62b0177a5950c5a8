from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_BREW_BINARY = "brew"
DEFAULT_SEARCH_PATTERN = "/font-.*-nerd-font/"
DEFAULT_FZF_BINARY = "fzf"
DEFAULT_FZF_PROMPT = "Select Nerd Fonts: "
DEFAULT_FZF_HEIGHT = "60%"
DEFAULT_FZF_LAYOUT = "reverse"


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def brew_binary(self) -> str:
        return str(self._section("homebrew").get("binary") or DEFAULT_BREW_BINARY)

    @property
    def search_pattern(self) -> str:
        return str(self._section("homebrew").get("search_pattern") or DEFAULT_SEARCH_PATTERN)

    @property
    def fzf_binary(self) -> str:
        return str(self._section("fzf").get("binary") or DEFAULT_FZF_BINARY)

    @property
    def fzf_prompt(self) -> str:
        return str(self._section("fzf").get("prompt") or DEFAULT_FZF_PROMPT)

    @property
    def fzf_height(self) -> str:
        return str(self._section("fzf").get("height") or DEFAULT_FZF_HEIGHT)

    @property
    def fzf_layout(self) -> str:
        return str(self._section("fzf").get("layout") or DEFAULT_FZF_LAYOUT)

    @property
    def log_path(self) -> Optional[str]:
        path = self._section("logging").get("path")
        return str(path) if path else None

    @property
    def log_level(self) -> int:
        name = str(self._section("logging").get("level") or "INFO").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging.level: {name}")
        return level


def load_config(path: str) -> InstallerConfig:
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping/object")

    for section in ("homebrew", "fzf", "logging"):
        if not isinstance(raw.get(section) or {}, dict):
            raise ValueError(f"{path}: {section} must be a mapping")

    cfg = InstallerConfig(raw=raw)
    _validate(cfg)
    return cfg


def _validate(cfg: InstallerConfig) -> None:
    """Fail at load time on values that would otherwise fail mid-run."""

    _ = cfg.log_level
