"""Nerd Font installer (Homebrew + fzf).

Core design goals:
- Thin wrapper over existing tools; Homebrew does the real work
- Idempotent installs (already-installed casks are skipped)
- One broken cask never stops the batch
- Centralized logging
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
