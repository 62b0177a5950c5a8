from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import yaml

from .catalog import fetch_catalog
from .config import InstallerConfig, load_config
from .console import Reporter
from .deps import check_dependencies
from .errors import InstallerError, UsageError
from .installer import install_many
from .lib.env import default_config_path
from .logging_utils import configure_logging
from .selector import select_from

logger = logging.getLogger(__name__)

PROG = "nerdfont-installer"
HELP_FLAGS = {"-h", "--help"}

DESCRIPTION = "Interactive installer for Nerd Fonts using Homebrew and fzf."

EPILOG = f"""\
Default behavior:
  - Fetch available Nerd Fonts casks via Homebrew.
  - Let you select fonts with fzf (TAB to multi-select, ENTER to confirm).
  - Install all selected fonts via Homebrew casks.

Examples:
  # Interactive selection
  {PROG}

  # Install all available Nerd Fonts without prompts
  {PROG} --all

Exit codes:
  0   completed successfully (also when nothing was selected)
  1   validation, dependency or runtime error
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument(
        "--all",
        dest="install_all",
        action="store_true",
        help="Install all available Nerd Fonts without interactive selection.",
    )
    p.add_argument("--config", default=None, help="Path to a YAML config file")
    p.add_argument("--log", default=None, help="Also write a diagnostic log to this file")
    p.add_argument("--verbose", action="store_true", help="Print diagnostic logging to stderr")
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Query Homebrew but only log the font install commands",
    )
    return p


def _load_config(path: Optional[str]) -> InstallerConfig:
    path = path or default_config_path()
    if not path:
        return InstallerConfig()
    try:
        return load_config(path)
    except FileNotFoundError as e:
        raise InstallerError(f"Config file not found: {path}") from e
    except (ValueError, yaml.YAMLError) as e:
        raise InstallerError(f"Invalid config {path}: {e}") from e
    except OSError as e:
        raise InstallerError(f"Cannot read config {path}: {e}") from e


def install_fonts(
    cfg: InstallerConfig,
    out: Reporter,
    *,
    install_all: bool = False,
    dry_run: bool = False,
) -> None:
    """Check dependencies, fetch the catalog, then install everything or a selection."""

    check_dependencies(cfg, out)

    out.step("Fetching available Nerd Fonts from Homebrew...")
    fonts: List[str] = fetch_catalog(cfg)
    if not fonts:
        raise InstallerError("No Nerd Fonts found. Please ensure Homebrew is up to date (brew update).")

    if install_all:
        out.step("Installing all available Nerd Fonts...")
        install_many(cfg, fonts, out, dry_run=dry_run)
        return

    out.step("Select the Nerd Fonts you want to install (TAB to select multiple, ENTER to confirm).")
    selected = select_from(cfg, fonts)
    if not selected:
        out.warn("No fonts selected. Exiting without changes.")
        return

    out.step("Installing selected Nerd Fonts...")
    install_many(cfg, selected, out, dry_run=dry_run)


def run(
    *,
    install_all: bool = False,
    config_path: Optional[str] = None,
    log_path: Optional[str] = None,
    verbose: bool = False,
    dry_run: bool = False,
    out: Optional[Reporter] = None,
) -> None:
    out = out or Reporter()
    cfg = _load_config(config_path)
    configure_logging(log_path=log_path or cfg.log_path, level=cfg.log_level, verbose=verbose)
    logger.info("Starting (install_all=%s dry_run=%s)", install_all, dry_run)
    install_fonts(cfg, out, install_all=install_all, dry_run=dry_run)


def main(argv: Optional[Sequence[str]] = None, out: Optional[Reporter] = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    out = out or Reporter()
    p = build_parser()

    # Help wins over everything else on the command line, valid or not.
    if HELP_FLAGS.intersection(args_list):
        p.print_help()
        return 0

    try:
        args = p.parse_args(args_list)
        run(
            install_all=bool(args.install_all),
            config_path=args.config,
            log_path=args.log,
            verbose=bool(args.verbose),
            dry_run=bool(args.dry_run),
            out=out,
        )
        return 0
    except InstallerError as e:
        logger.debug("Fatal error", exc_info=True)
        out.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130
