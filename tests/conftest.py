"""
Shared test fixtures: a fake command runner standing in for Homebrew/fzf
and a reporter that prints into memory.
"""

import io
from pathlib import Path
from typing import List, Optional, Set

import pytest
from rich.console import Console

from nerdfont_installer.config import InstallerConfig
from nerdfont_installer.console import Reporter
from nerdfont_installer.errors import CommandError
from nerdfont_installer.lib.command import CmdResult
from nerdfont_installer.lib.env import CONFIG_ENV_VAR
from nerdfont_installer.logging_utils import reset_logging


class FakeRunner:
    """Records every command and answers from prefix-matched canned results."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self._rules: List[tuple] = []

    def on(self, *prefix: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        # Later rules win over earlier ones.
        self._rules.insert(0, (list(prefix), returncode, stdout, stderr))

    def __call__(self, argv, **kwargs) -> CmdResult:
        argv = list(argv)
        self.calls.append((argv, kwargs))
        if kwargs.get("dry_run"):
            return CmdResult(argv=argv, returncode=0, stdout="", stderr="")
        result = CmdResult(argv=argv, returncode=0, stdout="", stderr="")
        for prefix, returncode, stdout, stderr in self._rules:
            if argv[: len(prefix)] == prefix:
                result = CmdResult(argv=argv, returncode=returncode, stdout=stdout, stderr=stderr)
                break
        if kwargs.get("check", True) and not result.ok:
            raise CommandError(f"Command failed ({result.returncode})", result)
        return result

    def commands(self, *prefix: str) -> List[List[str]]:
        return [argv for argv, _ in self.calls if argv[: len(prefix)] == list(prefix)]


class FakeTools:
    """Controls which binaries shutil.which() reports as present."""

    def __init__(self, present: Optional[Set[str]] = None) -> None:
        self.present = set(present or ())

    def which(self, name: str, *args, **kwargs) -> Optional[str]:
        return f"/usr/local/bin/{name}" if name in self.present else None


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Keep the user's real config and logging setup out of every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield
    reset_logging()


@pytest.fixture
def fake_cmd(monkeypatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr("nerdfont_installer.lib.brew.run_cmd", runner)
    monkeypatch.setattr("nerdfont_installer.lib.fzf.run_cmd", runner)
    return runner


@pytest.fixture
def tools(monkeypatch) -> FakeTools:
    fake = FakeTools({"brew", "fzf"})
    monkeypatch.setattr("shutil.which", fake.which)
    return fake


@pytest.fixture
def cfg() -> InstallerConfig:
    return InstallerConfig()


def _memory_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(console=_memory_console(), err_console=_memory_console())
