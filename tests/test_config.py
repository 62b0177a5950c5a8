"""
Tests for YAML configuration loading and defaults.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from nerdfont_installer.config import InstallerConfig, load_config
from nerdfont_installer.lib.env import CONFIG_ENV_VAR, default_config_path


class TestDefaults:
    def test_empty_config_uses_defaults(self):
        cfg = InstallerConfig()
        assert cfg.brew_binary == "brew"
        assert cfg.search_pattern == "/font-.*-nerd-font/"
        assert cfg.fzf_binary == "fzf"
        assert cfg.fzf_prompt == "Select Nerd Fonts: "
        assert cfg.fzf_height == "60%"
        assert cfg.fzf_layout == "reverse"
        assert cfg.log_path is None
        assert cfg.log_level == logging.INFO

    def test_partial_sections_fall_back(self):
        cfg = InstallerConfig(raw={"fzf": {"height": "40%"}, "homebrew": None})
        assert cfg.fzf_height == "40%"
        assert cfg.fzf_layout == "reverse"
        assert cfg.brew_binary == "brew"

    def test_unknown_log_level(self):
        cfg = InstallerConfig(raw={"logging": {"level": "chatty"}})
        with pytest.raises(ValueError, match="CHATTY"):
            cfg.log_level


class TestLoadConfig:
    def _write(self, tmp_path: Path, content: str, name: str = "config.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    def test_loads_values(self, tmp_path: Path):
        p = self._write(
            tmp_path,
            """\
            homebrew:
              binary: /opt/homebrew/bin/brew
              search_pattern: "/font-.*-mono.*/"
            fzf:
              prompt: "Fonts> "
            logging:
              path: /tmp/nf.log
              level: debug
            """,
        )
        cfg = load_config(str(p))
        assert cfg.brew_binary == "/opt/homebrew/bin/brew"
        assert cfg.search_pattern == "/font-.*-mono.*/"
        assert cfg.fzf_prompt == "Fonts> "
        assert cfg.log_path == "/tmp/nf.log"
        assert cfg.log_level == logging.DEBUG

    def test_empty_file_is_defaults(self, tmp_path: Path):
        cfg = load_config(str(self._write(tmp_path, "")))
        assert cfg.raw == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_rejects_non_yaml_suffix(self, tmp_path: Path):
        with pytest.raises(ValueError, match="YAML"):
            load_config(str(self._write(tmp_path, "{}", name="config.json")))

    def test_rejects_non_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(self._write(tmp_path, "- a\n- b\n")))

    def test_rejects_non_mapping_section(self, tmp_path: Path):
        with pytest.raises(ValueError, match="fzf"):
            load_config(str(self._write(tmp_path, "fzf: fast\n")))


class TestDefaultConfigPath:
    def test_none_without_file_or_env(self):
        assert default_config_path() is None

    def test_env_var_wins(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "/etc/nf.yaml")
        assert default_config_path() == "/etc/nf.yaml"

    def test_user_config_file(self, tmp_path: Path):
        p = tmp_path / "home" / ".config" / "nerdfont-installer" / "config.yaml"
        p.parent.mkdir(parents=True)
        p.write_text("{}\n")
        assert default_config_path() == str(p)


def test_load_rejects_unknown_log_level(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text("logging:\n  level: chatty\n")
    with pytest.raises(ValueError, match="logging.level"):
        load_config(str(p))
