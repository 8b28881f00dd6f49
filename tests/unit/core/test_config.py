"""Tests for Config TOML loading and env overrides."""

from pathlib import Path

import pytest

from tabledoc.core.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TABLEDOC_PATH", "TABLEDOC_CREATE", "TABLEDOC_LOG_LEVEL", "TABLEDOC_CONFIG"):
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch, tmp_path: Path):
    """Default path should live under XDG_DATA_HOME."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    config = Config()

    assert config.store.path == tmp_path / "tabledoc" / "database.json"
    assert config.store.create_if_missing is False
    assert config.logging.level == "WARNING"


def test_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("TABLEDOC_PATH", str(tmp_path / "env.json"))
    monkeypatch.setenv("TABLEDOC_CREATE", "yes")
    monkeypatch.setenv("TABLEDOC_LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.store.path == tmp_path / "env.json"
    assert config.store.create_if_missing is True
    assert config.logging.level == "DEBUG"


def test_from_file_applies_toml_then_env(tmp_path: Path, monkeypatch):
    """Environment variables should override TOML values."""
    toml_path = tmp_path / "tabledoc.toml"
    toml_path.write_text(
        "\n".join(
            [
                "[store]",
                'path = "/tmp/from_toml.json"',
                "create_if_missing = true",
                "",
                "[logging]",
                'level = "info"',
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("TABLEDOC_PATH", "/tmp/from_env.json")

    config = Config.from_file(toml_path)

    assert str(config.store.path) == "/tmp/from_env.json"
    assert config.store.create_if_missing is True
    assert config.logging.level == "INFO"


def test_from_env_or_file_uses_config_env(tmp_path: Path, monkeypatch):
    """TABLEDOC_CONFIG should be used when no explicit path is provided."""
    toml_path = tmp_path / "tabledoc.toml"
    toml_path.write_text('[logging]\nlevel = "error"\n', encoding="utf-8")
    monkeypatch.setenv("TABLEDOC_CONFIG", str(toml_path))

    config = Config.from_env_or_file()

    assert config.logging.level == "ERROR"


def test_from_env_or_file_without_file():
    assert Config.from_env_or_file().logging.level == "WARNING"
