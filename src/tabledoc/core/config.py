"""Configuration management for tabledoc."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _default_store_path() -> Path:
    """Get default document path."""
    data_dir = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return data_dir / "tabledoc" / "database.json"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class StoreConfig:
    """Document store configuration."""

    path: Path = field(default_factory=_default_store_path)
    # Create the document as an empty object when the file does not exist
    create_if_missing: bool = False


@dataclass
class LoggingConfig:
    """Log output configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Main application configuration."""

    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | None = None) -> "Config":
        """Load from an explicit file, TABLEDOC_CONFIG, or the environment only."""
        if path is None and (env_path := os.environ.get("TABLEDOC_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        store = data.get("store", {})
        if "path" in store:
            self.store.path = Path(store["path"]).expanduser()
        if "create_if_missing" in store:
            self.store.create_if_missing = bool(store["create_if_missing"])

        logging = data.get("logging", {})
        if "level" in logging:
            self.logging.level = str(logging["level"]).upper()

    def _apply_env(self) -> None:
        if path := os.environ.get("TABLEDOC_PATH"):
            self.store.path = Path(path).expanduser()

        if create := os.environ.get("TABLEDOC_CREATE"):
            self.store.create_if_missing = _parse_bool(create)

        if level := os.environ.get("TABLEDOC_LOG_LEVEL"):
            self.logging.level = level.upper()
