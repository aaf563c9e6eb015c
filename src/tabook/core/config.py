"""Configuration management for tabook."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError


def _default_data_path() -> Path:
    """Get default address book path."""
    data_dir = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return data_dir / "tabook" / "addressbook.json"


@dataclass
class Config:
    """Main application configuration (also serves as the user prefs)."""

    address_book_path: Path = field(default_factory=_default_data_path)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Returns:
            Config with file values and environment overrides applied.

        Raises:
            ConfigError: If the file is missing or not valid TOML.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config = cls()
        if value := data.get("address_book_path"):
            config.address_book_path = Path(value)
        if value := data.get("log_level"):
            config.log_level = str(value).upper()

        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, ``TABOOK_CONFIG``, or the environment only."""
        path = path or os.environ.get("TABOOK_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> None:
        if path := os.environ.get("TABOOK_DATA_PATH"):
            self.address_book_path = Path(path)
        if level := os.environ.get("TABOOK_LOG_LEVEL"):
            self.log_level = level.upper()
