# beancomp.config.config - Configuration management
"""
Configuration file loading and management.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import sys

from loguru import logger

from beancomp.completion.context import ACCOUNT_COLUMN_LIMIT
from beancomp.completion.trigger import DATE_TRIGGER_MAX_COLUMN
from beancomp.exceptions import ConfigError

# Levels loguru knows by default
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# Use tomli for Python < 3.11, tomllib for 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class Config:
    """
    beancomp configuration.

    Configuration file locations (in order of precedence):
    1. --config argument
    2. .beancomp.toml in current directory
    3. ~/.config/beancomp/config.toml
    """

    # Completion heuristics
    date_trigger_max_column: int = DATE_TRIGGER_MAX_COLUMN
    account_column_limit: int = ACCOUNT_COLUMN_LIMIT

    # Cache settings
    cache_enabled: bool = True
    cache_dir: Optional[Path] = None
    cache_max_size_mb: int = 100
    cache_max_age_days: int = 30

    # Logging settings
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # File patterns
    ledger_extensions: list[str] = field(
        default_factory=lambda: [".beancount", ".bean"]
    )

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance
        """
        config = cls()

        # Completion settings
        completion = data.get("completion", {})
        if "date_trigger_max_column" in completion:
            config.date_trigger_max_column = int(completion["date_trigger_max_column"])
        if "account_column_limit" in completion:
            config.account_column_limit = int(completion["account_column_limit"])

        # Cache settings
        cache = data.get("cache", {})
        if "enabled" in cache:
            config.cache_enabled = bool(cache["enabled"])
        if cache.get("dir"):
            config.cache_dir = Path(cache["dir"]).expanduser()
        if "max_size_mb" in cache:
            config.cache_max_size_mb = int(cache["max_size_mb"])
        if "max_age_days" in cache:
            config.cache_max_age_days = int(cache["max_age_days"])

        # Logging settings
        log_section = data.get("logging", {})
        if "level" in log_section:
            level = str(log_section["level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Unknown log level: {log_section['level']!r}")
            config.log_level = level
        if log_section.get("file"):
            config.log_file = Path(log_section["file"]).expanduser()

        # File patterns
        if "ledger_extensions" in data:
            config.ledger_extensions = list(data["ledger_extensions"])

        return config

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "completion": {
                "date_trigger_max_column": self.date_trigger_max_column,
                "account_column_limit": self.account_column_limit,
            },
            "cache": {
                "enabled": self.cache_enabled,
                "dir": str(self.cache_dir) if self.cache_dir else None,
                "max_size_mb": self.cache_max_size_mb,
                "max_age_days": self.cache_max_age_days,
            },
            "logging": {
                "level": self.log_level,
                "file": str(self.log_file) if self.log_file else None,
            },
            "ledger_extensions": self.ledger_extensions,
        }


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_path: Optional explicit config path

    Returns:
        Config instance
    """
    candidates = []
    if config_path:
        candidates.append(config_path)
    candidates.append(Path(".beancomp.toml"))
    candidates.append(Path.home() / ".config" / "beancomp" / "config.toml")

    for path in candidates:
        if path.exists():
            try:
                return _load_from_file(path)
            except ConfigError as e:
                logger.warning(f"{e}; using defaults")
                return Config()

    # Return defaults
    return Config()


def _load_from_file(path: Path) -> Config:
    """Load config from TOML file."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}", cause=e)
    try:
        return Config.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config in {path}", cause=e)
