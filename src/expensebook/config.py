"""Configuration management for expensebook.

Reads configuration from ~/.config/expensebook.toml (or the file named by
EXPENSEBOOK_CONFIG) and creates a default config if needed.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_path: Path
    log_level: str
    log_dir: Path

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / ".expensebook"
        return cls(
            base_dir=base_dir,
            db_path=base_dir / "expensebook.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    override = os.environ.get("EXPENSEBOOK_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".config" / "expensebook.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / ".expensebook"))

    db_config = data.get("database", {})
    db_path = Path(db_config.get("path", base_dir / "expensebook.db"))

    log_config = data.get("logging", {})
    log_level = str(log_config.get("level", "INFO")).upper()
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(base_dir=base_dir, db_path=db_path, log_level=log_level, log_dir=log_dir)


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "path": str(config.db_path),
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
