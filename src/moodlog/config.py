"""Configuration management for Moodlog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MOODLOG_HOME = Path(os.environ.get("MOODLOG_HOME", Path.home() / "moodlog"))
CONFIG_FILE = MOODLOG_HOME / "config" / "moodlog.conf"
DEFAULT_SAVE_FILE = "moodlog.txt"
DEFAULT_EXPORT_FILE = "entries.csv"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """Moodlog configuration."""

    save_file: str = ""
    export_file: str = ""
    log_level: str = "INFO"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from moodlog.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "save_file":
                config.save_file = value
            case "export_file":
                config.export_file = value
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value}")

    return config


def resolve_save_path(config: Config) -> Path:
    """Save file from config, falling back to MOODLOG_HOME/moodlog.txt."""
    if config.save_file:
        return Path(config.save_file).expanduser()
    return MOODLOG_HOME / DEFAULT_SAVE_FILE


def resolve_export_path(config: Config) -> Path:
    """CSV export file from config, falling back to MOODLOG_HOME/entries.csv."""
    if config.export_file:
        return Path(config.export_file).expanduser()
    return MOODLOG_HOME / DEFAULT_EXPORT_FILE
