"""Configuration loading for DayDiary.

Configuration lives in ``~/.config/daydiary/config.toml``; set
``DAYDIARY_HOME`` to use another directory. Example::

    timezone = "UTC"          # "local", "UTC" or an IANA name
    db_path = "/path/to/daydiary.db"
"""

import logging
import os
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import toml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "DAYDIARY_HOME"
CONFIG_FILENAME = "config.toml"
DB_FILENAME = "daydiary.db"


def config_directory() -> Path:
    """Directory holding the config file and the default database."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "daydiary"


class DiaryConfig(BaseModel):
    """Application settings."""

    timezone: str = Field(
        default="local",
        description='Timezone for month boundaries: "local", "UTC" or an IANA name',
    )
    db_path: Optional[Path] = Field(default=None, description="SQLite database location")

    model_config = {"frozen": True}

    def database_path(self) -> Path:
        """Resolved database path."""
        return self.db_path or config_directory() / DB_FILENAME

    def get_timezone(self) -> Optional[tzinfo]:
        """Resolved timezone (None means local)."""
        return resolve_timezone(self.timezone)


def resolve_timezone(name: str) -> Optional[tzinfo]:
    """Turn a timezone setting into a tzinfo.

    Args:
        name: "local", "UTC" or an IANA zone name.

    Returns:
        None for local time, otherwise a tzinfo.

    Raises:
        ValueError: If the zone name is unknown.
    """
    normalized = name.strip()
    if normalized.lower() in ("", "local"):
        return None
    if normalized.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(normalized)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


def load_config(config_path: Optional[Path] = None) -> DiaryConfig:
    """Load configuration, falling back to defaults.

    A missing or unreadable file yields the default configuration.
    """
    config_path = config_path or config_directory() / CONFIG_FILENAME

    if not config_path.exists():
        return DiaryConfig()

    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return DiaryConfig()

    return DiaryConfig(
        timezone=str(data.get("timezone", "local")),
        db_path=Path(data["db_path"]).expanduser() if data.get("db_path") else None,
    )
