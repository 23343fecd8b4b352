"""Configuration management for the inbox."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.formats import ItemFormat

logger = logging.getLogger(__name__)

TRASH_FILENAME = "trash.md"


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


def storage_root() -> Path:
    """Per-user storage directory, overridable with INBOXAPP_HOME."""
    override = os.environ.get("INBOXAPP_HOME")
    if override:
        return Path(override).expanduser()
    return _home() / ".inboxapp"


INBOX_HOME = storage_root()
CONFIG_FILE = INBOX_HOME / "inboxapp.conf"


@dataclass
class Config:
    """Inbox configuration."""

    storage_dir: str = ""
    item_format: ItemFormat = ItemFormat.DIVIDER
    trash_filename: str = TRASH_FILENAME
    recent_days: int = 7

    @property
    def root(self) -> Path:
        """Resolved storage directory."""
        if self.storage_dir:
            return Path(self.storage_dir).expanduser()
        return INBOX_HOME


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from inboxapp.conf, falling back to defaults."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to read config {path}: {e}")
        return config

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "storage_dir":
                config.storage_dir = value
            case "item_format":
                try:
                    config.item_format = ItemFormat.parse(value)
                except ValueError:
                    logger.warning(f"Unknown ITEM_FORMAT {value!r}, using {config.item_format.value}")
            case "trash_filename":
                if value:
                    config.trash_filename = value
            case "recent_days":
                try:
                    config.recent_days = max(1, int(value))
                except ValueError:
                    logger.warning(f"Invalid RECENT_DAYS {value!r}, using {config.recent_days}")

    return config
