"""Append-only trash log for deleted items."""

import logging
from datetime import datetime
from pathlib import Path

from inboxapp.config import TRASH_FILENAME
from inboxapp.core.items import append_item_to_text

from .files import ReadStatus, WarningHandler, read_text, write_text_atomic

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_trash_entry(item: str, now: datetime) -> str:
    return f"[{now.strftime(TIMESTAMP_FORMAT)}]\n{item}"


class TrashLog:
    """
    Soft-delete log kept beside the journal files.

    Entries are never parsed back; the whole file is read, appended to
    and rewritten on every record.
    """

    def __init__(
        self,
        root: Path | str,
        filename: str = TRASH_FILENAME,
        on_warning: WarningHandler | None = None,
    ):
        self.path = Path(root) / filename
        self._on_warning = on_warning

    def _warn(self, message: str) -> None:
        logger.warning(message)
        if self._on_warning:
            self._on_warning(message)

    def record(self, item: str, now: datetime | None = None) -> None:
        """Append a timestamped copy of a deleted item."""
        entry = format_trash_entry(item, now or datetime.now())
        result = read_text(self.path)
        if result.status == ReadStatus.UNREADABLE:
            self._warn(f"Trash file {self.path} is unreadable, entry not recorded")
            return
        updated = append_item_to_text(result.text, entry)
        if not write_text_atomic(self.path, updated):
            self._warn(f"Could not write trash file {self.path}")
