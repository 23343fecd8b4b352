"""File-based journal storage adapter."""

import logging
from pathlib import Path

from inboxapp.config import TRASH_FILENAME
from inboxapp.core.archive import archive_line, archive_line_matching, restore_line_matching
from inboxapp.core.formats import ItemFormat, count_for_format
from inboxapp.core.items import append_item_to_text, count_items, join_items, split_items
from inboxapp.core.journal import (
    ActiveFile,
    ArchiveResult,
    Counts,
    DayCount,
    DayItems,
    journal_filename,
)

from .files import ReadResult, ReadStatus, WarningHandler, read_text, write_text_atomic
from .trash import TrashLog

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file named
    after its date, directly under the root directory. Every call re-reads
    from disk; nothing is cached between calls.
    """

    def __init__(
        self,
        root: Path | str,
        item_format: ItemFormat = ItemFormat.DIVIDER,
        trash_filename: str = TRASH_FILENAME,
        on_warning: WarningHandler | None = None,
    ):
        self.root = Path(root).expanduser()
        self.item_format = item_format
        self.trash_filename = trash_filename
        self._on_warning = on_warning
        self.trash = TrashLog(self.root, trash_filename, on_warning=on_warning)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        if self._on_warning:
            self._on_warning(message)

    def _ensure_root(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self._warn(f"Could not create storage directory {self.root}: {e}")

    def _read(self, path: Path) -> str:
        result = read_text(path)
        if result.status == ReadStatus.UNREADABLE:
            self._warn(f"Could not read {path}, treating it as empty")
        return result.text

    def _write(self, path: Path, text: str) -> None:
        if not write_text_atomic(path, text):
            self._warn(f"Could not write {path}, changes were not saved")

    def _count(self, text: str) -> int:
        return count_for_format(self.item_format, text)

    # ============== Files ==============

    def _load(self, filename: str) -> ReadResult:
        path = self.root / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self._warn(f"Could not create directory {path.parent}: {e}")

        result = read_text(path)
        if result.status == ReadStatus.MISSING:
            self._write(path, "")
        elif result.status == ReadStatus.UNREADABLE:
            self._warn(f"Could not read {path}, treating it as empty")
        return result

    def _load_for_update(self, filename: str) -> str | None:
        """Text to modify, or None when the file exists but cannot be read."""
        result = self._load(filename)
        if result.status == ReadStatus.UNREADABLE:
            self._warn(f"Left {self.root / filename} untouched, its content could not be read")
            return None
        return result.text

    def load_or_create(self, filename: str) -> str:
        """Read a file, creating it empty if it does not exist yet."""
        return self._load(filename).text

    def list_markdown_files(self) -> list[str]:
        """Sorted names of the .md files in the root, excluding the trash file."""
        try:
            entries = list(self.root.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            self._warn(f"Could not list {self.root}: {e}")
            return []

        return sorted(
            path.name
            for path in entries
            if path.suffix == ".md" and path.name != self.trash_filename
        )

    def counts_for(self, active_filename: str, active_text: str) -> Counts:
        """
        Counts across all tracked files.

        The active file is always tracked, and its in-memory text is used
        instead of what is on disk so unsaved edits are reflected.
        """
        files = self.list_markdown_files()
        if active_filename not in files:
            files.append(active_filename)
            files.sort()

        current = self._count(active_text)
        total = 0
        for name in files:
            if name == active_filename:
                total += current
                continue
            total += self._count(self._read(self.root / name))

        return Counts(current=current, total=total, files=len(files))

    def get_active_file_for_date(self, date: str) -> ActiveFile:
        """Load or create the file for a date, with counts."""
        self._ensure_root()
        filename = journal_filename(date)
        text = self.load_or_create(filename)
        return ActiveFile(filename=filename, text=text, counts=self.counts_for(filename, text))

    def save_active_file(self, filename: str, text: str) -> Counts:
        """Overwrite a file verbatim and recompute counts."""
        self._ensure_root()
        self._write(self.root / filename, text)
        return self.counts_for(filename, text)

    # ============== Items ==============

    def append_item(self, filename: str, item: str) -> Counts:
        text = self._load_for_update(filename)
        if text is None:
            return self.counts_for(filename, "")
        return self.save_active_file(filename, append_item_to_text(text, item))

    def append_item_for_date(self, date: str, item: str) -> Counts:
        """Append an item to the file for a date."""
        return self.append_item(journal_filename(date), item)

    def read_items_for_date(self, date: str) -> list[str]:
        """Items for a date. Unlike load_or_create, never creates the file."""
        text = self._read(self.root / journal_filename(date))
        if not text.strip():
            return []
        return split_items(text)

    def update_item_for_date(self, date: str, index: int, item: str) -> DayItems:
        """
        Replace the item at index. Out-of-range indexes change nothing.

        The returned items are re-parsed from the saved text, so a blank
        replacement disappears and one holding a divider line becomes two.
        """
        filename = journal_filename(date)
        text = self._load_for_update(filename)
        if text is None:
            return DayItems(date=date)
        items = split_items(text)
        if 0 <= index < len(items):
            items[index] = item
        updated = join_items(items)
        self.save_active_file(filename, updated)
        items = split_items(updated)
        return DayItems(date=date, items=items, count=len(items))

    def delete_item_for_date(self, date: str, index: int) -> DayItems:
        """Remove the item at index, keeping a copy in the trash log."""
        filename = journal_filename(date)
        text = self._load_for_update(filename)
        if text is None:
            return DayItems(date=date)
        items = split_items(text)
        if 0 <= index < len(items):
            removed = items.pop(index)
            self.trash.record(removed)
        self.save_active_file(filename, join_items(items))
        return DayItems(date=date, items=items, count=len(items))

    def list_day_counts(self) -> list[DayCount]:
        """Divider-delimited item count for every day file."""
        return [
            DayCount(
                date=name.removesuffix(".md"),
                count=count_items(self._read(self.root / name)),
            )
            for name in self.list_markdown_files()
        ]

    # ============== Archive ==============

    def archive_item(self, filename: str, index: int) -> ArchiveResult:
        """Archive the index-th non-blank active line and save."""
        text = self._load_for_update(filename)
        if text is None:
            return ArchiveResult(text="", counts=self.counts_for(filename, ""))
        updated = archive_line(text, index)
        return ArchiveResult(text=updated, counts=self.save_active_file(filename, updated))

    def archive_item_matching(self, filename: str, index: int, expected: str) -> ArchiveResult:
        """
        Archive the active line at index if it still reads `expected`.

        Raises LineNotFound or TextMismatch, leaving the file untouched.
        An unreadable file has no lines, so it raises LineNotFound.
        """
        text = self._load_for_update(filename) or ""
        updated = archive_line_matching(text, index, expected)
        return ArchiveResult(text=updated, counts=self.save_active_file(filename, updated))

    def restore_item_matching(self, filename: str, index: int, expected: str) -> ArchiveResult:
        """Move the archived line at index back to the active region if it still reads `expected`."""
        text = self._load_for_update(filename) or ""
        updated = restore_line_matching(text, index, expected)
        return ArchiveResult(text=updated, counts=self.save_active_file(filename, updated))
