"""Shared command layer between the CLI and any other front end.

Each function resolves the store from config, performs one storage
operation, and returns a fresh snapshot. The caller decides what "today" is.
"""

from datetime import date

from .adapters.file_journal import FileJournalStore
from .adapters.files import WarningHandler
from .config import Config
from .core.journal import ActiveFile, ArchiveResult, Counts, DayCount, DayItems, FileList


def get_store(config: Config, on_warning: WarningHandler | None = None) -> FileJournalStore:
    """Build the journal store described by config."""
    return FileJournalStore(
        config.root,
        item_format=config.item_format,
        trash_filename=config.trash_filename,
        on_warning=on_warning,
    )


def today_string() -> str:
    return date.today().isoformat()


def get_active_file(config: Config, today: str | None = None, on_warning: WarningHandler | None = None) -> ActiveFile:
    """Open today's file, creating it if needed."""
    store = get_store(config, on_warning)
    return store.get_active_file_for_date(today or today_string())


def save_active_file(config: Config, filename: str, text: str, on_warning: WarningHandler | None = None) -> Counts:
    return get_store(config, on_warning).save_active_file(filename, text)


def archive_item(config: Config, filename: str, index: int, on_warning: WarningHandler | None = None) -> ArchiveResult:
    """Archive the index-th visible line of a file."""
    return get_store(config, on_warning).archive_item(filename, index)


def archive_item_matching(
    config: Config,
    filename: str,
    index: int,
    expected: str,
    on_warning: WarningHandler | None = None,
) -> ArchiveResult:
    """Archive a line after checking it still matches. Raises ArchiveError subclasses."""
    return get_store(config, on_warning).archive_item_matching(filename, index, expected)


def restore_item_matching(
    config: Config,
    filename: str,
    index: int,
    expected: str,
    on_warning: WarningHandler | None = None,
) -> ArchiveResult:
    """Restore an archived line after checking it still matches. Raises ArchiveError subclasses."""
    return get_store(config, on_warning).restore_item_matching(filename, index, expected)


def list_files(config: Config, today: str | None = None, on_warning: WarningHandler | None = None) -> FileList:
    """All tracked files, with counts relative to today's file."""
    store = get_store(config, on_warning)
    active = store.get_active_file_for_date(today or today_string())
    return FileList(files=store.list_markdown_files(), counts=active.counts)


def append_item(config: Config, item: str, day: str | None = None, on_warning: WarningHandler | None = None) -> Counts:
    return get_store(config, on_warning).append_item_for_date(day or today_string(), item)


def update_item(
    config: Config,
    day: str,
    index: int,
    item: str,
    on_warning: WarningHandler | None = None,
) -> DayItems:
    return get_store(config, on_warning).update_item_for_date(day, index, item)


def delete_item(config: Config, day: str, index: int, on_warning: WarningHandler | None = None) -> DayItems:
    return get_store(config, on_warning).delete_item_for_date(day, index)


def day_counts(config: Config, on_warning: WarningHandler | None = None) -> list[DayCount]:
    return get_store(config, on_warning).list_day_counts()
