"""Journal storage interface."""

from typing import Protocol, runtime_checkable

from inboxapp.core.journal import ActiveFile, ArchiveResult, Counts, DayCount, DayItems


@runtime_checkable
class JournalStore(Protocol):
    """Interface for reading and writing daily inbox files."""

    def list_markdown_files(self) -> list[str]:
        """Sorted names of tracked journal files."""
        ...

    def get_active_file_for_date(self, date: str) -> ActiveFile:
        """Load or create the file for a date, with counts."""
        ...

    def save_active_file(self, filename: str, text: str) -> Counts:
        """Overwrite a file and return fresh counts."""
        ...

    def append_item_for_date(self, date: str, item: str) -> Counts:
        """Append an item to the file for a date."""
        ...

    def update_item_for_date(self, date: str, index: int, item: str) -> DayItems:
        """Replace an item by index."""
        ...

    def delete_item_for_date(self, date: str, index: int) -> DayItems:
        """Delete an item by index, moving it to the trash."""
        ...

    def list_day_counts(self) -> list[DayCount]:
        """Item count for every day file."""
        ...

    def archive_item_matching(self, filename: str, index: int, expected: str) -> ArchiveResult:
        """Archive a line if it still matches the caller's snapshot."""
        ...

    def restore_item_matching(self, filename: str, index: int, expected: str) -> ArchiveResult:
        """Restore an archived line if it still matches the caller's snapshot."""
        ...
