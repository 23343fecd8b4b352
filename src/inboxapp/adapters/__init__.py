"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .files import ReadResult, ReadStatus, read_text, write_text_atomic
from .trash import TrashLog

__all__ = [
    "FileJournalStore",
    "ReadResult",
    "ReadStatus",
    "read_text",
    "write_text_atomic",
    "TrashLog",
]
