"""Functional core - pure business logic with no I/O."""

from .items import ITEM_DIVIDER, split_items, join_items, append_item_to_text, count_items
from .archive import (
    ARCHIVE_HEADING,
    ArchiveError,
    LineNotFound,
    TextMismatch,
    split_archived,
    combine_archived,
    archive_line,
    archive_line_matching,
    restore_line_matching,
    count_active_lines,
)
from .formats import ItemFormat, count_for_format
from .journal import Counts, DayCount, DayItems, ActiveFile, ArchiveResult, FileList, journal_filename
from .task_items import TaskItem, parse_task_item, format_task_item, format_markdown_checklist
from .days import build_recent_dates, format_view_date, parse_date

__all__ = [
    # Items
    "ITEM_DIVIDER",
    "split_items",
    "join_items",
    "append_item_to_text",
    "count_items",
    # Archive
    "ARCHIVE_HEADING",
    "ArchiveError",
    "LineNotFound",
    "TextMismatch",
    "split_archived",
    "combine_archived",
    "archive_line",
    "archive_line_matching",
    "restore_line_matching",
    "count_active_lines",
    # Formats
    "ItemFormat",
    "count_for_format",
    # Journal
    "Counts",
    "DayCount",
    "DayItems",
    "ActiveFile",
    "ArchiveResult",
    "FileList",
    "journal_filename",
    # Task items
    "TaskItem",
    "parse_task_item",
    "format_task_item",
    "format_markdown_checklist",
    # Days
    "build_recent_dates",
    "format_view_date",
    "parse_date",
]
