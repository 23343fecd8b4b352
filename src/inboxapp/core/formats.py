"""Item conventions a journal file can follow."""

from enum import Enum

from .archive import count_active_lines
from .items import count_items


class ItemFormat(Enum):
    """How items are delimited inside a file."""

    DIVIDER = "divider"  # items separated by `---` lines
    ARCHIVE = "archive"  # one item per line, `## Archived` heading splits regions

    @classmethod
    def parse(cls, value: str) -> "ItemFormat":
        """Look up a format by name. Raises ValueError for unknown names."""
        return cls(value.strip().lower())


def count_for_format(item_format: ItemFormat, text: str) -> int:
    """Count visible items in text under the given convention."""
    match item_format:
        case ItemFormat.DIVIDER:
            return count_items(text)
        case ItemFormat.ARCHIVE:
            return count_active_lines(text)
