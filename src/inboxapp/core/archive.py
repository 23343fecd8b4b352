"""
Active/archived region handling.

A file is split on the first `## Archived` heading line: lines before it are
active, lines after it are archived. Single lines move between the regions.
"""

from .items import split_lines

ARCHIVE_HEADING = "## Archived"


class ArchiveError(Exception):
    """Base class for failed archive/restore operations."""

    pass


class LineNotFound(ArchiveError):
    """Raised when the addressed line is out of range or blank."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"No line at index {index}")


class TextMismatch(ArchiveError):
    """Raised when the line at an index differs from the caller's snapshot."""

    def __init__(self, index: int, expected: str, actual: str):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Line {index} changed: expected {expected!r}, found {actual!r}")


def split_archived(text: str) -> tuple[list[str], list[str]]:
    """Split text into (active, archived) line lists. The heading is dropped."""
    active: list[str] = []
    archived: list[str] = []
    in_archived = False

    for line in split_lines(text):
        if not in_archived and line.rstrip() == ARCHIVE_HEADING:
            in_archived = True
            continue
        if in_archived:
            archived.append(line)
        else:
            active.append(line)

    return active, archived


def combine_archived(active: list[str], archived: list[str]) -> str:
    """Reassemble regions, emitting the heading only when archived lines exist."""
    out = "".join(f"{line}\n" for line in active)
    if archived:
        if out:
            out += "\n"
        out += f"{ARCHIVE_HEADING}\n"
        out += "".join(f"{line}\n" for line in archived)
    return out


def archive_line(text: str, index: int) -> str:
    """
    Archive the index-th non-blank active line.

    Blank lines are skipped when counting but kept in the output. An index
    with no matching line returns the text unchanged.
    """
    active, archived = split_archived(text)

    position = None
    seen = 0
    for i, line in enumerate(active):
        if not line.strip():
            continue
        if seen == index:
            position = i
            break
        seen += 1

    if position is None:
        return text

    archived.append(active.pop(position))
    return combine_archived(active, archived)


def _checked_line(lines: list[str], index: int, expected: str) -> str:
    if index < 0 or index >= len(lines):
        raise LineNotFound(index)
    line = lines[index]
    if line != expected:
        raise TextMismatch(index, expected, line)
    if not line.strip():
        raise LineNotFound(index)
    return line


def archive_line_matching(text: str, index: int, expected: str) -> str:
    """
    Archive the active line at a raw index, verifying its content first.

    Raises LineNotFound or TextMismatch instead of touching a line the caller
    did not see.
    """
    active, archived = split_archived(text)
    _checked_line(active, index, expected)
    archived.append(active.pop(index))
    return combine_archived(active, archived)


def restore_line_matching(text: str, index: int, expected: str) -> str:
    """Move the archived line at a raw index back to the end of the active region."""
    active, archived = split_archived(text)
    _checked_line(archived, index, expected)
    active.append(archived.pop(index))
    return combine_archived(active, archived)


def count_active_lines(text: str) -> int:
    """Count non-blank active lines. Archived lines never count."""
    active, _ = split_archived(text)
    return sum(1 for line in active if line.strip())
