"""Journal result types shared by the store and its callers."""

from dataclasses import asdict, dataclass, field


@dataclass
class Counts:
    """Item counts: current file, all tracked files, number of tracked files."""

    current: int = 0
    total: int = 0
    files: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DayCount:
    date: str
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DayItems:
    """Post-state of a day after an item edit."""

    date: str
    items: list[str] = field(default_factory=list)
    count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ActiveFile:
    filename: str
    text: str
    counts: Counts

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ArchiveResult:
    """Saved text after an archive or restore, with fresh counts."""

    text: str
    counts: Counts

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FileList:
    files: list[str]
    counts: Counts

    def to_dict(self) -> dict:
        return asdict(self)


def journal_filename(date: str) -> str:
    """Filename for a YYYY-MM-DD date."""
    return f"{date}.md"
