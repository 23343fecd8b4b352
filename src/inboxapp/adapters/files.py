"""Text file I/O that reports failures instead of raising them."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

WarningHandler = Callable[[str], None]


class ReadStatus(Enum):
    OK = "ok"
    MISSING = "missing"
    UNREADABLE = "unreadable"


@dataclass
class ReadResult:
    """File content plus whether the file was there and readable."""

    text: str
    status: ReadStatus

    @property
    def ok(self) -> bool:
        return self.status == ReadStatus.OK


def read_text(path: Path) -> ReadResult:
    """Read a UTF-8 file as-is. Absent and unreadable files both yield empty text."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return ReadResult(f.read(), ReadStatus.OK)
    except FileNotFoundError:
        return ReadResult("", ReadStatus.MISSING)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Unreadable file {path}: {e}")
        return ReadResult("", ReadStatus.UNREADABLE)


def write_text_atomic(path: Path, text: str) -> bool:
    """Replace path with text via a sibling temp file. Returns False on failure."""
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp, path)
        return True
    except OSError as e:
        logger.warning(f"Failed to write {path}: {e}")
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug(f"Could not remove temp file {tmp}")
        return False
