"""Date helpers for day-by-day navigation."""

from datetime import date, timedelta


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValueError on anything else."""
    if len(value) != 10:
        raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    return date.fromisoformat(value)


def build_recent_dates(today: str, count: int) -> list[str]:
    """ISO dates for the last `count` days, newest first, starting at today."""
    start = parse_date(today)
    return [(start - timedelta(days=i)).isoformat() for i in range(count)]


def format_view_date(value: str) -> str:
    """Short label like 'Wed, Jan 7'."""
    d = parse_date(value)
    return f"{d.strftime('%a, %b')} {d.day}"
