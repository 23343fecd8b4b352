"""Pure item parsing - divider-separated entries in a flat text blob."""

ITEM_DIVIDER = "---"
ITEM_SEPARATOR = "\n\n---\n\n"


def split_lines(text: str) -> list[str]:
    """
    Split text on line feeds only, dropping one trailing carriage return per line.

    A final newline does not start an extra empty line. Other characters
    that str.splitlines() treats as breaks stay inside their line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_items(text: str) -> list[str]:
    """
    Split raw text into items.

    A line whose stripped content is the divider closes the current item.
    Leading blank lines are skipped, each item is trimmed of trailing
    whitespace, and empty items are dropped.
    """
    items = []
    current: list[str] = []

    for line in split_lines(text):
        if not current and not line.strip():
            continue
        if line.strip() == ITEM_DIVIDER:
            item = "\n".join(current).rstrip()
            if item.strip():
                items.append(item)
            current = []
            continue
        current.append(line)

    item = "\n".join(current).rstrip()
    if item.strip():
        items.append(item)

    return items


def join_items(items: list[str]) -> str:
    """Reassemble items into canonical text."""
    if not items:
        return ""
    return ITEM_SEPARATOR.join(items) + "\n"


def append_item_to_text(existing: str, item: str) -> str:
    """Append an item after a divider. Blank items leave the text untouched."""
    item = item.rstrip()
    if not item.strip():
        return existing

    out = existing.rstrip()
    if out:
        out += ITEM_SEPARATOR
    return f"{out}{item}\n"


def count_items(text: str) -> int:
    return len(split_items(text))
