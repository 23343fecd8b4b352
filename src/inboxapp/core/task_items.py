"""Checklist markers on items - pure formatting, no I/O."""

import re
from dataclasses import dataclass

TASK_MARKER = re.compile(r"^-\s\[( |x|X)\]\s+")


@dataclass
class TaskItem:
    """An item split into its checked state and its text."""

    checked: bool
    text: str


def parse_task_item(item: str) -> TaskItem:
    """Strip a leading `- [ ]` / `- [x]` marker from the first line."""
    lines = item.split("\n")
    match = TASK_MARKER.match(lines[0])
    if match:
        lines[0] = lines[0][match.end():]
        return TaskItem(checked=match.group(1).lower() == "x", text="\n".join(lines))
    return TaskItem(checked=False, text=item)


def format_task_item(text: str, checked: bool) -> str:
    """Prefix the first line of text with a checkbox marker."""
    lines = text.split("\n")
    marker = "- [x] " if checked else "- [ ] "
    lines[0] = marker + lines[0]
    return "\n".join(lines)


def format_markdown_checklist_item(item: str, checked: bool = False) -> str:
    """
    Render an item as a markdown checklist entry.

    An item that already carries a marker keeps its own checked state.
    Continuation lines are indented two spaces so they stay inside the entry.
    """
    parsed = parse_task_item(item)
    is_checked = parsed.checked or checked
    first, *rest = parsed.text.split("\n")
    marker = "- [x] " if is_checked else "- [ ] "
    lines = [marker + first]
    lines.extend(f"  {line}" if line.strip() else "" for line in rest)
    return "\n".join(lines)


def format_markdown_checklist(items: list[str], heading: str | None = None) -> str:
    """Render items as a checklist separated by blank lines, with an optional heading."""
    body = "\n\n".join(format_markdown_checklist_item(item) for item in items)
    if heading:
        return f"{heading}\n\n{body}" if body else heading
    return body
