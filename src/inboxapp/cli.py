"""Inbox CLI - daily plain-text journal."""

import json
import logging
import sys

import click

from .config import load_config
from .core.archive import LineNotFound, TextMismatch, split_archived
from .core.days import build_recent_dates, format_view_date, parse_date
from .core.formats import ItemFormat
from .core.items import split_items
from .core.journal import journal_filename
from .core.task_items import format_markdown_checklist
from .workflows import (
    append_item,
    archive_item_matching,
    day_counts,
    delete_item,
    get_active_file,
    get_store,
    list_files,
    restore_item_matching,
    today_string,
    update_item,
)

EXIT_LINE_NOT_FOUND = 3
EXIT_TEXT_MISMATCH = 4


def _warn(message: str) -> None:
    click.echo(f"Warning: {message}", err=True)


def _validate_date(ctx, param, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        parse_date(value)
    except ValueError:
        raise click.BadParameter("expected YYYY-MM-DD")
    return value


def _date_option(help_text: str):
    return click.option(
        "--date",
        "-d",
        "target_date",
        default=None,
        callback=_validate_date,
        help=help_text,
    )


def _format_counts(counts) -> str:
    return f"Current {counts.current} · Total {counts.total} · Files {counts.files}"


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(package_name="inboxapp")
@click.option("--root", type=click.Path(file_okay=False), default=None, help="Storage directory (overrides config)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, root: str | None, debug: bool):
    """Inbox - one plain-text file per day."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    config = load_config()
    if root:
        config.storage_dir = root
    ctx.obj = config


@main.command()
@_date_option("Date to show (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(config, target_date: str | None, as_json: bool):
    """Show the items in a day's file."""
    active = get_active_file(config, target_date, on_warning=_warn)

    if as_json:
        _echo_json(active.to_dict())
        return

    click.echo(f"{active.filename} ({_format_counts(active.counts)})\n")

    if config.item_format == ItemFormat.ARCHIVE:
        # Indexes are raw line positions, the ones archive/restore take.
        lines, archived = split_archived(active.text)
        for idx, line in enumerate(lines):
            if line.strip():
                click.echo(f"[{idx}] {line}")
        if any(line.strip() for line in archived):
            click.echo("\nArchived:")
            for idx, line in enumerate(archived):
                if line.strip():
                    click.echo(f"[{idx}] {line}")
        if not any(line.strip() for line in lines + archived):
            click.echo("Nothing here yet.")
        return

    items = split_items(active.text)
    if not items:
        click.echo("Nothing here yet.")
        return
    for idx, item in enumerate(items):
        if idx:
            click.echo("---")
        click.echo(f"[{idx}] {item}")


@main.command()
@click.argument("text", nargs=-1)
@_date_option("Date to add to (YYYY-MM-DD), defaults to today")
@click.pass_obj
def add(config, text: tuple[str, ...], target_date: str | None):
    """Add an item. Reads stdin when no text is given."""
    item = " ".join(text) if text else click.get_text_stream("stdin").read()
    if not item.strip():
        click.echo("Nothing to add.", err=True)
        return
    counts = append_item(config, item, target_date, on_warning=_warn)
    click.echo(_format_counts(counts))


@main.command()
@click.argument("index", type=click.IntRange(min=0))
@click.argument("text")
@_date_option("Date to edit (YYYY-MM-DD), defaults to today")
@click.pass_obj
def edit(config, index: int, text: str, target_date: str | None):
    """Replace the item at INDEX."""
    result = update_item(config, target_date or today_string(), index, text, on_warning=_warn)
    click.echo(f"{result.date}: {result.count} items")


@main.command()
@click.argument("index", type=click.IntRange(min=0))
@_date_option("Date to delete from (YYYY-MM-DD), defaults to today")
@click.pass_obj
def delete(config, index: int, target_date: str | None):
    """Delete the item at INDEX, keeping a copy in the trash."""
    day = target_date or today_string()
    before = get_store(config, on_warning=_warn).read_items_for_date(day)
    result = delete_item(config, day, index, on_warning=_warn)
    if len(before) == result.count:
        click.echo(f"No item at index {index}.", err=True)
    click.echo(f"{result.date}: {result.count} items")


def _run_matching(operation, config, filename: str, index: int, expected: str):
    try:
        return operation(config, filename, index, expected, on_warning=_warn)
    except LineNotFound as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_LINE_NOT_FOUND)
    except TextMismatch as e:
        click.echo(f"Error: {e}. Refresh and try again.", err=True)
        sys.exit(EXIT_TEXT_MISMATCH)


@main.command()
@click.argument("index", type=click.IntRange(min=0))
@click.option("--expect", default=None, help="Only archive if the line at INDEX reads exactly this")
@_date_option("Date to archive in (YYYY-MM-DD), defaults to today")
@click.pass_obj
def archive(config, index: int, expect: str | None, target_date: str | None):
    """Move a line to the archived section.

    INDEX is the line position shown by `show`, blank lines included.
    Without --expect the line is checked against what is on disk now.
    """
    filename = journal_filename(target_date or today_string())
    if expect is None:
        lines, _ = split_archived(get_store(config, on_warning=_warn).load_or_create(filename))
        if index >= len(lines):
            click.echo(f"Error: {LineNotFound(index)}", err=True)
            sys.exit(EXIT_LINE_NOT_FOUND)
        expect = lines[index]
    result = _run_matching(archive_item_matching, config, filename, index, expect)
    click.echo(_format_counts(result.counts))


@main.command()
@click.argument("index", type=click.IntRange(min=0))
@click.option("--expect", required=True, help="Text the archived line at INDEX must read")
@_date_option("Date to restore in (YYYY-MM-DD), defaults to today")
@click.pass_obj
def restore(config, index: int, expect: str, target_date: str | None):
    """Move an archived line back to the active section."""
    filename = journal_filename(target_date or today_string())
    result = _run_matching(restore_item_matching, config, filename, index, expect)
    click.echo(_format_counts(result.counts))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def days(config, as_json: bool):
    """Item count for every day on file."""
    counts = day_counts(config, on_warning=_warn)

    if as_json:
        _echo_json([c.to_dict() for c in counts])
        return

    if not counts:
        click.echo("No days yet.")
        return
    for entry in counts:
        click.echo(f"{entry.date}  {entry.count}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def files(config, as_json: bool):
    """List journal files with overall counts."""
    result = list_files(config, on_warning=_warn)

    if as_json:
        _echo_json(result.to_dict())
        return

    for name in result.files:
        click.echo(name)
    click.echo(f"\n{_format_counts(result.counts)}")


@main.command()
@click.option("--count", "-n", type=click.IntRange(min=1), default=None, help="Number of days to show")
@click.pass_obj
def recent(config, count: int | None):
    """Show the last few days with their item counts."""
    by_date = {c.date: c.count for c in day_counts(config, on_warning=_warn)}
    for day in build_recent_dates(today_string(), count or config.recent_days):
        click.echo(f"{day}  {format_view_date(day):12} {by_date.get(day, 0)}")


@main.command()
@_date_option("Date to export (YYYY-MM-DD), defaults to today")
@click.option("--heading", default=None, help="Heading line, e.g. '### 2026-01-13'")
@click.pass_obj
def checklist(config, target_date: str | None, heading: str | None):
    """Print a day's items as a markdown checklist."""
    items = get_store(config, on_warning=_warn).read_items_for_date(target_date or today_string())
    output = format_markdown_checklist(items, heading=heading)
    if output:
        click.echo(output)


if __name__ == "__main__":
    main()
