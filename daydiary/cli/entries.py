"""Entry commands for DayDiary CLI.

Handles writing, showing, editing, deleting and exporting entries.
"""

import json
from datetime import tzinfo
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from daydiary.cli.context import open_diary
from daydiary.cli.formatting import fail, format_emotion, format_timestamp, parse_day
from daydiary.errors import NotFoundError, ValidationError
from daydiary.models import DiaryEntry, EntryPatch

console = Console()

EMOTION_CHOICE = click.IntRange(1, 5)


def _entry_panel(entry: DiaryEntry, title: str, tz: Optional[tzinfo], border_style: str = "cyan") -> Panel:
    return Panel(
        f"ID:      {entry.id}\n"
        f"Date:    {format_timestamp(entry.created_date, tz)}\n"
        f"Emotion: {format_emotion(entry.emotion)}\n\n"
        f"{entry.content or '[dim](empty)[/dim]'}",
        title=f"[bold]{title}[/bold]",
        border_style=border_style,
    )


def _not_found(entry_id: int) -> None:
    fail(console, "Not Found", f"Diary entry {entry_id} does not exist.")


@click.command("new")
@click.argument("content")
@click.option("--emotion", "-e", type=EMOTION_CHOICE, required=True, help="Emotion level (1 = great, 5 = terrible).")
@click.option("--date", "day", default=None, help="Entry date (YYYY-MM-DD). Defaults to now.")
@click.pass_obj
def new_entry(obj: dict, content: str, emotion: int, day: Optional[str]) -> None:
    """Write a new diary entry.

    CONTENT is the entry text.

    \b
    Emotion levels:
      1  Great
      2  Good
      3  So-so
      4  Bad
      5  Terrible

    \b
    Examples:
      daydiary new "Long walk by the river" --emotion 2
      daydiary new "Missed the train" -e 4 --date 2025-11-03
    """
    _, tz, store = open_diary(obj)
    created_date = parse_day(day, tz) if day else None

    try:
        entry = store.create(content, emotion, created_date)
    except ValidationError as e:
        fail(console, "Invalid Entry", str(e))

    console.print(_entry_panel(entry, "New Entry", tz, border_style="green"))


@click.command("diary")
@click.argument("entry_id", type=int)
@click.pass_obj
def show_entry(obj: dict, entry_id: int) -> None:
    """Show a single diary entry.

    \b
    Examples:
      daydiary diary 3
    """
    _, tz, store = open_diary(obj)
    try:
        entry = store.get_by_id(entry_id)
    except NotFoundError:
        _not_found(entry_id)

    console.print(_entry_panel(entry, f"Diary #{entry.id}", tz))


@click.command("edit")
@click.argument("entry_id", type=int)
@click.option("--content", "-c", default=None, help="New entry text.")
@click.option("--emotion", "-e", type=EMOTION_CHOICE, default=None, help="New emotion level.")
@click.option("--date", "day", default=None, help="Move the entry to another day (YYYY-MM-DD).")
@click.pass_obj
def edit_entry(
    obj: dict,
    entry_id: int,
    content: Optional[str],
    emotion: Optional[int],
    day: Optional[str],
) -> None:
    """Edit an existing entry.

    All options are checked before anything is saved, so a bad
    value leaves the entry untouched.

    \b
    Examples:
      daydiary edit 3 --emotion 1
      daydiary edit 3 --content "Actually a great day" --date 2025-11-04
    """
    if content is None and emotion is None and day is None:
        raise click.UsageError("Nothing to change. Pass --content, --emotion or --date.")

    _, tz, store = open_diary(obj)
    created_date = parse_day(day, tz) if day is not None else None

    fields = {}
    if content is not None:
        fields["content"] = content
    if emotion is not None:
        fields["emotion"] = emotion

    try:
        patch = EntryPatch(**fields)
        entry = store.get_by_id(entry_id)
        if fields:
            entry = store.update(entry_id, patch)
        if created_date is not None:
            entry = store.redate(entry_id, created_date)
    except NotFoundError:
        _not_found(entry_id)
    except ValidationError as e:
        fail(console, "Invalid Entry", str(e))

    console.print(_entry_panel(entry, "Entry Updated", tz, border_style="green"))


@click.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_entry(obj: dict, entry_id: int, yes: bool) -> None:
    """Delete an entry permanently.

    \b
    Examples:
      daydiary delete 3
      daydiary delete 3 --yes
    """
    _, _, store = open_diary(obj)
    if entry_id not in store:
        _not_found(entry_id)

    if not yes:
        click.confirm(f"Delete diary entry {entry_id}?", abort=True)

    try:
        removed = store.delete(entry_id)
    except NotFoundError:
        _not_found(entry_id)

    console.print(f"[green]✓ Deleted diary entry {removed.id}[/green]")


@click.command("export")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout.",
)
@click.pass_obj
def export_entries(obj: dict, output: Optional[Path]) -> None:
    """Export all entries as JSON.

    Entries are written in insertion order with the fields
    id, content, emotion and createdDate.

    \b
    Examples:
      daydiary export
      daydiary export -o diary.json
    """
    _, _, store = open_diary(obj)
    payload = json.dumps(
        [entry.model_dump(mode="json", by_alias=True) for entry in store.list()],
        ensure_ascii=False,
        indent=2,
    )

    if output is None:
        click.echo(payload)
        return

    output.write_text(payload + "\n", encoding="utf-8")
    console.print(f"[green]✓ Exported {len(store)} entries to {output}[/green]")
