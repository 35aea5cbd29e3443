"""Month view commands for DayDiary CLI.

Shows the entries of one calendar month and their emotion summary.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from daydiary.cli.context import open_diary
from daydiary.cli.formatting import (
    CATEGORY_STYLES,
    format_emotion,
    format_timestamp,
    parse_month,
)
from daydiary.core.date_range import month_range, month_title, shift_month
from daydiary.core.emotion import summarize
from daydiary.core.monthly import filter_sort

console = Console()

PREVIEW_LENGTH = 40


def _resolve_pivot(month: Optional[str], offset: int, tz) -> date:
    """Pick the pivot date from --month / --offset (defaults to today)."""
    pivot = parse_month(month) if month else datetime.now(tz).date()
    if offset:
        pivot = shift_month(pivot, offset)
    return pivot


def _preview(content: str) -> str:
    first_line = content.strip().splitlines()[0] if content.strip() else ""
    if len(first_line) > PREVIEW_LENGTH:
        return first_line[:PREVIEW_LENGTH - 3] + "..."
    return first_line or "[dim](empty)[/dim]"


def _summary_line(counts: dict) -> str:
    parts = []
    for category, count in counts.items():
        style = CATEGORY_STYLES[category]
        parts.append(f"[{style}]{category.value.title()}: {count}[/{style}]")
    return "  ".join(parts)


@click.command("home")
@click.option("--month", "month", default=None, help="Month to show (YYYY-MM). Defaults to the current month.")
@click.option("--offset", type=int, default=0, help="Shift the month by N (negative = earlier).")
@click.option("--oldest", is_flag=True, help="Sort oldest entries first.")
@click.pass_obj
def home(obj: dict, month: Optional[str], offset: int, oldest: bool) -> None:
    """Display the entries of one month.

    \b
    Examples:
      daydiary home                   # Current month
      daydiary home --offset -1       # Previous month
      daydiary home --month 2025-12   # December 2025
    """
    _, tz, store = open_diary(obj)

    pivot = _resolve_pivot(month, offset, tz)
    entries = filter_sort(store.list(), month_range(pivot, tz), "oldest" if oldest else "latest")
    title = month_title(pivot)

    if not entries:
        console.print(Panel(
            "[dim]No entries this month. Use 'daydiary new TEXT --emotion N' to write one.[/dim]",
            title=f"[bold]< {title} >[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title=f"< {title} >",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Date")
    table.add_column("Emotion")
    table.add_column("Content", max_width=PREVIEW_LENGTH)

    for entry in entries:
        table.add_row(
            str(entry.id),
            format_timestamp(entry.created_date, tz),
            format_emotion(entry.emotion),
            _preview(entry.content),
        )

    console.print(table)
    console.print(f"\n{_summary_line(summarize(entries))}")
    console.print(f"[dim]Total: {len(entries)} entries[/dim]")


@click.command("summary")
@click.option("--month", "month", default=None, help="Month to summarize (YYYY-MM). Defaults to the current month.")
@click.pass_obj
def summary(obj: dict, month: Optional[str]) -> None:
    """Count good, neutral and bad days in a month.

    \b
    Examples:
      daydiary summary
      daydiary summary --month 2025-11
    """
    _, tz, store = open_diary(obj)

    pivot = _resolve_pivot(month, 0, tz)
    counts = summarize(filter_sort(store.list(), month_range(pivot, tz)))
    total = sum(counts.values())

    table = Table(
        title=f"Emotion Summary {month_title(pivot)}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Category", style="bold")
    table.add_column("Days", justify="right")
    table.add_column("Share", justify="right")

    for category, count in counts.items():
        style = CATEGORY_STYLES[category]
        share = f"{count / total * 100:.0f}%" if total else "-"
        table.add_row(f"[{style}]{category.value.title()}[/{style}]", str(count), share)

    console.print(table)
