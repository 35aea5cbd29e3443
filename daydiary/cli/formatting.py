"""Shared parsing and rendering helpers for CLI commands."""

from datetime import date, datetime, tzinfo
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from daydiary.core.date_range import from_timestamp, to_timestamp
from daydiary.core.emotion import classify
from daydiary.models import Emotion, EmotionCategory

CATEGORY_STYLES = {
    EmotionCategory.GOOD: "green",
    EmotionCategory.NEUTRAL: "yellow",
    EmotionCategory.BAD: "red",
}


def parse_month(value: str) -> date:
    """Parse a ``YYYY-MM`` month into the first day of that month."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM, got '{value}'") from None
    return parsed.date()


def parse_day(value: str, tz: Optional[tzinfo] = None) -> int:
    """Parse a ``YYYY-MM-DD`` day into its midnight timestamp in ms."""
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got '{value}'") from None
    return to_timestamp(parsed, tz)


def format_timestamp(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Format a ms timestamp for tables and panels."""
    return from_timestamp(timestamp, tz).strftime("%Y-%m-%d %H:%M")


def format_emotion(emotion: Emotion) -> str:
    """Rich markup for an emotion, colored by its category."""
    style = CATEGORY_STYLES[classify(emotion)]
    return f"[{style}]{int(emotion)} {emotion.label}[/{style}]"


def fail(console: Console, title: str, message: str) -> None:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
