"""CLI commands for DayDiary.

This package provides the command-line front end: the month view
and the commands that create, show, edit and delete entries.
"""

from daydiary.cli.main import cli, main

__all__ = ["cli", "main"]
