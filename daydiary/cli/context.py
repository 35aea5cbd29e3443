"""Shared state handed from the command group to subcommands."""

from datetime import tzinfo
from typing import Optional

from rich.console import Console

from daydiary.cli.formatting import fail
from daydiary.config import DiaryConfig, load_config
from daydiary.core.store import EntryStore
from daydiary.errors import DiaryError
from daydiary.session import open_store

console = Console()


def open_diary(obj: Optional[dict]) -> tuple[DiaryConfig, Optional[tzinfo], EntryStore]:
    """Resolve the group's config and open the persisted store.

    Args:
        obj: The click context object set up by the ``cli`` group.

    Returns:
        Tuple of (config, timezone, store). Prints an error panel and
        exits with status 1 when the diary cannot be opened.
    """
    config = (obj or {}).get("config") or load_config()
    try:
        tz = config.get_timezone()
        store = open_store(config)
    except (ValueError, DiaryError) as e:
        fail(console, "Error", f"Failed to open diary:\n\n{e}")
    return config, tz, store
