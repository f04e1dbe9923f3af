"""Write flows: editor text in, log files out.

Each function performs one local mutation through a JournalStore. Syncing
afterwards is the caller's decision (see ``dailylog.sync.policy``).
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

from loguru import logger

from .codec import ENTRY_SEPARATOR, format_entry, parse_entry
from .store import JournalStore


def write_entry(store: JournalStore, day: date, raw: str, now: datetime) -> Path | None:
    """Parse ``raw`` and append it to the log for ``day``.

    Returns:
        The log path, or None if ``raw`` held no entry (nothing is written).
    """
    entry = parse_entry(raw)
    if entry is None:
        logger.debug("Empty editor output; nothing to write")
        return None

    store.append(day, format_entry(entry, now) + ENTRY_SEPARATOR)
    path = store.path_for(day)
    logger.info(f"Saved '{entry.title}' to {path}")
    return path


def edit_log(store: JournalStore, day: date, new_content: str, old_content: str | None) -> bool:
    """Replace the log for ``day`` with hand-edited text.

    Blank text leaves the file as it was; logs are never deleted.

    Returns:
        True if the file was rewritten.
    """
    if not new_content.strip():
        logger.debug("Edited log is blank; leaving file untouched")
        return False
    if new_content == (old_content or ""):
        return False
    store.write_whole(day, new_content)
    return True
