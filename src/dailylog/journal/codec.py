"""Entry codec: raw editor text <-> markdown log fragments.

``parse_entry`` turns whatever the user typed into an ``Entry`` (or None
when they typed nothing); ``format_entry`` renders an entry as the
markdown fragment appended to a day's log file::

    ## 14:30 - Fixed bug

    Updated login.

No I/O happens here; the timestamp is injected by the caller.
"""

from __future__ import annotations

import re
from datetime import datetime, time

from .models import Entry

TIMESTAMP_FORMAT = "%H:%M"

# Written after every fragment so entries in a file are separated by one blank line.
ENTRY_SEPARATOR = "\n"

# Reverse of format_entry's heading line. Tolerates extra spaces and single-digit hours.
HEADING_PATTERN = re.compile(r"^##\s+(\d{1,2}:\d{2})\s+-\s+(.+?)\s*$")


def _trim_blank_lines(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def parse_entry(raw: str) -> Entry | None:
    """Parse raw editor output into an Entry.

    The title is the first non-blank line. The body is everything after the
    first blank line that follows it, with surrounding blank lines removed.
    Lines typed directly under the title with no blank line at all become
    the body.

    Args:
        raw: Text exactly as the editor left it.

    Returns:
        The parsed Entry, or None if the text is empty or whitespace only.
    """
    text = raw.replace("\r\n", "\n").rstrip()
    if not text.strip():
        return None

    lines = text.split("\n")
    first = next(i for i, line in enumerate(lines) if line.strip())
    title = lines[first].strip()
    rest = lines[first + 1 :]

    separator = next((i for i, line in enumerate(rest) if not line.strip()), None)
    if separator is not None:
        rest = rest[separator + 1 :]

    body = "\n".join(_trim_blank_lines(rest)).rstrip()
    return Entry(title=title, body=body)


def format_timestamp(now: datetime | time) -> str:
    """Render ``now`` as zero-padded 24-hour ``HH:MM``."""
    return now.strftime(TIMESTAMP_FORMAT)


def format_entry(entry: Entry, now: datetime | time) -> str:
    """Render an entry as the markdown fragment stored in a log file.

    Args:
        entry: The entry to render.
        now: Time of writing; only hours and minutes are used.

    Returns:
        ``"## HH:MM - title\\n\\nbody\\n"``, or ``"## HH:MM - title\\n"`` for an
        entry without a body.
    """
    heading = f"## {format_timestamp(now)} - {entry.title}\n"
    if not entry.body:
        return heading
    return f"{heading}\n{entry.body}\n"
