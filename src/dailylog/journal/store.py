"""JournalStore protocol and the markdown-directory implementation.

The codec and the summary engine only see a mapping of calendar dates to
markdown text. ``MarkdownLogStore`` backs it with a directory of files
named ``YYYY-MM-DD.md``.

There is no file locking: this is a single-user tool and two invocations
racing on the same day's file is an accepted risk. A locking or
transactional store can be swapped in behind the same protocol.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from dailylog.core.exceptions import FileIOError
from dailylog.core.utils.file_io import read_text_if_exists, safe_append, safe_write

DATE_FORMAT = "%Y-%m-%d"
LOG_EXTENSION = ".md"


@runtime_checkable
class JournalStore(Protocol):
    """Protocol for date-keyed journal storage."""

    def path_for(self, day: date) -> Path:
        """Return where the log for ``day`` lives."""
        ...

    def read(self, day: date) -> str | None:
        """Return the full text of the log for ``day``, or None if there is none."""
        ...

    def append(self, day: date, fragment: str) -> None:
        """Append ``fragment`` to the log for ``day``, creating it if needed."""
        ...

    def write_whole(self, day: date, content: str) -> None:
        """Replace the log for ``day`` with ``content``."""
        ...


class MarkdownLogStore:
    """Directory of daily markdown files.

    Example::

        store = MarkdownLogStore("~/.dailylog")
        store.append(date.today(), "## 09:05 - Quick note\\n\\n")
        store.read(date.today())
    """

    def __init__(self, log_dir: str | Path, extension: str = LOG_EXTENSION):
        self.log_dir = Path(log_dir).expanduser()
        self.extension = extension

    def path_for(self, day: date) -> Path:
        return self.log_dir / f"{day.strftime(DATE_FORMAT)}{self.extension}"

    def read(self, day: date) -> str | None:
        path = self.path_for(day)
        try:
            return read_text_if_exists(path)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Cannot read log file ({e})", path) from e

    def append(self, day: date, fragment: str) -> None:
        path = self.path_for(day)
        try:
            safe_append(path, fragment)
        except OSError as e:
            raise FileIOError(f"Cannot append to log file ({e})", path) from e
        logger.debug(f"Appended {len(fragment)} chars to {path}")

    def write_whole(self, day: date, content: str) -> None:
        path = self.path_for(day)
        try:
            safe_write(path, content)
        except OSError as e:
            raise FileIOError(f"Cannot write log file ({e})", path) from e
        logger.debug(f"Rewrote {path}")

    def __repr__(self) -> str:
        return f"MarkdownLogStore('{self.log_dir}')"
