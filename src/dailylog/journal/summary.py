"""Summary engine: entry counts and logging consistency over a date range.

Scans one log file per day, pulls entry titles out of the ``## HH:MM -
title`` headings and aggregates them. The heading scan is best effort:
hand-edited lines that don't match are skipped, never reported.

Example::

    stats = summarize(store, date.today(), 7, parse_weekdays(["mon", "wed", "fri"]))
    stats.total_entries
    stats.consistency_percentage   # None if no scanned day was expected
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from dailylog.core.exceptions import ConfigurationError

from .codec import HEADING_PATTERN
from .models import DaySummary, SummaryStats
from .store import JournalStore

_WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKDAYS: dict[str, int] = {}
for _number, _name in enumerate(_WEEKDAY_NAMES):
    WEEKDAYS[_name] = _number
    WEEKDAYS[_name[:3]] = _number

WORKWEEK = frozenset(range(5))


def parse_weekday(token: str) -> int:
    """Map an English weekday name or 3-letter abbreviation to its number (Monday=0).

    Raises:
        ConfigurationError: The token is not a weekday.
    """
    try:
        return WEEKDAYS[token.strip().lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unrecognized weekday {token!r}; use names like 'monday' or 'mon'"
        ) from None


def parse_weekdays(tokens: Iterable[str]) -> frozenset[int]:
    """Parse a weekday filter. Every token must be recognized."""
    return frozenset(parse_weekday(token) for token in tokens)


def _lines(content: str) -> list[str]:
    # Only \n and \r\n end a line; other Unicode breaks stay inside a title
    return [line.removesuffix("\r") for line in content.split("\n")]


def extract_titles(content: str) -> list[str]:
    """Return entry titles from a day's markdown, in file order."""
    titles = []
    for line in _lines(content):
        match = HEADING_PATTERN.match(line.strip())
        if match:
            titles.append(match.group(2))
    return titles


def _first_line(content: str) -> str | None:
    for line in _lines(content):
        if line.strip():
            return line.strip()
    return None


def date_range(end_date: date, day_count: int) -> list[date]:
    """Inclusive range of ``day_count`` days ending at ``end_date``, oldest first."""
    if day_count < 1:
        raise ValueError(f"day_count must be at least 1, got {day_count}")
    start = end_date - timedelta(days=day_count - 1)
    return [start + timedelta(days=offset) for offset in range(day_count)]


def summarize_day(store: JournalStore, day: date, weekday_filter: frozenset[int]) -> DaySummary:
    """Read and summarize a single day. A missing file is a day with no entries."""
    content = store.read(day)
    expected = day.weekday() in weekday_filter
    if not content:
        return DaySummary(date=day, expected=expected)

    titles = extract_titles(content)
    preview = None if titles else _first_line(content)
    return DaySummary(date=day, titles=titles, expected=expected, preview=preview)


def summarize(
    store: JournalStore,
    end_date: date,
    day_count: int,
    weekday_filter: Iterable[int],
) -> SummaryStats:
    """Summarize ``day_count`` days of logs ending at ``end_date``.

    Every day contributes to the entry totals and the per-day breakdown.
    Only days whose weekday is in ``weekday_filter`` count toward
    consistency; each day is checked on its own, without regard to week
    boundaries.

    Args:
        store: Where the daily logs are read from.
        end_date: Newest day to include, normally today.
        day_count: Number of days to scan, at least 1.
        weekday_filter: Weekday numbers (Monday=0) expected to have entries.

    Returns:
        SummaryStats with the per-day breakdown oldest first.

    Raises:
        ValueError: ``day_count`` is less than 1.
    """
    weekdays = frozenset(weekday_filter)
    days = [summarize_day(store, day, weekdays) for day in date_range(end_date, day_count)]

    stats = SummaryStats(
        start_date=days[0].date,
        end_date=days[-1].date,
        days=days,
        total_entries=sum(day.entry_count for day in days),
        days_with_entries=sum(1 for day in days if day.has_entries),
        expected_days=sum(1 for day in days if day.expected),
        expected_days_with_entries=sum(1 for day in days if day.expected and day.has_entries),
    )
    logger.debug(f"Summarized {stats!r}")
    return stats
