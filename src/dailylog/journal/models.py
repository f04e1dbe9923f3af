"""Core data models for journal entries and log summaries.

Plain dataclasses with no I/O. Entries are built from editor output,
rendered once and discarded; summaries are recomputed on every run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Entry:
    """A single journal record.

    The timestamp is not part of the entry: it is taken when the entry is
    formatted, not when the text was typed.

    Attributes:
        title: First non-blank line of the raw text, stripped.
        body: Text after the first blank line following the title. May be empty.
    """

    title: str
    body: str = ""

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Title must be a non-empty string")
        if "\n" in self.title:
            raise ValueError("Title must be a single line")
        if not isinstance(self.body, str):
            raise ValueError("Body must be a string")

    def __repr__(self) -> str:
        preview = self.body[:30] + "..." if len(self.body) > 30 else self.body
        return f"Entry(title='{self.title}', body='{preview}')"


@dataclass(frozen=True)
class DaySummary:
    """Titles found in one day's log file.

    Attributes:
        date: The calendar day.
        titles: Entry titles in file order.
        expected: Whether the day's weekday is in the configured filter.
        preview: First non-blank line of a non-empty file with no recognizable
            headings. Display only; it does not count as an entry.
    """

    date: date
    titles: list[str] = field(default_factory=list)
    expected: bool = True
    preview: str | None = None

    @property
    def entry_count(self) -> int:
        return len(self.titles)

    @property
    def has_entries(self) -> bool:
        return bool(self.titles)


@dataclass(frozen=True)
class SummaryStats:
    """Aggregate statistics over a scanned date range.

    Attributes:
        start_date: Oldest day scanned (inclusive).
        end_date: Newest day scanned (inclusive).
        days: One DaySummary per scanned day, oldest first.
        total_entries: Titles found across every scanned day.
        days_with_entries: Days with at least one title.
        expected_days: Days whose weekday is in the filter.
        expected_days_with_entries: Expected days with at least one title.
    """

    start_date: date
    end_date: date
    days: list[DaySummary]
    total_entries: int
    days_with_entries: int
    expected_days: int
    expected_days_with_entries: int

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def consistency_percentage(self) -> float | None:
        """Share of expected days that have entries, or None when no day was expected."""
        if self.expected_days == 0:
            return None
        return self.expected_days_with_entries / self.expected_days * 100

    @property
    def titles_by_day(self) -> list[tuple[date, list[str]]]:
        return [(day.date, list(day.titles)) for day in self.days]

    def __repr__(self) -> str:
        return (
            f"SummaryStats({self.start_date}..{self.end_date}, "
            f"entries={self.total_entries}, days={self.days_with_entries}/{self.expected_days})"
        )
