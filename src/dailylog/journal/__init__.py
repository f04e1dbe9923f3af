"""Journal entries, daily markdown logs and their summaries.

Provides the entry codec, the JournalStore protocol with its markdown
directory implementation, and the summary engine.
"""

from .codec import format_entry, parse_entry
from .models import DaySummary, Entry, SummaryStats
from .store import JournalStore, MarkdownLogStore
from .summary import extract_titles, parse_weekdays, summarize

__all__ = [
    "DaySummary",
    "Entry",
    "JournalStore",
    "MarkdownLogStore",
    "SummaryStats",
    "extract_titles",
    "format_entry",
    "parse_entry",
    "parse_weekdays",
    "summarize",
]
