"""Terminal rendering for logs and summaries, using rich."""

from __future__ import annotations

from datetime import date

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from dailylog.journal.models import DaySummary, SummaryStats


def _banner(console: Console, message: str, style: str) -> None:
    console.print(Text(message, style=style))


def render_log(console: Console, day: date, content: str, footer: str = "End of log entry") -> None:
    """Print one day's log as rendered markdown between two banners."""
    _banner(console, f"=== Log entry for {day:%Y-%m-%d} ===", "bold magenta")
    console.print(Markdown(content))
    _banner(console, f"=== {footer} ===", "bold magenta")


def format_consistency(stats: SummaryStats) -> str:
    """``"85.7% (6/7 days)"``, or a not-applicable note when no day was expected."""
    percentage = stats.consistency_percentage
    if percentage is None:
        return "n/a (no expected logging days in range)"
    return f"{percentage:.1f}% ({stats.expected_days_with_entries}/{stats.expected_days} days)"


def _render_day(console: Console, day: DaySummary) -> None:
    heading = f"--- {day.date:%Y-%m-%d (%A)} ---"
    if not day.expected:
        heading += " (not an expected day)"
    console.print()
    _banner(console, heading, "bold magenta")
    if day.titles:
        for title in day.titles:
            console.print(Text(f"  - {title}", style="blue"))
    elif day.preview:
        console.print(Text(f"  {day.preview}", style="white"))


def render_summary(console: Console, stats: SummaryStats) -> None:
    """Print summary statistics followed by the per-day title breakdown."""
    _banner(console, f"=== Log Summary for Past {stats.day_count} Days ===", "bold cyan")

    shown = [day for day in stats.days if day.titles or day.preview]
    if not shown:
        console.print(f"No log entries found for the past {stats.day_count} days.")
        return

    console.print()
    _banner(console, "Summary Statistics:", "bold green")
    console.print(f"- Total entries: {stats.total_entries}")
    console.print(f"- Days with entries: {stats.days_with_entries}")
    console.print(f"- Logging consistency: {format_consistency(stats)}")

    console.print()
    _banner(console, "Daily Entries:", "bold yellow")
    for day in shown:
        _render_day(console, day)

    console.print()
    _banner(console, "=== End of Summary ===", "bold cyan")
