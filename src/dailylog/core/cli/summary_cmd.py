"""dailylog summary: entry statistics over the last N days."""

from __future__ import annotations

import click

from dailylog.core.cli import common


@click.command()
@click.option(
    "-d",
    "--days",
    type=click.IntRange(min=1),
    default=7,
    show_default=True,
    help="Number of days to include, counting back from today.",
)
@click.pass_context
def summary(ctx: click.Context, days: int) -> None:
    """Summarize recent logs: entry counts, consistency and titles per day."""
    from dailylog.core.cli.display import render_summary
    from dailylog.journal.summary import summarize

    config = common.get_config(ctx)
    store = common.get_store(config)

    with common.reporting_errors():
        stats = summarize(store, common.today(), days, config.summary_days)

    render_summary(common.get_console(), stats)
