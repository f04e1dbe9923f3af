"""Commands that write and view daily logs."""

from __future__ import annotations

import click

from dailylog.core.cli import common
from dailylog.core.config import Config


def write_new_entry(config: Config) -> None:
    """Open the editor and append the result to today's log."""
    from dailylog.journal.editor import open_editor
    from dailylog.journal.service import write_entry
    from dailylog.sync import policy

    store = common.get_store(config)
    with common.reporting_errors():
        raw = open_editor(editor=config.editor)
        path = write_entry(store, common.today(), raw, common.now())

    if path is None:
        click.echo("No content written. Aborted.")
        return

    click.echo(f"Log saved to {path}")
    policy.auto_sync(config, policy.make_syncer)


@click.command()
@click.pass_context
def previous(ctx: click.Context) -> None:
    """Show yesterday's log."""
    from dailylog.core.cli.display import render_log

    config = common.get_config(ctx)
    store = common.get_store(config)
    day = common.yesterday()

    with common.reporting_errors():
        content = store.read(day)

    if content is None:
        click.echo(f"No log entry found for previous day: {store.path_for(day)}")
        return
    if not content.strip():
        click.echo(f"Previous day's log is empty: {store.path_for(day)}")
        return

    render_log(common.get_console(), day, content)


@click.command()
@click.pass_context
def yesterday(ctx: click.Context) -> None:
    """Add an entry to yesterday's log."""
    from dailylog.core.cli.display import render_log
    from dailylog.journal.editor import open_editor
    from dailylog.journal.service import write_entry
    from dailylog.sync import policy

    config = common.get_config(ctx)
    store = common.get_store(config)
    day = common.yesterday()

    with common.reporting_errors():
        existing = store.read(day)
        if existing and existing.strip():
            click.echo(f"Existing entry for {day:%Y-%m-%d}:")
            render_log(common.get_console(), day, existing, footer="End of existing entry")
            click.echo("\nAppending to yesterday's log...")
        else:
            click.echo(f"Creating new entry for yesterday ({day:%Y-%m-%d})")

        raw = open_editor(editor=config.editor)
        path = write_entry(store, day, raw, common.now())

    if path is None:
        click.echo("No content written. Aborted.")
        return

    click.echo(f"Log saved to {path}")
    policy.auto_sync(config, policy.make_syncer)


@click.command()
@click.pass_context
def edit(ctx: click.Context) -> None:
    """Open today's log file in your editor."""
    from dailylog.journal.editor import open_editor
    from dailylog.journal.service import edit_log

    config = common.get_config(ctx)
    store = common.get_store(config)
    day = common.today()

    with common.reporting_errors():
        existing = store.read(day)
        updated = open_editor(existing or "", editor=config.editor)
        changed = edit_log(store, day, updated, existing)

    if changed:
        click.echo(f"Log updated: {store.path_for(day)}")
    else:
        click.echo("No changes made.")
