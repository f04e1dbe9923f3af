"""dailylog sync, pull and push: explicit git operations on the log directory."""

from __future__ import annotations

import click

from dailylog.core.cli import common


def _run(ctx: click.Context, action: str) -> bool:
    from dailylog.sync import policy

    config = common.get_config(ctx)
    with common.reporting_errors():
        return policy.run_explicit(config, action, policy.make_syncer)


@click.command()
@click.pass_context
def sync(ctx: click.Context) -> None:
    """Pull remote changes, then push local ones."""
    pushed = _run(ctx, "sync")
    click.echo("Logs synchronized." if pushed else "Logs synchronized (no local changes to push).")


@click.command()
@click.pass_context
def pull(ctx: click.Context) -> None:
    """Pull the latest logs from the remote."""
    _run(ctx, "pull")
    click.echo("Successfully pulled latest logs.")


@click.command()
@click.pass_context
def push(ctx: click.Context) -> None:
    """Commit and push local logs to the remote."""
    pushed = _run(ctx, "push")
    click.echo("Successfully pushed logs." if pushed else "No changes to push.")
