"""Shared setup logic for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime, timedelta

import click
from rich.console import Console

from dailylog.core.config import Config, load_config
from dailylog.core.exceptions import DailylogError
from dailylog.journal.store import MarkdownLogStore


def now() -> datetime:
    """Current local wall-clock time."""
    return datetime.now()


def today() -> date:
    return now().date()


def yesterday() -> date:
    return today() - timedelta(days=1)


CONFIG_PATH_KEY = "dailylog.config_path"


def get_config(ctx: click.Context) -> Config:
    """Load the Config on first use and keep it on the root context.

    Loading waits until a command actually runs, so ``--help`` works even
    with a broken config file.
    """
    config = ctx.find_object(Config)
    if config is None:
        with reporting_errors():
            config = load_config(ctx.meta[CONFIG_PATH_KEY])
        ctx.find_root().obj = config
    return config


def get_store(config: Config) -> MarkdownLogStore:
    return MarkdownLogStore(config.log_dir)


def get_console() -> Console:
    return Console(highlight=False)


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn dailylog errors into click errors: message on stderr, exit status 1."""
    try:
        yield
    except DailylogError as e:
        raise click.ClickException(str(e)) from e
