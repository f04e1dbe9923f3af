"""dailylog CLI entry point."""

from pathlib import Path

import click

from dailylog import __version__
from dailylog.core.config import CONFIG_PATH


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, package_name="dailylog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_PATH,
    show_default=True,
    help="Config file (TOML, YAML or JSON).",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also keep a debug log in this file.",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path, verbose: bool, log_file: Path | None) -> None:
    """dailylog, a minimal journaling tool.

    Run without a command to write a new entry for today.
    """
    from dailylog.core.cli import common
    from dailylog.core.cli.entry_cmd import write_new_entry
    from dailylog.core.utils.logging import setup_logging

    setup_logging(verbose=verbose, log_file=log_file)
    ctx.meta[common.CONFIG_PATH_KEY] = config_path

    if ctx.invoked_subcommand is None:
        write_new_entry(common.get_config(ctx))


# Register subcommands
from .entry_cmd import edit, previous, yesterday
from .summary_cmd import summary
from .sync_cmd import pull, push, sync

main.add_command(previous)
main.add_command(yesterday)
main.add_command(edit)
main.add_command(summary)
main.add_command(sync)
main.add_command(pull)
main.add_command(push)
