"""When to sync.

New entries sync automatically only when ``git_auto_sync`` is on and a
remote is configured; a failure there is a warning because the entry is
already saved locally. Explicit ``sync``/``pull``/``push`` commands always
run but need a remote.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from loguru import logger

from dailylog.core.exceptions import ConfigurationError, SyncError

from .git import GitSync

if TYPE_CHECKING:
    from dailylog.core.config import Config

SyncerFactory = Callable[["Config"], GitSync]

EXPLICIT_ACTIONS = ("sync", "pull", "push")


def make_syncer(config: Config) -> GitSync:
    """Build a GitSync for the configured log directory and remote."""
    remote = require_remote(config)
    return GitSync(config.log_dir, remote, branch=config.git_branch_name)


def should_auto_sync(config: Config) -> bool:
    return bool(config.git_auto_sync and config.git_repo)


def require_remote(config: Config) -> str:
    """Return the configured remote.

    Raises:
        ConfigurationError: No ``git_repo`` is configured.
    """
    if not config.git_repo:
        raise ConfigurationError(
            "No git repository configured. Add 'git_repo = \"<your-repo-url>\"' to your dailylog config."
        )
    return config.git_repo


def auto_sync(config: Config, syncer_factory: SyncerFactory = make_syncer) -> bool:
    """Sync after a successful local write, if the config asks for it.

    Returns:
        True if a sync ran and succeeded.
    """
    if not should_auto_sync(config):
        logger.debug("Auto-sync disabled or no remote configured; skipping")
        return False
    try:
        syncer_factory(config).sync()
    except SyncError as e:
        logger.warning(f"Auto-sync failed (your entry is saved locally): {e}")
        return False
    return True


def run_explicit(config: Config, action: str, syncer_factory: SyncerFactory = make_syncer) -> bool:
    """Run an explicit ``sync``, ``pull`` or ``push``. Errors propagate.

    Returns:
        Whether anything was pushed (always True for ``pull``).
    """
    if action not in EXPLICIT_ACTIONS:
        raise ValueError(f"Unknown sync action: {action}")
    require_remote(config)
    syncer = syncer_factory(config)
    if action == "pull":
        syncer.pull()
        return True
    if action == "push":
        return syncer.push()
    return syncer.sync()
