"""
Git-backed sync for the log directory.

Wraps the ``git`` command line: every operation runs ``git`` as a child
process in the log directory and blocks until it exits. Failures are raised
as SyncError carrying git's stderr; nothing is retried and conflicts are
left for the user to resolve.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from loguru import logger

from dailylog.core.exceptions import SyncError

Runner = Callable[..., subprocess.CompletedProcess]

REMOTE_NAME = "origin"
COMMIT_MESSAGE_FORMAT = "Update logs - %Y-%m-%d %H:%M"


class GitSync:
    """Pull/commit/push a log directory against one remote branch.

    Example::

        syncer = GitSync("~/.dailylog", "git@github.com:me/logs.git", branch="main")
        syncer.sync()   # init if needed, then pull, then push
    """

    def __init__(
        self,
        repo_dir: str | Path,
        remote: str,
        branch: str = "master",
        *,
        runner: Runner = subprocess.run,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repo_dir = Path(repo_dir).expanduser()
        self.remote = remote
        self.branch = branch
        self._runner = runner
        self._clock = clock

    def _git(self, *args: str) -> subprocess.CompletedProcess:
        """Run one git command in the repo directory, raising SyncError on failure."""
        cmd = ["git", *args]
        logger.debug(f"Running {' '.join(cmd)} in {self.repo_dir}")
        try:
            result = self._runner(cmd, cwd=self.repo_dir, capture_output=True, text=True, check=False)
        except OSError as e:
            raise SyncError(f"Cannot run git: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise SyncError(f"git {args[0]} failed: {stderr or f'exit status {result.returncode}'}")
        return result

    def is_repo(self) -> bool:
        return (self.repo_dir / ".git").exists()

    def _require_repo(self) -> None:
        if not self.is_repo():
            raise SyncError(f"{self.repo_dir} is not a git repository. Run 'dailylog sync' to set it up first.")

    def ensure_initialized(self) -> bool:
        """Turn the log directory into a clone of the remote if it isn't a repo yet.

        Returns:
            True if a repository was created, False if one already existed.
        """
        if self.is_repo():
            return False

        logger.info(f"Initializing git repository in {self.repo_dir}")
        self.repo_dir.mkdir(parents=True, exist_ok=True)
        self._git("init")
        self._git("remote", "add", REMOTE_NAME, self.remote)
        try:
            self._git("pull", REMOTE_NAME, self.branch)
        except SyncError as e:
            # An empty remote has nothing to pull yet
            logger.info(f"Could not pull from remote (normal for a new repository): {e}")
            self._git("checkout", "-b", self.branch)
        return True

    def pull(self) -> None:
        self._require_repo()
        logger.info(f"Pulling {REMOTE_NAME}/{self.branch}")
        self._git("pull", REMOTE_NAME, self.branch)

    def commit_all(self, message: str) -> bool:
        """Stage every change and commit it.

        Returns:
            False when the working tree was already clean.
        """
        self._git("add", "-A")
        status = self._git("status", "--porcelain")
        if not (status.stdout or "").strip():
            return False
        self._git("commit", "-m", message)
        return True

    def has_unpushed_commits(self) -> bool:
        """True if HEAD has commits the remote branch lacks, e.g. after a failed push."""
        try:
            result = self._git("rev-list", "--count", f"{REMOTE_NAME}/{self.branch}..HEAD")
        except SyncError:
            # No remote-tracking branch yet: any local commit is unpushed
            try:
                self._git("rev-parse", "--verify", "--quiet", "HEAD")
            except SyncError:
                return False
            return True
        return int((result.stdout or "").strip() or 0) > 0

    def push(self) -> bool:
        """Commit local changes and push them.

        Commits stranded by an earlier failed push are pushed even when the
        working tree is clean.

        Returns:
            False when there was nothing to push.
        """
        self._require_repo()
        message = self._clock().strftime(COMMIT_MESSAGE_FORMAT)
        if not self.commit_all(message) and not self.has_unpushed_commits():
            logger.info("No changes to push")
            return False
        logger.info(f"Pushing to {REMOTE_NAME}/{self.branch}")
        self._git("push", REMOTE_NAME, self.branch)
        return True

    def sync(self) -> bool:
        """Pull, then push. A failed push does not undo the pull.

        A freshly initialized repository has already pulled whatever the
        remote had, so the second pull is skipped.
        """
        if not self.ensure_initialized():
            self.pull()
        return self.push()
