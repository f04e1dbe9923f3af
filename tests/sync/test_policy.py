"""Tests for dailylog.sync.policy."""

import pytest

from dailylog.core.config import Config
from dailylog.core.exceptions import ConfigurationError, SyncError
from dailylog.sync.git import GitSync
from dailylog.sync.policy import auto_sync, make_syncer, require_remote, run_explicit, should_auto_sync

REMOTE = "git@example.com:me/logs.git"


class RecordingSyncer:
    def __init__(self, fail_with=None):
        self.calls = []
        self.fail_with = fail_with

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with:
            raise self.fail_with
        return True

    def sync(self):
        return self._record("sync")

    def pull(self):
        return self._record("pull")

    def push(self):
        return self._record("push")


def _factory(syncer):
    created = []

    def factory(config):
        created.append(config)
        return syncer

    factory.created = created
    return factory


class TestShouldAutoSync:
    @pytest.mark.parametrize(
        "auto, repo, expected",
        [(True, REMOTE, True), (True, None, False), (False, REMOTE, False), (False, None, False)],
    )
    def test_requires_flag_and_remote(self, auto, repo, expected):
        assert should_auto_sync(Config(git_auto_sync=auto, git_repo=repo)) is expected


class TestAutoSync:
    def test_skipped_without_remote(self):
        syncer = RecordingSyncer()
        factory = _factory(syncer)
        assert auto_sync(Config(git_auto_sync=True), factory) is False
        assert factory.created == []

    def test_skipped_when_disabled(self):
        syncer = RecordingSyncer()
        assert auto_sync(Config(git_repo=REMOTE), _factory(syncer)) is False
        assert syncer.calls == []

    def test_runs_full_sync(self):
        syncer = RecordingSyncer()
        assert auto_sync(Config(git_auto_sync=True, git_repo=REMOTE), _factory(syncer)) is True
        assert syncer.calls == ["sync"]

    def test_failure_is_only_a_warning(self):
        syncer = RecordingSyncer(fail_with=SyncError("remote unreachable"))
        assert auto_sync(Config(git_auto_sync=True, git_repo=REMOTE), _factory(syncer)) is False
        assert syncer.calls == ["sync"]


class TestRunExplicit:
    @pytest.mark.parametrize("action", ["sync", "pull", "push"])
    def test_requires_remote(self, action):
        syncer = RecordingSyncer()
        factory = _factory(syncer)
        with pytest.raises(ConfigurationError, match="No git repository configured"):
            run_explicit(Config(), action, factory)
        assert factory.created == []
        assert syncer.calls == []

    @pytest.mark.parametrize("action", ["sync", "pull", "push"])
    def test_dispatches(self, action):
        syncer = RecordingSyncer()
        run_explicit(Config(git_repo=REMOTE), action, _factory(syncer))
        assert syncer.calls == [action]

    def test_errors_propagate(self):
        syncer = RecordingSyncer(fail_with=SyncError("auth failed"))
        with pytest.raises(SyncError, match="auth failed"):
            run_explicit(Config(git_repo=REMOTE), "push", _factory(syncer))

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            run_explicit(Config(git_repo=REMOTE), "rebase", _factory(RecordingSyncer()))


class TestMakeSyncer:
    def test_uses_config(self, log_dir):
        syncer = make_syncer(Config(log_dir=log_dir, git_repo=REMOTE, git_branch_name="main"))
        assert isinstance(syncer, GitSync)
        assert syncer.repo_dir == log_dir
        assert syncer.remote == REMOTE
        assert syncer.branch == "main"

    def test_require_remote(self):
        assert require_remote(Config(git_repo=REMOTE)) == REMOTE
        with pytest.raises(ConfigurationError):
            require_remote(Config())
