"""Shared test fixtures for dailylog."""

import os
import tempfile
from pathlib import Path

import pytest
from loguru import logger

from dailylog.journal.store import MarkdownLogStore


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep the developer's DAILYLOG_* settings and editor out of tests."""
    for key in list(os.environ):
        if key.startswith("DAILYLOG_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    yield
    # setup_logging() may have bound a sink to a stream that no longer exists
    logger.remove()


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def log_dir(tmp_dir):
    return Path(tmp_dir) / "logs"


@pytest.fixture
def store(log_dir):
    return MarkdownLogStore(log_dir)


@pytest.fixture
def tmp_config_file(tmp_dir, log_dir):
    """Create a temporary TOML config file pointing at ``log_dir``."""
    config_path = os.path.join(tmp_dir, "dailylog.toml")
    with open(config_path, "w") as f:
        f.write(f'log_dir = "{log_dir.as_posix()}"\n')
        f.write('git_branch_name = "main"\n')
        f.write('summary_days = ["mon", "tue", "wed", "thu", "fri"]\n')
    return config_path
