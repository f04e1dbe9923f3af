"""
Layered configuration loading.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (DAILYLOG_KEY, e.g. DAILYLOG_GIT_AUTO_SYNC=true)
    2. Config file (TOML, YAML or JSON, chosen by extension)
    3. Built-in defaults

The result is a frozen ``Config`` built once at startup and passed
explicitly to whatever needs it.

Usage:
    config = load_config()                           # ~/.dailylog.toml
    config = load_config("~/dotfiles/dailylog.yaml")

    config.log_dir            # Path, ~ expanded
    config.summary_days       # frozenset of weekday numbers (Monday=0)

Example ``~/.dailylog.toml``::

    log_dir = "~/notes/dailylog"
    git_repo = "git@github.com:me/dailylogs.git"
    git_auto_sync = true
    git_branch_name = "main"
    summary_days = ["mon", "tue", "wed", "thu", "fri"]
"""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from dailylog.core.exceptions import ConfigurationError
from dailylog.journal.summary import WORKWEEK, parse_weekdays

_DEFAULT_ENV_PREFIX = "DAILYLOG_"
_DEFAULT_LOG_DIR_NAME = ".dailylog"
CONFIG_PATH = Path.home() / ".dailylog.toml"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Config:
    """Process-wide settings, read once at startup.

    Attributes:
        log_dir: Directory holding one ``YYYY-MM-DD.md`` file per day.
        git_repo: Remote repository URL. None disables syncing.
        git_auto_sync: Sync after every new entry (requires ``git_repo``).
        git_branch_name: Branch to pull from and push to.
        summary_days: Weekdays (Monday=0) expected to have an entry.
        editor: Fallback editor command when neither $VISUAL nor $EDITOR is set.
    """

    log_dir: Path = field(default_factory=lambda: Path.home() / _DEFAULT_LOG_DIR_NAME)
    git_repo: str | None = None
    git_auto_sync: bool = False
    git_branch_name: str = "master"
    summary_days: frozenset[int] = WORKWEEK
    editor: str = "vim"

    @property
    def has_remote(self) -> bool:
        return bool(self.git_repo)


def _get_default_config() -> dict[str, Any]:
    """Build default configuration data in file form."""
    return {
        "log_dir": os.path.join("~", _DEFAULT_LOG_DIR_NAME),
        "git_repo": None,
        "git_auto_sync": False,
        "git_branch_name": "master",
        "summary_days": ["monday", "tuesday", "wednesday", "thursday", "friday"],
        "editor": "vim",
    }


def _load_file(path: str | Path) -> dict[str, Any]:
    """Load a TOML, YAML or JSON config file. Unknown extensions are read as TOML."""
    ext = os.path.splitext(str(path))[1].lower()
    try:
        if ext in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Malformed config file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a table of settings")
    return data


def _load_from_env(env_prefix: str) -> dict[str, Any]:
    """Collect overrides from environment variables."""
    overrides: dict[str, Any] = {}
    if not env_prefix:
        return overrides
    for env_key, env_value in os.environ.items():
        if not env_key.startswith(env_prefix):
            continue
        config_key = env_key[len(env_prefix) :].lower()
        overrides[config_key] = env_value
    return overrides


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")


def _coerce_str(key: str, value: Any) -> str:
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"'{key}' must be a non-empty string, got {value!r}")
    return value.strip()


def _coerce_weekdays(value: Any) -> frozenset[int]:
    # Env vars arrive as "mon,tue,wed"
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    if not isinstance(value, list | tuple) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"'summary_days' must be a list of weekday names, got {value!r}")
    return parse_weekdays(value)


def _build(data: dict[str, Any]) -> Config:
    """Validate merged raw data and freeze it into a Config."""
    known = set(_get_default_config())
    for key in sorted(set(data) - known):
        logger.warning(f"Ignoring unknown config key '{key}'")

    git_repo = data.get("git_repo")
    if git_repo is not None and not isinstance(git_repo, str):
        raise ConfigurationError(f"'git_repo' must be a string, got {git_repo!r}")

    return Config(
        log_dir=Path(_coerce_str("log_dir", data["log_dir"])).expanduser(),
        git_repo=(git_repo.strip() or None) if git_repo else None,
        git_auto_sync=_coerce_bool("git_auto_sync", data["git_auto_sync"]),
        git_branch_name=_coerce_str("git_branch_name", data["git_branch_name"]),
        summary_days=_coerce_weekdays(data["summary_days"]),
        editor=_coerce_str("editor", data["editor"]),
    )


def load_config(
    config_file: str | Path | None = CONFIG_PATH,
    env_prefix: str = _DEFAULT_ENV_PREFIX,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """
    Load configuration from defaults, a config file and the environment.

    Args:
        config_file: Path to the config file. A missing file means defaults.
        env_prefix: Prefix for environment variable overrides. Empty disables them.
        overrides: Values that win over every other source (used by tests).

    Raises:
        ConfigurationError: The file is malformed or a value is invalid.
    """
    data = _get_default_config()

    if config_file is not None:
        path = Path(config_file).expanduser()
        if path.exists():
            logger.debug(f"Loading config from {path}")
            data.update(_load_file(path))
        else:
            logger.debug(f"No config file at {path}, using defaults")

    data.update(_load_from_env(env_prefix))

    if overrides:
        data.update(overrides)

    return _build(data)
