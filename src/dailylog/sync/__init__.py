"""Git sync for the log directory and the policy deciding when it runs."""

from .git import GitSync
from .policy import auto_sync, require_remote, run_explicit, should_auto_sync

__all__ = ["GitSync", "auto_sync", "require_remote", "run_explicit", "should_auto_sync"]
