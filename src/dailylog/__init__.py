"""dailylog: a minimal journaling tool backed by daily markdown files."""

__version__ = "0.1.0"
