"""
File I/O utilities for log files.

All functions operate on explicit paths, with no implicit directory lookups.
"""

from __future__ import annotations

import os
from pathlib import Path


def safe_write(filepath: str | Path, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding) as f:
        f.write(content)


def safe_append(filepath: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Append content to a file, creating it and its parent directories if missing."""
    safe_write(filepath, content, mode="a", encoding=encoding)


def read_text_if_exists(filepath: str | Path, encoding: str = "utf-8") -> str | None:
    """Return the file's text, or None if it doesn't exist."""
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        return None
