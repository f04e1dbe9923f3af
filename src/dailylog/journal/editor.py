"""Launch the user's editor on a temporary markdown file and return what they wrote."""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from loguru import logger

from dailylog.core.exceptions import EditorError

DEFAULT_EDITOR = "vim"


def resolve_editor(fallback: str | None = None) -> list[str]:
    """Pick the editor command: $VISUAL, then $EDITOR, then ``fallback``, then vim."""
    command = os.environ.get("VISUAL") or os.environ.get("EDITOR") or fallback or DEFAULT_EDITOR
    argv = shlex.split(command)
    if not argv:
        raise EditorError(f"Invalid editor command: {command!r}")
    return argv


def open_editor(initial: str = "", editor: str | None = None) -> str:
    """Open an editor pre-filled with ``initial`` and block until it exits.

    Args:
        initial: Text to pre-load, e.g. the existing log when editing.
        editor: Fallback command if neither $VISUAL nor $EDITOR is set.

    Returns:
        The file's contents after the editor exits. Empty if nothing was written.

    Raises:
        EditorError: The editor could not be started or exited non-zero, the
            temporary file could not be used, or the saved text is not UTF-8.
    """
    argv = resolve_editor(editor)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix="dailylog-", suffix=".md")
    except OSError as e:
        raise EditorError(f"Cannot create a temporary file for the editor: {e}") from e
    tmp_path = Path(tmp_name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(initial)
        except OSError as e:
            raise EditorError(f"Cannot write temporary file {tmp_path}: {e}") from e

        logger.debug(f"Launching editor: {' '.join(argv)} {tmp_path}")
        try:
            result = subprocess.run([*argv, str(tmp_path)], check=False)
        except OSError as e:
            raise EditorError(f"Failed to launch editor '{argv[0]}': {e}") from e

        if result.returncode != 0:
            raise EditorError(f"Editor '{argv[0]}' exited with status {result.returncode}; nothing was saved")

        try:
            return tmp_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise EditorError(
                f"Editor saved text that is not valid UTF-8 (byte {e.start}); nothing was saved"
            ) from e
        except OSError as e:
            raise EditorError(f"Cannot read the editor's file {tmp_path}: {e}") from e
    finally:
        tmp_path.unlink(missing_ok=True)
