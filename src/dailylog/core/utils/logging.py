"""
Logging configuration using loguru.

The CLI calls setup_logging() once at startup; library modules just
``from loguru import logger`` and log.
"""

import sys
from pathlib import Path

from loguru import logger

QUIET_FORMAT = "<level>[{level.name}]</level> {message}"
VERBOSE_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> <cyan>{name}</cyan> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def setup_logging(verbose: bool = False, log_file: str | Path | None = None) -> None:
    """
    Route log output to stderr and, optionally, a file.

    Normal runs only show warnings (a failed auto-sync, an unknown config
    key) so command output stays readable. ``verbose`` shows everything down
    to DEBUG, with the time and module, which is mostly useful for tracing
    the git commands a sync runs.

    Args:
        verbose: Log DEBUG and up to stderr instead of WARNING and up.
        log_file: Also write DEBUG and up to this file, rotated at 1 MB with
            the three newest files kept.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=QUIET_FORMAT)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, level="DEBUG", format=FILE_FORMAT, rotation="1 MB", retention=3)
