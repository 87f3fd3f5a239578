"""Logging setup for ollacommit.

The hook must not write anything that looks like a commit failure, so its
record goes to ~/.ollacommit/hook.log. --verbose also echoes to stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ollacommit.global_config import get_log_file_path

LOGGER_NAME = "ollacommit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Attach handlers to the package logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        verbose: Also log to stderr at DEBUG level.
        log_file: Log file path. Defaults to ~/.ollacommit/hook.log.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    log_file = log_file or get_log_file_path()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # An unwritable home directory must not affect the commit
        logger.addHandler(logging.NullHandler())
    else:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
