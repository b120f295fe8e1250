"""Logging setup shared by the Gitify front-ends.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
entry points call ``setup_logging`` once to attach a handler to every
Gitify package logger listed in ``LOGGER_NAMES``.

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAMES = ("gitify_core", "gitify_cli", "gitify_client")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
        level: str = "WARNING",
        log_file: Path | None = None,
        handler: logging.Handler | None = None,
) -> logging.Handler:
    """Attach one handler to every Gitify logger.

    Previously attached handlers are removed so repeated calls (tests, a
    TUI launched from the CLI) do not duplicate records.

    Args:
        level: Level name such as ``INFO``.
        log_file: Write records to this file instead of ``handler``.
        handler: Handler to use when no log file is given.

    Returns:
        The handler that was attached.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    elif handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return handler
