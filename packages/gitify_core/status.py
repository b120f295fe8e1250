"""Working tree status parsing.

Turns ``git status --porcelain`` output into the list of changed paths
offered for staging.

Execution Context:
    Library module - imported by the dispatcher

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitify_core.models import FileSelection
from gitify_core.models import STATUS_UNAVAILABLE

if TYPE_CHECKING:
    from gitify_core.executor import GitExecutor

logger = logging.getLogger(__name__)

# Two status columns and the separating space.
STATUS_PREFIX_WIDTH = 3


def parse_changed_files(
        status_output: str,
) -> list[str]:
    """Extract paths from porcelain status output.

    Every line longer than the status prefix loses its first three
    characters; shorter lines are skipped. Order is preserved.

    Args:
        status_output: Output of ``git status --porcelain``.

    Returns:
        Paths in the order git listed them.
    """
    return [
        line[STATUS_PREFIX_WIDTH:]
        for line in status_output.split("\n")
        if len(line) > STATUS_PREFIX_WIDTH
    ]


def changed_files(
        executor: GitExecutor,
) -> FileSelection:
    """Query git for changed files.

    Args:
        executor: Executor bound to the repository.

    Returns:
        Selection of changed paths, or the single ``STATUS_UNAVAILABLE``
        sentinel if the status query failed.
    """
    result = executor.query("status", "--porcelain")
    if result.returncode != 0:
        logger.warning("Status query failed: %s", result.output.strip())
        return FileSelection(paths=(STATUS_UNAVAILABLE,))

    return FileSelection.from_paths(parse_changed_files(result.output))
