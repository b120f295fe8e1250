"""Gitify Core Library.

Action dispatch, form orchestration and git execution for the Gitify
terminal front-ends.

Execution Context:
    Library package - imported by the CLI and the TUI client

Dependencies:
    - python-dotenv: Configuration from .env files

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from gitify_core.dispatcher import ActionDispatcher
from gitify_core.executor import GitExecutor
from gitify_core.models import CommandResult
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec
from gitify_core.models import MenuAction

__version__ = "0.1.0"

__all__ = [
    "ActionDispatcher",
    "CommandResult",
    "FormOutcome",
    "FormSpec",
    "GitExecutor",
    "MenuAction",
    "__version__",
]
