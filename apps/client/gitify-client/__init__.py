"""Gitify Client - TUI for Gitify.

Interactive terminal menu for running git operations, with modal forms
for actions that need input.

Version: 0.1.0
Author: Gitify Team
"""
from __future__ import annotations

__version__ = "0.1.0"
