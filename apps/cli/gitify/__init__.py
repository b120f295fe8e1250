"""Gitify CLI Application.

Command-line interface for running Gitify menu actions without the TUI.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - gitify_core: Core library

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

__version__ = "0.1.0"
