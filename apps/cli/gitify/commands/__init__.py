"""Gitify CLI command modules.

Contains all Click command implementations for the Gitify CLI.

Execution Context:
    Imported by main.py

Dependencies:
    - click: CLI framework

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations
