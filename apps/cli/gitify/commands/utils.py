"""Utility functions for Gitify CLI commands.

Execution Context:
    CLI command utilities - imported by command modules

Dependencies:
    - click: Error reporting
    - rich: Log rendering on stderr

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.logging import RichHandler

from gitify_core.config import GitifyConfig
from gitify_core.config import load_config
from gitify_core.log import setup_logging


def get_config(repo: str | None = None) -> GitifyConfig:
    """Load configuration and set up logging for a CLI command.

    Args:
        repo: Optional repository path from the --repo option.

    Returns:
        Resolved configuration.

    Raises:
        click.ClickException: If the configuration is invalid.
    """
    try:
        config = load_config(repo_path=repo)
    except ValueError as config_error:
        raise click.ClickException(str(config_error)) from config_error

    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        handler=RichHandler(console=Console(stderr=True), show_path=False),
    )
    return config
