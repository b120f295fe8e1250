"""Gitify tui command.

Launches the interactive menu client.

Execution Context:
    CLI command - invoked via `gitify tui`

Dependencies:
    - click: CLI framework
    - gitify_client: Textual application

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import click

from gitify_core.config import load_config


# ---- TUI Command --------------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--repo",
    "-r",
    default=None,
    help="Repository path (or use GITIFY_REPO_PATH env var).",
)
def tui(
        repo: str | None,
) -> None:
    """Open the interactive Gitify menu.

    Example:
        gitify tui --repo .
    """
    from gitify_client.app import run_client

    try:
        config = load_config(repo_path=repo)
    except ValueError as config_error:
        raise click.ClickException(str(config_error)) from config_error

    exit_code = run_client(config)
    if exit_code:
        raise click.exceptions.Exit(exit_code)
