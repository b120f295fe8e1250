"""Gitify CLI entry point.

Orchestrator for the Gitify command-line interface. Registers all
command modules and provides the main entry point.

Execution Context:
    CLI application - run via `gitify` command

Dependencies:
    - click: CLI framework
    - gitify_core: Core library

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import sys

import click

from gitify_cli import __version__
from gitify_cli.commands.actions import actions
from gitify_cli.commands.run import run
from gitify_cli.commands.tui import tui


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="gitify")
def cli() -> None:
    """Gitify - Manage git repositories from a menu.

    Runs a fixed set of git operations (init, remotes, staging, commits,
    push, pull, status, branches, log, merge, diff) either one at a time
    from the command line or from the interactive menu.
    """
    pass


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(actions)
cli.add_command(run)
cli.add_command(tui)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for Gitify CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        cli()
        return 0
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
