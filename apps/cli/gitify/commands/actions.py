"""Gitify actions command.

Lists the menu actions and the slugs `gitify run` accepts.

Execution Context:
    CLI command - invoked via `gitify actions`

Dependencies:
    - click: CLI framework
    - rich: Terminal output

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from gitify_core.models import MenuAction

console = Console()


# ---- Actions Command ----------------------------------------------------------------------------------------


@click.command()
def actions() -> None:
    """List available actions in menu order.

    Example:
        gitify actions
    """
    table = Table(title="Gitify Actions")
    table.add_column("Action", style="cyan")
    table.add_column("Menu Entry")

    for action in MenuAction:
        table.add_row(action.slug, action.label)

    console.print(table)
