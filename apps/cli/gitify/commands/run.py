"""Gitify run command.

Runs a single menu action, prompting for any form input on the console.

Execution Context:
    CLI command - invoked via `gitify run <action>`

Dependencies:
    - click: CLI framework
    - rich: Terminal output and prompts
    - gitify_core: Dispatcher and executor

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.text import Text

from gitify_core.dispatcher import ActionDispatcher
from gitify_core.executor import GitExecutor
from gitify_core.models import MenuAction

from gitify_cli.commands.utils import get_config
from gitify_cli.prompts import ConsoleFormRunner

console = Console()


# ---- Run Command --------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "action",
    type=click.Choice([action.slug for action in MenuAction]),
)
@click.option(
    "--repo",
    "-r",
    default=None,
    help="Repository path (or use GITIFY_REPO_PATH env var).",
)
def run(
        action: str,
        repo: str | None,
) -> None:
    """Run one menu action against a repository.

    Actions that need input (add-remote, stage, commit, push) prompt for
    it. Press Ctrl-C at any prompt to cancel without running git.

    Examples:
        gitify run log
        gitify run stage --repo ~/projects/site
    """
    config = get_config(repo)

    dispatcher = ActionDispatcher(
        executor=GitExecutor(config.repo_path, git_binary=config.git_binary),
        form_runner=ConsoleFormRunner(console=console),
        merge_target=config.merge_target,
    )

    result = dispatcher.dispatch(MenuAction.from_slug(action))
    if result is None:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    console.print(Text(result.rstrip("\n")))
