"""Gitify Client TUI Application.

Main application entry point for the Gitify terminal user interface.
Shows the action menu, runs the selected action and displays its output.

Execution Context:
    TUI application - run via `gitify-client` or `gitify tui`

Dependencies:
    - textual: TUI framework
    - gitify_core: Core library
    - rich: Terminal formatting

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.logging import TextualHandler
from textual.widgets import Footer, Header, Label, ListItem, ListView, Static

from gitify_core.config import GitifyConfig
from gitify_core.config import load_config
from gitify_core.dispatcher import ActionDispatcher
from gitify_core.executor import GitExecutor
from gitify_core.log import setup_logging
from gitify_core.models import MenuAction

from gitify_client.runner import TextualFormRunner
from gitify_client.theme import ViewTheme
from gitify_client.widgets.output_panel import OutputPanel

console = Console()
logger = logging.getLogger(__name__)

MENU_ACTIONS = list(MenuAction)


# ---- Main Application ---------------------------------------------------------------------------------------


class GitifyClient(App):
    """Gitify TUI Client Application.

    Interactive menu over a fixed set of git operations. One action runs
    at a time; its result replaces the output panel unless the user
    cancelled a form.
    """

    CSS = """
    Screen {
        background: $background;
    }

    #sidebar {
        width: 32;
        background: $panel;
        border-right: solid $primary;
    }

    #content {
        width: 1fr;
    }

    .title {
        background: $primary;
        color: $text;
        padding: 1;
        text-align: center;
        text-style: bold;
    }

    .hint {
        padding: 1;
        text-style: dim;
        color: $text-muted;
    }

    #output-scroll {
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", key_display="Q"),
    ]

    TITLE = "Gitify"
    SUB_TITLE = "Manage Git Repos"

    def __init__(
            self,
            config: GitifyConfig | None = None,
            view_theme: ViewTheme | None = None,
            dispatcher: ActionDispatcher | None = None,
    ) -> None:
        """Initialize Gitify Client.

        Args:
            config: Resolved configuration (defaults to the current directory).
            view_theme: Colors for the menu and output panel.
            dispatcher: Dispatcher to use instead of one built from config.
        """
        super().__init__()
        self.config = config or GitifyConfig()
        self.view_theme = view_theme or ViewTheme()
        self.dispatcher = dispatcher or ActionDispatcher(
            executor=GitExecutor(self.config.repo_path, git_binary=self.config.git_binary),
            form_runner=TextualFormRunner(self),
            merge_target=self.config.merge_target,
        )
        self.busy = False

    def compose(
            self,
    ) -> ComposeResult:
        """Compose the UI layout.

        Yields:
            UI widgets in layout order.
        """
        yield Header()
        with Horizontal():
            with Vertical(id="sidebar"):
                yield Static("Gitify - Manage Git Repos", classes="title")
                yield ListView(
                    *[ListItem(Label(self._menu_label(action, False))) for action in MENU_ACTIONS],
                    id="menu",
                )
                yield Static("Press 'q' to exit.", classes="hint")
            with Vertical(id="content"):
                yield Static(f"Repository: {self.config.repo_path}", classes="title")
                with VerticalScroll(id="output-scroll"):
                    yield OutputPanel(self.view_theme.output_color, id="output")
        yield Footer()

    def on_mount(
            self,
    ) -> None:
        """Apply the configured theme and focus the menu."""
        if self.view_theme.textual_theme in self.available_themes:
            self.theme = self.view_theme.textual_theme
        self.query_one("#menu", ListView).focus()

    def _menu_label(
            self,
            action: MenuAction,
            highlighted: bool,
    ) -> Text:
        if highlighted:
            return Text(self.view_theme.cursor_marker + action.label, style=self.view_theme.cursor_color)
        return Text("  " + action.label)

    def on_list_view_highlighted(
            self,
            event: ListView.Highlighted,
    ) -> None:
        """Redraw menu labels so only the highlighted entry carries the marker."""
        for index, item in enumerate(event.list_view.children):
            label = item.query_one(Label)
            label.update(self._menu_label(MENU_ACTIONS[index], item is event.item))

    def on_list_view_selected(
            self,
            event: ListView.Selected,
    ) -> None:
        """Dispatch the selected menu action.

        Args:
            event: Selection event.
        """
        index = event.list_view.index
        if index is None:
            return
        if self.busy:
            self.notify("An action is already running", severity="warning")
            return

        self.busy = True
        self.run_action(MENU_ACTIONS[index])

    @work(thread=True)
    def run_action(
            self,
            action: MenuAction,
    ) -> None:
        """Run an action off the event loop so forms can be displayed."""
        try:
            result = self.dispatcher.dispatch(action)
        finally:
            self.call_from_thread(self._finish_action)

        if result is not None:
            self.call_from_thread(self.show_output, result)

    def _finish_action(
            self,
    ) -> None:
        self.busy = False

    def show_output(
            self,
            text: str,
    ) -> None:
        """Replace the output panel contents.

        Args:
            text: Result text from the dispatcher.
        """
        self.query_one("#output", OutputPanel).show(text)

    @property
    def output(
            self,
    ) -> str:
        """Text of the last displayed output."""
        return self.query_one("#output", OutputPanel).output_text


# ---- Main Function ------------------------------------------------------------------------------------------


def run_client(
        config: GitifyConfig,
        view_theme: ViewTheme | None = None,
) -> int:
    """Run the TUI until the user quits.

    Args:
        config: Resolved configuration.
        view_theme: Colors for the menu and output panel.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    setup_logging(level=config.log_level, log_file=config.log_file, handler=TextualHandler())

    try:
        app = GitifyClient(config=config, view_theme=view_theme)
        app.run()
        return app.return_code or 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Exited by user[/yellow]")
        return 0
    except Exception as app_error:
        logger.exception("Application failed")
        console.print(f"[red]Error starting application: {app_error}[/red]")
        return 1


def main() -> int:
    """Main entry point for Gitify Client TUI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="Gitify TUI Client - Manage git repositories from a menu"
    )
    parser.add_argument(
        "--repo",
        "-r",
        type=str,
        help="Path to git repository (default: GITIFY_REPO_PATH or current directory)",
    )
    parser.add_argument(
        "--cwd",
        "-C",
        type=str,
        help="Change to this directory before starting",
    )

    args = parser.parse_args()

    if args.cwd:
        try:
            os.chdir(args.cwd)
        except OSError as chdir_error:
            console.print(f"[red]Failed to change directory: {chdir_error}[/red]")
            return 1

    try:
        config = load_config(repo_path=Path(args.repo) if args.repo else None)
    except ValueError as config_error:
        console.print(f"[red]Error: {config_error}[/red]")
        return 1

    return run_client(config)


if __name__ == "__main__":
    sys.exit(main())
