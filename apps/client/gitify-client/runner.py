"""Textual form runner.

Bridges the blocking ``FormRunner`` contract onto the textual event loop:
the dispatcher runs in a worker thread and waits here while the form
screen is shown on the app's thread.

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec

from gitify_client.screens.form_screen import FormScreen

if TYPE_CHECKING:
    from textual.app import App

POLL_INTERVAL = 0.1


class TextualFormRunner:
    """Runs forms as modal screens of a textual app.

    Must be called from a worker thread, never from the app's own thread.
    """

    def __init__(
            self,
            app: App,
    ) -> None:
        self.app = app

    def run(
            self,
            spec: FormSpec,
    ) -> FormOutcome:
        """Show the form and block until it is dismissed.

        Args:
            spec: Form to present.

        Returns:
            Outcome from the form screen; cancelled if the app exits first.
        """
        dismissed = threading.Event()
        outcomes: list[FormOutcome] = []

        def _on_dismiss(outcome: FormOutcome | None) -> None:
            outcomes.append(outcome or FormOutcome.cancel())
            dismissed.set()

        def _show() -> None:
            self.app.push_screen(FormScreen(spec), _on_dismiss)

        self.app.call_from_thread(_show)

        while not dismissed.wait(POLL_INTERVAL):
            if not self.app.is_running:
                return FormOutcome.cancel()

        return outcomes[0]
