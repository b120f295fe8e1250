"""Output Panel Widget.

Displays the text returned by the last completed action.

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class OutputPanel(Static):
    """Panel holding the last action output.

    Output is rendered as plain text so git output containing square
    brackets is never read as markup.
    """

    def __init__(
            self,
            text_color: str,
            **kwargs,
    ) -> None:
        super().__init__("", **kwargs)
        self.text_color = text_color
        self.output_text = ""

    def show(
            self,
            text: str,
    ) -> None:
        """Replace the displayed output.

        Args:
            text: New output text.
        """
        self.output_text = text
        self.update(Text(text, style=self.text_color))
