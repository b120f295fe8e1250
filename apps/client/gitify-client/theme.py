"""View theme for the Gitify client.

Colors are passed into the application explicitly instead of living in
module-level state.

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewTheme:
    """Colors used by the menu and output panel.

    Attributes:
        output_color: Foreground color of command output.
        cursor_color: Foreground color of the highlighted menu entry.
        cursor_marker: Prefix drawn before the highlighted menu entry.
        textual_theme: Name of the textual theme applied on mount.
    """

    output_color: str = "#cdd6f4"
    cursor_color: str = "#fab387"
    cursor_marker: str = "➡ "
    textual_theme: str = "catppuccin-mocha"
