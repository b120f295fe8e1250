"""Form Screen.

Modal screen that collects the fields of a form in declaration order and
dismisses with a completed or cancelled outcome.

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widget import Widget
from textual.widgets import Button, Input, Label, Select, SelectionList, Static, Switch

from gitify_core.forms import validate_value
from gitify_core.models import FieldKind
from gitify_core.models import FormField
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec


class FormScreen(ModalScreen[FormOutcome]):
    """Modal screen for answering a form.

    Submit validates every field and stays open on the first rejection,
    so the user can correct it or cancel the whole form.
    """

    CSS = """
    FormScreen {
        align: center middle;
    }

    #form-container {
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 90%;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    .title {
        background: $primary;
        color: $text;
        padding: 1;
        text-align: center;
        text-style: bold;
    }

    .field-title {
        padding: 1 0 0 0;
        text-style: bold;
    }

    #field-files {
        height: auto;
        max-height: 15;
    }

    #form-error {
        color: $error;
        padding: 1 0 0 0;
    }

    .button-container {
        height: auto;
        align: center middle;
        padding: 1 0 0 0;
    }

    .button-container > Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", key_display="ESC"),
    ]

    def __init__(
            self,
            spec: FormSpec,
    ) -> None:
        """Initialize form screen.

        Args:
            spec: Form to present.
        """
        super().__init__()
        self.spec = spec
        self.error_message: str | None = None

    def compose(
            self,
    ) -> ComposeResult:
        """Compose one labelled widget per field, then the buttons."""
        with VerticalScroll(id="form-container"):
            yield Label(self.spec.title, classes="title")
            for form_field in self.spec.fields:
                yield Label(form_field.title, classes="field-title")
                yield self._build_widget(form_field)
            yield Static("", id="form-error")
            with Horizontal(classes="button-container"):
                yield Button("Submit", variant="primary", id="submit-btn")
                yield Button("Cancel", variant="default", id="cancel-btn")

    def on_mount(
            self,
    ) -> None:
        """Focus the first field."""
        if self.spec.fields:
            self.query_one(f"#{_widget_id(self.spec.fields[0])}").focus()

    def _build_widget(
            self,
            form_field: FormField,
    ) -> Widget:
        widget_id = _widget_id(form_field)

        if form_field.kind is FieldKind.TEXT:
            return Input(
                value=form_field.default or "",
                placeholder=form_field.placeholder,
                max_length=form_field.char_limit or None,
                id=widget_id,
            )

        if form_field.kind is FieldKind.SELECT:
            return Select(
                list(form_field.options),
                allow_blank=False,
                value=form_field.default,
                id=widget_id,
            )

        if form_field.kind is FieldKind.MULTI_SELECT:
            initial = set(form_field.default or [])
            return SelectionList[str](
                *[(label, value, value in initial) for label, value in form_field.options],
                id=widget_id,
            )

        return Switch(value=bool(form_field.default), id=widget_id)

    def _read_value(
            self,
            form_field: FormField,
    ) -> Any:
        widget = self.query_one(f"#{_widget_id(form_field)}")
        if isinstance(widget, SelectionList):
            return list(widget.selected)
        return widget.value

    def on_input_submitted(
            self,
            event: Input.Submitted,
    ) -> None:
        """Submit the form when Enter is pressed in a text field."""
        event.stop()
        self.action_submit()

    def on_button_pressed(
            self,
            event: Button.Pressed,
    ) -> None:
        """Handle button presses."""
        if event.button.id == "submit-btn":
            self.action_submit()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def action_submit(
            self,
    ) -> None:
        """Validate all fields and dismiss with their values."""
        values: dict[str, Any] = {}
        for form_field in self.spec.fields:
            value = self._read_value(form_field)
            error = validate_value(form_field, value)
            if error is not None:
                self.error_message = error
                self.query_one("#form-error", Static).update(error)
                self.query_one(f"#{_widget_id(form_field)}").focus()
                self.notify(error, severity="error")
                return
            values[form_field.key] = value

        self.dismiss(FormOutcome.complete(values))

    def action_cancel(
            self,
    ) -> None:
        """Cancel and dismiss without values."""
        self.dismiss(FormOutcome.cancel())


def _widget_id(
        form_field: FormField,
) -> str:
    return f"field-{form_field.key}"
