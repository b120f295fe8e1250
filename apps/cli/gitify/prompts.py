"""Console form runner.

Collects form input on the terminal with rich prompts, one field at a time
in declaration order. Ctrl-C or end of input cancels the whole form.

Execution Context:
    CLI helper - used by `gitify run`

Dependencies:
    - rich: Prompts and console output
    - gitify_core.forms: Validation and option rules

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from typing import Any
from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm
from rich.prompt import Prompt

from gitify_core.forms import validate_value
from gitify_core.models import FieldKind
from gitify_core.models import FormField
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec


class ConsoleFormRunner:
    """Runs forms with rich prompts.

    Attributes:
        console: Console prompts and errors are written to.
        stream: Input stream (defaults to the terminal).
    """

    def __init__(
            self,
            console: Console | None = None,
            stream: TextIO | None = None,
    ) -> None:
        self.console = console or Console()
        self.stream = stream

    def run(
            self,
            spec: FormSpec,
    ) -> FormOutcome:
        """Ask every field in order.

        Args:
            spec: Form to run.

        Returns:
            Completed outcome with all values, or a cancelled outcome.
        """
        self.console.print(f"[bold]{spec.title}[/bold]")
        values: dict[str, Any] = {}
        try:
            for form_field in spec.fields:
                values[form_field.key] = self._ask_until_valid(form_field)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            return FormOutcome.cancel()

        return FormOutcome.complete(values)

    def _ask_until_valid(
            self,
            form_field: FormField,
    ) -> Any:
        while True:
            value = self._ask(form_field)
            error = validate_value(form_field, value)
            if error is None:
                return value
            self.console.print(f"[red]{error}[/red]")

    def _ask(
            self,
            form_field: FormField,
    ) -> Any:
        if form_field.kind is FieldKind.TEXT:
            prompt = form_field.title
            if form_field.placeholder:
                prompt = f"{prompt} [dim]({form_field.placeholder})[/dim]"
            return Prompt.ask(
                prompt,
                console=self.console,
                default=form_field.default or "",
                show_default=bool(form_field.default),
                stream=self.stream,
            )

        if form_field.kind is FieldKind.SELECT:
            return Prompt.ask(
                form_field.title,
                console=self.console,
                choices=form_field.option_values,
                default=form_field.default,
                stream=self.stream,
            )

        if form_field.kind is FieldKind.MULTI_SELECT:
            return self._ask_multi(form_field)

        return Confirm.ask(
            form_field.title,
            console=self.console,
            default=bool(form_field.default),
            stream=self.stream,
        )

    def _ask_multi(
            self,
            form_field: FormField,
    ) -> list[str]:
        self.console.print(form_field.title)
        for number, (label, _) in enumerate(form_field.options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]. {label}")

        while True:
            answer = Prompt.ask(
                "Numbers (comma separated)",
                console=self.console,
                default="",
                show_default=False,
                stream=self.stream,
            )
            selected = _parse_numbers(answer, form_field.option_values)
            if selected is not None:
                return selected
            self.console.print(f"[red]Enter numbers between 1 and {len(form_field.options)}[/red]")


def _parse_numbers(
        answer: str,
        values: list[str],
) -> list[str] | None:
    """Map a comma-separated list of 1-based numbers onto values.

    Returns None if any entry is not a valid number.
    """
    selected: list[str] = []
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(values):
            return None
        value = values[int(part) - 1]
        if value not in selected:
            selected.append(value)
    return selected
