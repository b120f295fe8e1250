"""Form orchestration contract.

A form is an ordered list of fields collected before an action issues any
git command. Front-ends implement ``FormRunner`` (a rich console prompt
loop, a textual modal screen) and share the validation and multi-select
resolution rules defined here.

Execution Context:
    Library module - imported by the dispatcher and the front-ends

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from typing import Any
from typing import Protocol

from gitify_core.models import DESELECT_ALL
from gitify_core.models import FieldKind
from gitify_core.models import FormField
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec
from gitify_core.models import SELECT_ALL
from gitify_core.models import Validator


# ---- Runner Protocol ----------------------------------------------------------------------------------------


class FormRunner(Protocol):
    """Runs a form to completion or cancellation.

    ``run`` blocks until the user has answered every field in declaration
    order or aborted the form. A cancelled outcome carries no values.
    """

    def run(
            self,
            spec: FormSpec,
    ) -> FormOutcome:
        ...


# ---- Field Builders -----------------------------------------------------------------------------------------


def non_empty(
        message: str,
) -> Validator:
    """Build a validator rejecting empty text.

    Args:
        message: Error message shown for empty input.

    Returns:
        Validator callable.
    """
    def _validate(value: str) -> str | None:
        if value == "":
            return message
        return None

    return _validate


def text_field(
        key: str,
        title: str,
        placeholder: str = "",
        validator: Validator | None = None,
        char_limit: int = 0,
        default: str = "",
) -> FormField:
    return FormField(
        key=key,
        kind=FieldKind.TEXT,
        title=title,
        placeholder=placeholder,
        validator=validator,
        char_limit=char_limit,
        default=default,
    )


def select_field(
        key: str,
        title: str,
        choices: list[str],
) -> FormField:
    return FormField(
        key=key,
        kind=FieldKind.SELECT,
        title=title,
        options=tuple((choice, choice) for choice in choices),
        default=choices[0] if choices else None,
    )


def multi_select_field(
        key: str,
        title: str,
        candidates: list[str],
) -> FormField:
    return FormField(
        key=key,
        kind=FieldKind.MULTI_SELECT,
        title=title,
        options=multi_select_options(candidates),
        default=[],
    )


def confirm_field(
        key: str,
        title: str,
        default: bool = False,
) -> FormField:
    return FormField(
        key=key,
        kind=FieldKind.CONFIRM,
        title=title,
        default=default,
    )


def multi_select_options(
        candidates: list[str],
) -> tuple[tuple[str, str], ...]:
    """Build multi-select options: the two pseudo-options, then each candidate.

    Args:
        candidates: Candidate values, in display order.

    Returns:
        Ordered (label, value) pairs.
    """
    pseudo = (("Select all", SELECT_ALL), ("Deselect all", DESELECT_ALL))
    return pseudo + tuple((candidate, candidate) for candidate in candidates)


# ---- Validation and Resolution ------------------------------------------------------------------------------


def validate_value(
        form_field: FormField,
        value: Any,
) -> str | None:
    """Check a value against a field's constraints.

    Args:
        form_field: Field being answered.
        value: Proposed value.

    Returns:
        Error message, or None if the value is acceptable.
    """
    if form_field.kind is FieldKind.TEXT:
        text = value if isinstance(value, str) else str(value)
        if form_field.char_limit and len(text) > form_field.char_limit:
            return f"{form_field.title} must be at most {form_field.char_limit} characters"
        if form_field.validator is not None:
            return form_field.validator(text)
        return None

    if form_field.kind is FieldKind.SELECT:
        if value not in form_field.option_values:
            return f"{value!r} is not one of the offered options"
        return None

    if form_field.kind is FieldKind.MULTI_SELECT:
        offered = set(form_field.option_values)
        unknown = [item for item in value if item not in offered]
        if unknown:
            return f"Not offered: {', '.join(unknown)}"
        return None

    if not isinstance(value, bool):
        return f"{form_field.title} must be yes or no"
    return None


def resolve_multi_select(
        selected: list[str],
        candidates: list[str],
) -> list[str]:
    """Resolve a multi-select answer against its candidate set.

    ``select_all`` expands to every candidate and ``deselect_all`` to
    nothing, overriding any other selections. If both appear, whichever
    was selected first wins.

    Args:
        selected: Selected values in selection order.
        candidates: Full candidate set offered to the user.

    Returns:
        Resolved values to act on.
    """
    for value in selected:
        if value == SELECT_ALL:
            return list(candidates)
        if value == DESELECT_ALL:
            return []

    return list(selected)
