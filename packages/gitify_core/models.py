"""Data models for Gitify.

Defines the menu actions, command results and form descriptions that flow
between the dispatcher, the git executor and the form runners.

Execution Context:
    Library module - imported by other gitify_core modules

Dependencies:
    - dataclasses: Data class decorators
    - enum: Menu action and field kind enumerations

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any

FAILURE_MARKERS = ("error", "fatal")

SELECT_ALL = "select_all"
DESELECT_ALL = "deselect_all"

STATUS_UNAVAILABLE = "Error fetching status"


# ---- Menu Actions -------------------------------------------------------------------------------------------


class MenuAction(Enum):
    """Fixed set of operations offered by the menu.

    Each member's value is its menu label. Members are declared in menu order.
    """

    INIT = "Initialize Repository"
    ADD_REMOTE = "Add Remote"
    STAGE = "Stage Changes"
    COMMIT = "Commit Changes"
    PUSH = "Push to Remote"
    PULL = "Pull from Remote"
    STATUS = "Show Status"
    BRANCH = "Show Branch"
    LOG = "Show Log"
    MERGE = "Merge Branch"
    DIFF = "View Diff"

    @property
    def label(
            self,
    ) -> str:
        """Menu label shown to the user."""
        return self.value

    @property
    def slug(
            self,
    ) -> str:
        """Short command-line name (e.g. ``add-remote``)."""
        return _SLUGS[self]

    @classmethod
    def from_label(
            cls,
            label: str,
    ) -> MenuAction:
        """Look up an action by its menu label.

        Args:
            label: Menu label.

        Returns:
            Matching action.

        Raises:
            ValueError: If no action has this label.
        """
        return cls(label)

    @classmethod
    def from_slug(
            cls,
            slug: str,
    ) -> MenuAction:
        """Look up an action by its command-line slug.

        Args:
            slug: Slug such as ``log`` or ``add-remote``.

        Returns:
            Matching action.

        Raises:
            ValueError: If no action has this slug.
        """
        for action, action_slug in _SLUGS.items():
            if action_slug == slug:
                return action
        msg = f"Unknown action: '{slug}'"
        raise ValueError(msg)


_SLUGS: dict[MenuAction, str] = {
    MenuAction.INIT: "init",
    MenuAction.ADD_REMOTE: "add-remote",
    MenuAction.STAGE: "stage",
    MenuAction.COMMIT: "commit",
    MenuAction.PUSH: "push",
    MenuAction.PULL: "pull",
    MenuAction.STATUS: "status",
    MenuAction.BRANCH: "branch",
    MenuAction.LOG: "log",
    MenuAction.MERGE: "merge",
    MenuAction.DIFF: "diff",
}


# ---- Command Results ----------------------------------------------------------------------------------------


def has_failure_marker(
        text: str,
) -> bool:
    """Check output text for a failure marker token.

    The match is a case-sensitive substring test against ``error`` and
    ``fatal``. Output that merely mentions one of these words (a commit
    message, a file name) is classified as a failure too.

    Args:
        text: Output text to inspect.

    Returns:
        True if any marker occurs in the text.
    """
    return any(marker in text for marker in FAILURE_MARKERS)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one git invocation.

    Attributes:
        args: Arguments passed to git (without the binary name).
        output: Captured output text, error-prefixed when the invocation failed.
        returncode: Process exit code, or None if git could not be launched.
    """

    args: tuple[str, ...]
    output: str
    returncode: int | None = 0

    @property
    def failed(
            self,
    ) -> bool:
        """Whether the invocation failed by exit status or by marker text."""
        return self.returncode != 0 or has_failure_marker(self.output)

    @property
    def ok(
            self,
    ) -> bool:
        return not self.failed


# ---- Forms --------------------------------------------------------------------------------------------------


class FieldKind(Enum):
    """Kinds of input a form field collects."""

    TEXT = "text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    CONFIRM = "confirm"


Validator = Callable[[str], "str | None"]


@dataclass(frozen=True)
class FormField:
    """Declarative description of one input step.

    Attributes:
        key: Name the bound value is stored under.
        kind: Kind of input.
        title: Prompt shown to the user.
        placeholder: Hint shown in an empty text field.
        validator: Returns an error message for rejected text, None if accepted.
        options: Ordered (label, value) pairs for select fields.
        char_limit: Maximum text length (0 for unlimited).
        default: Initial value.
    """

    key: str
    kind: FieldKind
    title: str
    placeholder: str = ""
    validator: Validator | None = None
    options: tuple[tuple[str, str], ...] = ()
    char_limit: int = 0
    default: Any = None

    @property
    def option_values(
            self,
    ) -> list[str]:
        return [value for _, value in self.options]


@dataclass(frozen=True)
class FormSpec:
    """Ordered sequence of fields collected before an action proceeds.

    Attributes:
        title: Form title.
        fields: Fields in presentation order.
    """

    title: str
    fields: tuple[FormField, ...] = ()

    def __post_init__(
            self,
    ) -> None:
        keys = [form_field.key for form_field in self.fields]
        if len(keys) != len(set(keys)):
            msg = f"Duplicate field keys in form '{self.title}'"
            raise ValueError(msg)


@dataclass(frozen=True)
class FormOutcome:
    """Result of running a form: bound values, or cancellation.

    Attributes:
        completed: True if the user finished every field.
        values: Bound values keyed by field key (empty when cancelled).
    """

    completed: bool
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def complete(
            cls,
            values: dict[str, Any],
    ) -> FormOutcome:
        return cls(completed=True, values=dict(values))

    @classmethod
    def cancel(
            cls,
    ) -> FormOutcome:
        return cls(completed=False)

    @property
    def cancelled(
            self,
    ) -> bool:
        return not self.completed


@dataclass(frozen=True)
class FileSelection:
    """Changed file paths offered for staging.

    Paths are unique and keep the order git reported them in.
    """

    paths: tuple[str, ...] = ()

    @classmethod
    def from_paths(
            cls,
            paths: list[str],
    ) -> FileSelection:
        return cls(paths=tuple(dict.fromkeys(paths)))

    @property
    def unavailable(
            self,
    ) -> bool:
        """Whether the selection holds only the status-failure sentinel."""
        return self.paths == (STATUS_UNAVAILABLE,)

    def __len__(
            self,
    ) -> int:
        return len(self.paths)

    def __iter__(
            self,
    ):
        return iter(self.paths)
