"""Tests for data models module.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - gitify_core.models: Module under test
"""
from __future__ import annotations

import pytest

from gitify_core.forms import text_field
from gitify_core.models import CommandResult
from gitify_core.models import FileSelection
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec
from gitify_core.models import MenuAction
from gitify_core.models import STATUS_UNAVAILABLE
from gitify_core.models import has_failure_marker


class TestMenuAction:
    """Tests for the MenuAction enum."""

    def test_menu_order(self) -> None:
        assert [action.label for action in MenuAction] == [
            "Initialize Repository",
            "Add Remote",
            "Stage Changes",
            "Commit Changes",
            "Push to Remote",
            "Pull from Remote",
            "Show Status",
            "Show Branch",
            "Show Log",
            "Merge Branch",
            "View Diff",
        ]

    def test_slugs_are_unique_and_round_trip(self) -> None:
        slugs = [action.slug for action in MenuAction]

        assert len(slugs) == len(set(slugs))
        for action in MenuAction:
            assert MenuAction.from_slug(action.slug) is action
            assert MenuAction.from_label(action.label) is action

    def test_unknown_lookups_raise(self) -> None:
        with pytest.raises(ValueError):
            MenuAction.from_slug("rebase")
        with pytest.raises(ValueError):
            MenuAction.from_label("Rebase")


class TestFailureClassification:
    """Tests for marker-token classification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("fatal: not a git repository", True),
            ("error: pathspec did not match", True),
            ("Everything up-to-date", False),
            ("Error: exit status 1", False),
            ("FATAL", False),
        ],
    )
    def test_case_sensitive_markers(self, text: str, expected: bool) -> None:
        assert has_failure_marker(text) is expected

    def test_marker_fails_zero_exit(self) -> None:
        """Marker text wins over a zero exit status."""
        result = CommandResult(args=("push",), output="fatal: rejected", returncode=0)

        assert result.failed
        assert not result.ok

    def test_nonzero_exit_fails_without_marker(self) -> None:
        result = CommandResult(args=("push",), output="Error: exit status 1\n", returncode=1)

        assert result.failed

    def test_launch_failure_fails(self) -> None:
        assert CommandResult(args=("init",), output="Error: no git\n", returncode=None).failed

    def test_clean_result_ok(self) -> None:
        assert CommandResult(args=("status",), output="On branch main\n").ok


class TestForms:
    """Tests for FormSpec and FormOutcome."""

    def test_duplicate_keys_rejected(self) -> None:
        with pytest.raises(ValueError):
            FormSpec(title="Broken", fields=(text_field("a", "A"), text_field("a", "Again")))

    def test_outcomes(self) -> None:
        done = FormOutcome.complete({"name": "origin"})
        cancelled = FormOutcome.cancel()

        assert done.completed and not done.cancelled
        assert done.values == {"name": "origin"}
        assert cancelled.cancelled
        assert cancelled.values == {}


class TestFileSelection:
    """Tests for FileSelection."""

    def test_deduplicates_preserving_order(self) -> None:
        selection = FileSelection.from_paths(["b", "a", "b", "c"])

        assert list(selection) == ["b", "a", "c"]
        assert len(selection) == 3

    def test_sentinel(self) -> None:
        assert FileSelection(paths=(STATUS_UNAVAILABLE,)).unavailable
        assert not FileSelection.from_paths(["a"]).unavailable
