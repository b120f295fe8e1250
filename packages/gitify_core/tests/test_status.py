"""Tests for status parsing.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - gitify_core.status: Module under test
"""
from __future__ import annotations

import pytest

from gitify_core.models import CommandResult
from gitify_core.models import STATUS_UNAVAILABLE
from gitify_core.status import changed_files
from gitify_core.status import parse_changed_files


class TestParseChangedFiles:
    """Tests for parse_changed_files."""

    def test_strips_status_prefix(self) -> None:
        """The two status columns and the space are removed."""
        output = " M src/app.py\nA  README.md\n?? build/\n"

        assert parse_changed_files(output) == ["src/app.py", "README.md", "build/"]

    def test_keeps_renames_verbatim(self) -> None:
        """Everything after the prefix is kept as the path."""
        assert parse_changed_files("R  old.txt -> new.txt") == ["old.txt -> new.txt"]

    @pytest.mark.parametrize("output", ["", "\n", "M\n", " M \n", "?? "])
    def test_skips_short_lines(self, output: str) -> None:
        """Lines of three characters or fewer carry no path."""
        assert parse_changed_files(output) == []

    def test_preserves_order(self) -> None:
        """Paths keep the order of the output."""
        output = "?? z.txt\n?? a.txt\n M m.txt"

        assert parse_changed_files(output) == ["z.txt", "a.txt", "m.txt"]

    def test_matches_line_rule(self) -> None:
        """Result equals every line longer than three characters minus its prefix."""
        output = " M one\nxx\n?? two words.txt\n\nD  three\nabc\nabcd"
        expected = [line[3:] for line in output.split("\n") if len(line) > 3]

        assert parse_changed_files(output) == expected


class TestChangedFiles:
    """Tests for changed_files."""

    def test_runs_porcelain_status(self, executor) -> None:
        """Queries short-format status and parses it."""
        executor.responses[("status", "--porcelain")] = " M a.py\n?? b.py\n"

        selection = changed_files(executor)

        assert executor.calls == [("status", "--porcelain")]
        assert list(selection) == ["a.py", "b.py"]
        assert not selection.unavailable

    def test_failure_yields_sentinel(self, executor) -> None:
        """A failed query returns the single sentinel entry."""
        executor.responses[("status", "--porcelain")] = CommandResult(
            args=("status", "--porcelain"),
            output="Error: exit status 128\n",
            returncode=128,
        )

        selection = changed_files(executor)

        assert list(selection) == [STATUS_UNAVAILABLE]
        assert selection.unavailable

    def test_error_named_file_is_not_a_failure(self, executor) -> None:
        """Marker words in file names do not trigger the sentinel."""
        executor.responses[("status", "--porcelain")] = "?? error.log\n"

        assert list(changed_files(executor)) == ["error.log"]
