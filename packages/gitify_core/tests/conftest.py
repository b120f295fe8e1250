"""Shared test configuration and fixtures for Gitify tests.

Provides:
- RecordingExecutor: a GitExecutor that records argument lists and answers
  from canned responses instead of spawning git.
- ScriptedFormRunner: a FormRunner that replays prepared outcomes and
  records every form it was asked to run.
"""
from __future__ import annotations

from typing import Any

import pytest

from gitify_core.dispatcher import ActionDispatcher
from gitify_core.executor import GitExecutor
from gitify_core.models import CommandResult
from gitify_core.models import FormOutcome
from gitify_core.models import FormSpec


# ---- Test Doubles ---------------------------------------------------------------------------------------------


class RecordingExecutor(GitExecutor):
    """Executor answering from ``responses`` keyed by argument tuple.

    A response may be a string (successful output) or a CommandResult.
    Unlisted commands succeed with empty output.
    """

    def __init__(
            self,
            responses: dict[tuple[str, ...], Any] | None = None,
    ) -> None:
        super().__init__(".")
        self.responses: dict[tuple[str, ...], Any] = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []

    def _invoke(
            self,
            args: tuple[str, ...],
            merge_stderr: bool,
    ) -> CommandResult:
        self.calls.append(args)
        response = self.responses.get(args, "")
        if isinstance(response, CommandResult):
            return response
        return CommandResult(args=args, output=response, returncode=0)


class ScriptedFormRunner:
    """Form runner replaying prepared outcomes in order.

    Each scripted entry is a FormOutcome, a dict of values (completed), or
    None (cancelled).
    """

    def __init__(
            self,
            *outcomes: Any,
    ) -> None:
        self.outcomes = list(outcomes)
        self.specs: list[FormSpec] = []

    def script(
            self,
            *outcomes: Any,
    ) -> None:
        self.outcomes.extend(outcomes)

    def run(
            self,
            spec: FormSpec,
    ) -> FormOutcome:
        self.specs.append(spec)
        outcome = self.outcomes.pop(0)
        if outcome is None:
            return FormOutcome.cancel()
        if isinstance(outcome, FormOutcome):
            return outcome
        return FormOutcome.complete(outcome)


# ---- Fixtures ------------------------------------------------------------------------------------------------


@pytest.fixture
def executor() -> RecordingExecutor:
    """Executor with no canned responses."""
    return RecordingExecutor()


@pytest.fixture
def form_runner() -> ScriptedFormRunner:
    """Form runner with an empty script."""
    return ScriptedFormRunner()


@pytest.fixture
def dispatcher(executor: RecordingExecutor, form_runner: ScriptedFormRunner) -> ActionDispatcher:
    """Dispatcher wired to the recording executor and scripted runner."""
    return ActionDispatcher(executor=executor, form_runner=form_runner)
