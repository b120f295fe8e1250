"""Menu action dispatch.

Maps a selected menu action to form input, git invocations and the result
text shown to the user. Each action runs at most three steps: collect input,
derive git arguments, execute and classify.

Execution Context:
    Library module - driven by the CLI and the TUI client

Dependencies:
    - gitify_core.executor: git invocations
    - gitify_core.forms: Form runner contract
    - gitify_core.status: Changed file discovery

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import logging
from typing import Any

from gitify_core.executor import GitExecutor
from gitify_core.forms import FormRunner
from gitify_core.forms import confirm_field
from gitify_core.forms import multi_select_field
from gitify_core.forms import non_empty
from gitify_core.forms import resolve_multi_select
from gitify_core.forms import select_field
from gitify_core.forms import text_field
from gitify_core.models import FormSpec
from gitify_core.models import MenuAction
from gitify_core.status import changed_files

logger = logging.getLogger(__name__)

UNKNOWN_ACTION = "Unknown action."
REMOTE_FIELDS_EMPTY = "Remote name and URL cannot be empty."
NO_CHANGES = "No unstaged changes found."
NO_FILES_SELECTED = "No files selected."
NO_FILES_STAGED = "No files staged."
BRANCH_UNRESOLVED = "Unable to determine current branch."
NO_REMOTES = "No remotes configured. Add a remote first."
COMMIT_MESSAGE_LIMIT = 100

# Actions that run one fixed git command and report its output verbatim.
SIMPLE_COMMANDS: dict[MenuAction, tuple[str, ...]] = {
    MenuAction.INIT: ("init",),
    MenuAction.PULL: ("pull",),
    MenuAction.STATUS: ("status",),
    MenuAction.BRANCH: ("branch",),
    MenuAction.LOG: ("log", "--oneline"),
    MenuAction.DIFF: ("diff",),
}


# ---- Dispatcher ---------------------------------------------------------------------------------------------


class ActionDispatcher:
    """Turns menu selections into git commands and user-facing text.

    Attributes:
        executor: Executor bound to the repository.
        form_runner: Front-end that collects form input.
        merge_target: Branch merged by the Merge Branch action.
    """

    def __init__(
            self,
            executor: GitExecutor,
            form_runner: FormRunner,
            merge_target: str = "main",
    ) -> None:
        """Initialize dispatcher.

        Args:
            executor: Executor bound to the repository.
            form_runner: Front-end that collects form input.
            merge_target: Branch merged by the Merge Branch action.
        """
        self.executor = executor
        self.form_runner = form_runner
        self.merge_target = merge_target

    def dispatch(
            self,
            action: MenuAction | str,
    ) -> str | None:
        """Run one menu action.

        Args:
            action: Selected menu action.

        Returns:
            Result text to display, or None if the user cancelled a form and
            the previous output should stay on screen.
        """
        if not isinstance(action, MenuAction):
            logger.warning("Ignoring unknown action %r", action)
            return UNKNOWN_ACTION

        logger.info("Dispatching %s", action.label)

        if action in SIMPLE_COMMANDS:
            return self.executor.execute(*SIMPLE_COMMANDS[action])

        handlers = {
            MenuAction.ADD_REMOTE: self._add_remote,
            MenuAction.STAGE: self._stage_changes,
            MenuAction.COMMIT: self._commit_changes,
            MenuAction.PUSH: self._push,
            MenuAction.MERGE: self._merge,
        }
        return handlers[action]()

    def _collect(
            self,
            spec: FormSpec,
    ) -> dict[str, Any] | None:
        outcome = self.form_runner.run(spec)
        if outcome.cancelled:
            logger.info("Form '%s' cancelled", spec.title)
            return None
        return outcome.values

    # ---- Actions --------------------------------------------------------------------------------------------

    def _add_remote(
            self,
    ) -> str | None:
        values = self._collect(FormSpec(
            title="Add Remote",
            fields=(
                text_field(
                    "name",
                    "Remote Name",
                    placeholder="origin",
                    validator=non_empty("remote name cannot be empty"),
                ),
                text_field(
                    "url",
                    "Remote URL",
                    placeholder="https://github.com/username/repo.git",
                    validator=non_empty("remote URL cannot be empty"),
                ),
            ),
        ))
        if values is None:
            return None

        name = values.get("name", "")
        url = values.get("url", "")
        if name == "" or url == "":
            return REMOTE_FIELDS_EMPTY

        add_result = self.executor.run("remote", "add", name, url)
        if add_result.failed:
            return f"Failed to add remote: {add_result.output}"

        remotes = self.executor.execute("remote", "-v")
        return f"Remote added successfully: {name} -> {url}\n\nAll remotes:\n{remotes}"

    def _stage_changes(
            self,
    ) -> str | None:
        files = changed_files(self.executor)
        if len(files) == 0:
            return NO_CHANGES
        if files.unavailable:
            return f"Unable to stage changes: {files.paths[0]}"

        candidates = list(files)
        values = self._collect(FormSpec(
            title="Stage Changes",
            fields=(multi_select_field("files", "Select files to stage", candidates),),
        ))
        if values is None:
            return None

        selected = list(values.get("files", []))
        if not selected:
            return NO_FILES_SELECTED

        to_stage = resolve_multi_select(selected, candidates)
        if not to_stage:
            return NO_FILES_STAGED

        return self.executor.execute("add", *to_stage)

    def _commit_changes(
            self,
    ) -> str | None:
        values = self._collect(FormSpec(
            title="Commit Changes",
            fields=(text_field("message", "Commit Message", char_limit=COMMIT_MESSAGE_LIMIT),),
        ))
        if values is None:
            return None

        return self.executor.execute("commit", "-m", values.get("message", ""))

    def _push(
            self,
    ) -> str | None:
        branch_result = self.executor.query("rev-parse", "--abbrev-ref", "HEAD")
        current_branch = branch_result.output.strip()
        if branch_result.returncode != 0 or not current_branch:
            return BRANCH_UNRESOLVED

        remotes_result = self.executor.query("remote")
        remotes = [line.strip() for line in remotes_result.output.splitlines() if line.strip()]
        if remotes_result.returncode != 0 or not remotes:
            return NO_REMOTES

        values = self._collect(FormSpec(
            title="Push to Remote",
            fields=(
                select_field("remote", "Remote", remotes),
                text_field("branch", "Branch", placeholder=current_branch),
                confirm_field("set_upstream", "Set upstream tracking?"),
            ),
        ))
        if values is None:
            return None

        remote = values.get("remote") or remotes[0]
        branch = values.get("branch", "").strip() or current_branch

        args = ["push"]
        if values.get("set_upstream"):
            args.append("--set-upstream")
        args.extend([remote, branch])

        push_result = self.executor.run(*args)
        if push_result.failed:
            return f"Failed to push: {push_result.output}"

        return f"Pushed {branch} to {remote} successfully.\n\n{push_result.output}"

    def _merge(
            self,
    ) -> str:
        return self.executor.execute("merge", self.merge_target)
