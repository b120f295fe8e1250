"""Git command execution.

Runs the git binary with an argument vector and normalizes every failure
(non-zero exit, missing binary, bad working directory) into error-prefixed
output text instead of raising.

Execution Context:
    Library module - imported by the dispatcher and status parser

Dependencies:
    - subprocess: Process spawning

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gitify_core.models import CommandResult

logger = logging.getLogger(__name__)


# ---- Executor -----------------------------------------------------------------------------------------------


class GitExecutor:
    """Invokes git synchronously inside one repository directory.

    Attributes:
        repo_path: Working directory for every invocation.
        git_binary: Name or path of the git executable.
    """

    def __init__(
            self,
            repo_path: Path | str = ".",
            git_binary: str = "git",
    ) -> None:
        """Initialize executor.

        Args:
            repo_path: Working directory for git commands.
            git_binary: git executable to invoke.
        """
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary

    def run(
            self,
            *args: str,
    ) -> CommandResult:
        """Run git and capture stdout and stderr as one stream.

        Args:
            *args: Arguments passed to git.

        Returns:
            CommandResult whose output is prefixed with ``Error:`` on failure.
        """
        return self._invoke(args, merge_stderr=True)

    def execute(
            self,
            *args: str,
    ) -> str:
        """Run git and return its combined output text.

        Args:
            *args: Arguments passed to git.

        Returns:
            Output text, prefixed with ``Error:`` on failure.
        """
        return self.run(*args).output

    def query(
            self,
            *args: str,
    ) -> CommandResult:
        """Run a machine-readable git query, capturing stdout only.

        Args:
            *args: Arguments passed to git.

        Returns:
            CommandResult with stdout text, or error text on failure.
        """
        return self._invoke(args, merge_stderr=False)

    def _invoke(
            self,
            args: tuple[str, ...],
            merge_stderr: bool,
    ) -> CommandResult:
        command = [self.git_binary, *args]
        logger.debug("Running %s in %s", command, self.repo_path)

        try:
            completed = subprocess.run(
                command,
                cwd=self.repo_path,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as launch_error:
            logger.warning("Could not launch %s: %s", self.git_binary, launch_error)
            return CommandResult(
                args=args,
                output=f"Error: {launch_error}\n",
                returncode=None,
            )

        output = completed.stdout or ""
        if completed.returncode != 0:
            logger.warning("git %s exited with status %d", " ".join(args), completed.returncode)
            output = f"Error: exit status {completed.returncode}\n{output}"

        return CommandResult(args=args, output=output, returncode=completed.returncode)
