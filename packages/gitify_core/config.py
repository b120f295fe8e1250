"""Runtime configuration for Gitify.

Settings come from explicit arguments first, then environment variables,
which may be populated from a ``.env`` file.

Execution Context:
    Library module - imported by the CLI and the TUI client

Dependencies:
    - python-dotenv: Load environment variables from .env file

Metadata:
    Version: 0.1.0
    Author: Gitify Team
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_REPO_PATH = "GITIFY_REPO_PATH"
ENV_GIT_BINARY = "GITIFY_GIT_BINARY"
ENV_MERGE_TARGET = "GITIFY_MERGE_TARGET"
ENV_LOG_LEVEL = "GITIFY_LOG_LEVEL"
ENV_LOG_FILE = "GITIFY_LOG_FILE"


# ---- Environment Loading ---------------------------------------------------------------------------------------


def _load_env_file(
        env_path: Path | None = None,
) -> None:
    """Load environment variables from .env file.

    Searches for .env file in:
    1. Specified path (if provided)
    2. Current working directory
    3. Parent directories (up to 3 levels)

    Args:
        env_path: Explicit path to .env file (optional).
    """
    if env_path:
        if env_path.exists():
            load_dotenv(env_path, override=True)
        return

    current = Path.cwd()
    for candidate_dir in [current, *list(current.parents)[:3]]:
        candidate = candidate_dir / ".env"
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return


# ---- Configuration ------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class GitifyConfig:
    """Resolved Gitify settings.

    Attributes:
        repo_path: Repository git commands run in.
        git_binary: git executable name or path.
        merge_target: Branch merged by the Merge Branch action.
        log_level: Logging level name.
        log_file: Optional file receiving log records.
    """

    repo_path: Path = Path(".")
    git_binary: str = "git"
    merge_target: str = "main"
    log_level: str = "WARNING"
    log_file: Path | None = None


def load_config(
        repo_path: Path | str | None = None,
        env_path: Path | None = None,
) -> GitifyConfig:
    """Resolve configuration from arguments and environment.

    Args:
        repo_path: Repository path (overrides GITIFY_REPO_PATH).
        env_path: Explicit .env file to load.

    Returns:
        Resolved configuration.

    Raises:
        ValueError: If the repository path is not an existing directory.
    """
    _load_env_file(env_path)

    resolved_repo = Path(repo_path or os.getenv(ENV_REPO_PATH) or ".").expanduser()
    if not resolved_repo.is_dir():
        msg = f"Repository path is not a directory: {resolved_repo}"
        raise ValueError(msg)

    log_file = os.getenv(ENV_LOG_FILE)

    return GitifyConfig(
        repo_path=resolved_repo,
        git_binary=os.getenv(ENV_GIT_BINARY) or "git",
        merge_target=os.getenv(ENV_MERGE_TARGET) or "main",
        log_level=(os.getenv(ENV_LOG_LEVEL) or "WARNING").upper(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
