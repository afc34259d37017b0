"""
Git client implementation for vc_autocommit.

This module wraps the handful of Git operations the commit orchestrator
needs: status, add, commit and push. All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock a single seam.

Failures are raised as :class:`GitError` with an explicit
:class:`GitErrorKind`, assigned here from Git's own output, so callers
never have to match on free-text messages.
"""

from __future__ import annotations

import enum
import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from vc_autocommit.vcs.base import VersionControlAdapter


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class GitErrorKind(enum.Enum):
    """Stable classification of Git failures."""

    NOT_A_REPOSITORY = "not_a_repository"
    PERMISSION_DENIED = "permission_denied"
    UNEXPECTED = "unexpected"


class GitError(Exception):
    """Raised when a Git command fails."""

    def __init__(self, message: str, kind: GitErrorKind = GitErrorKind.UNEXPECTED) -> None:
        super().__init__(message)
        self.kind = kind


def classify_git_failure(output: str) -> GitErrorKind:
    """Map the output of a failed Git command to a :class:`GitErrorKind`."""
    text = output.lower()
    if "not a git repository" in text:
        return GitErrorKind.NOT_A_REPOSITORY
    if "permission denied" in text:
        return GitErrorKind.PERMISSION_DENIED
    return GitErrorKind.UNEXPECTED


class GitClient(VersionControlAdapter):
    """Client for interacting with the Git repository in ``repo_root``."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root if repo_root is not None else Path.cwd()

    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If ``git`` cannot be executed, or the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.error("Unable to execute Git: %s", exc)
            raise GitError(f"Unable to execute git: {exc}") from exc

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            detail = result.stderr.strip() or result.stdout.strip()
            raise GitError(detail, classify_git_failure(detail))
        return result

    def status(self) -> None:
        """Run ``git status`` to confirm the repository is usable."""
        self._run(["status", "--porcelain"])

    def stage_all(self, pattern: str) -> None:
        """Stage every path matching the pathspec ``pattern``."""
        self._run(["add", "--", pattern])

    def commit(self, message: str) -> None:
        """Create a commit with ``message``.

        ``git commit`` with nothing staged exits non-zero but writes its
        "nothing to commit" notice to stdout only. A failure without any
        stderr output is logged and treated as success; anything on stderr
        raises :class:`GitError`.
        """
        result = self._run(["commit", "-m", message], check=False)
        if result.returncode == 0:
            return
        detail = result.stderr.strip()
        if not detail:
            logger.warning(
                "git commit exited with status %d without an error: %s",
                result.returncode,
                result.stdout.strip(),
            )
            return
        logger.error("Git commit failed: %s", detail)
        raise GitError(detail, classify_git_failure(detail))

    def push(self) -> None:
        """Push the current branch to its configured upstream."""
        self._run(["push"])
