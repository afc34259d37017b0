"""
Abstract version-control adapter used by the commit orchestrator.

The orchestrator only needs four operations from a repository. Keeping
them behind a small interface lets tests substitute an in-memory double
for the real Git client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class VersionControlAdapter(ABC):
    """Narrow set of repository operations consumed by the orchestrator.

    Every method returns ``None`` on success and raises
    :class:`~vc_autocommit.vcs.git_client.GitError` on failure.
    """

    @abstractmethod
    def status(self) -> None:
        """Verify that the working directory is a usable repository."""

    @abstractmethod
    def stage_all(self, pattern: str) -> None:
        """Stage every path matching ``pattern``."""

    @abstractmethod
    def commit(self, message: str) -> None:
        """Record a commit with ``message``."""

    @abstractmethod
    def push(self) -> None:
        """Push the current branch to its default remote."""
