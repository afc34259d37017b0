"""
Version control system (VCS) integration.

The orchestrator talks to a repository through the
:class:`~vc_autocommit.vcs.base.VersionControlAdapter` interface;
:class:`GitClient` is the concrete implementation backed by ``git``.
"""

from .base import VersionControlAdapter  # noqa: F401
from .git_client import GitClient, GitError, GitErrorKind  # noqa: F401
