"""
Commit execution: the orchestrated stage/commit/retry loop.
"""

from .orchestrator import CommitAttempt, CommitOrchestrator, CommitReport  # noqa: F401
