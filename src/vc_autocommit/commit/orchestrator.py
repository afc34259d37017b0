"""
Sequential commit loop with randomized pacing and bounded retries.

The :class:`CommitOrchestrator` executes a :class:`CommitPlan` against a
:class:`VersionControlAdapter`: one stage-and-commit per planned message,
a random pause after every successful commit, and a single push once the
loop is over.

A failed stage or commit is retried immediately with the same planned
message. The retry counter belongs to the current plan index and is reset
by every successful commit, so ``max_retries`` bounds the number of
consecutive failures. Once it is exhausted the rest of the plan is
abandoned, and the push still happens.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from vc_autocommit.console import ConsoleReporter
from vc_autocommit.planning.plan_model import CommitPlan
from vc_autocommit.vcs.base import VersionControlAdapter
from vc_autocommit.vcs.git_client import GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


TARGET_FOLDER = "Test"
MAX_RETRIES = 3
MIN_DELAY_MS = 5000
MAX_DELAY_MS = 30000


@dataclass
class CommitAttempt:
    """One stage-and-commit try for a plan index.

    Attributes
    ----------
    index : int
        0-based position in the plan.
    message : str
        The planned message; identical across retries of the same index.
    retry : int
        0 for the first try, then 1, 2, ... for each retry.
    error : Optional[GitError]
        The failure, or ``None`` if the commit was recorded.
    """

    index: int
    message: str
    retry: int = 0
    error: Optional[GitError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class CommitReport:
    """Outcome of :meth:`CommitOrchestrator.run`."""

    planned: int
    attempts: List[CommitAttempt] = field(default_factory=list)
    aborted: bool = False
    pushed: bool = False

    @property
    def committed(self) -> List[str]:
        return [a.message for a in self.attempts if a.succeeded]

    @property
    def abandoned(self) -> int:
        return self.planned - len(self.committed)


class CommitOrchestrator:
    """Drive the commit plan against a version-control adapter.

    Parameters
    ----------
    adapter : VersionControlAdapter
        Repository operations (status, stage, commit, push).
    reporter : optional
        Receiver of user-facing notices; defaults to
        :class:`~vc_autocommit.console.ConsoleReporter`.
    sleep : Callable[[float], None], optional
        Pause implementation, called with seconds; ``time.sleep`` by default.
    rng : random.Random, optional
        Source of the commit delays.
    max_retries : int
        Consecutive failures tolerated for a single plan index.
    min_delay_ms, max_delay_ms : int
        Delay window in milliseconds, ``[min_delay_ms, max_delay_ms)``.
    stage_pattern : str
        Pathspec staged before every commit.
    """

    def __init__(
        self,
        adapter: VersionControlAdapter,
        reporter=None,
        sleep: Optional[Callable[[float], None]] = None,
        rng: Optional[random.Random] = None,
        max_retries: int = MAX_RETRIES,
        min_delay_ms: int = MIN_DELAY_MS,
        max_delay_ms: int = MAX_DELAY_MS,
        stage_pattern: str = f"{TARGET_FOLDER}/*",
    ) -> None:
        if max_delay_ms <= min_delay_ms:
            raise ValueError("max_delay_ms must be greater than min_delay_ms")
        self.adapter = adapter
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.sleep = sleep if sleep is not None else time.sleep
        self.rng = rng if rng is not None else random.Random()
        self.max_retries = max_retries
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self.stage_pattern = stage_pattern

    def check_repository(self) -> None:
        """Run the adapter's status check; a :class:`GitError` propagates."""
        self.adapter.status()

    def next_delay_ms(self) -> int:
        return self.rng.randrange(self.min_delay_ms, self.max_delay_ms)

    def _attempt(self, attempt: CommitAttempt) -> None:
        try:
            self.adapter.stage_all(self.stage_pattern)
            self.adapter.commit(attempt.message)
        except GitError as exc:
            attempt.error = exc

    def run(self, plan: CommitPlan) -> CommitReport:
        """Commit every planned message, then push once.

        Errors raised by the push are not caught here.
        """
        total = len(plan)
        report = CommitReport(planned=total)
        index = 0
        retry = 0

        while index < total:
            attempt = CommitAttempt(index=index, message=plan[index], retry=retry)
            self._attempt(attempt)
            report.attempts.append(attempt)

            if attempt.succeeded:
                self.reporter.success(f'Commit {index + 1}/{total}: "{attempt.message}"')
                delay_ms = self.next_delay_ms()
                logger.debug("Sleeping %d ms before the next commit", delay_ms)
                self.sleep(delay_ms / 1000)
                index += 1
                retry = 0
                continue

            self.reporter.error(f"Failed to commit iteration {index + 1}", str(attempt.error))
            if retry < self.max_retries:
                retry += 1
                logger.debug("Retry %d/%d for iteration %d", retry, self.max_retries, index + 1)
                self.reporter.retry("Retrying commit...")
                continue

            self.reporter.error("Maximum retries reached.")
            report.aborted = True
            break

        logger.debug(
            "Commit loop finished: %d committed, %d attempt(s), aborted=%s",
            len(report.committed),
            len(report.attempts),
            report.aborted,
        )
        self.adapter.push()
        report.pushed = True
        return report
