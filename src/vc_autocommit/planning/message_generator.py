"""
Deterministic commit message generation.

Messages are derived from the line counts of the files in the target
folder. The files are ordered by line count, largest first, and the
requested number of messages is produced by cycling through that order::

    Refactor <basename> - <line count> lines analyzed

The same file contents and the same count always give the same plan.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from vc_autocommit.planning.plan_model import CommitPlan, FileRecord


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


MESSAGE_TEMPLATE = "Refactor {name} - {lines} lines analyzed"


class EmptyFileSetError(Exception):
    """Raised when a plan is requested for an empty set of files."""

    pass


def count_lines(path: Path) -> int:
    """Return the number of ``"\\n"``-separated segments in ``path``.

    An empty file counts as one line, and a trailing newline adds an
    empty final segment. Only ``\\n`` bytes separate lines; ``\\r`` is
    content, so the raw bytes are counted rather than decoded text.
    """
    return path.read_bytes().count(b"\n") + 1


def scan_files(paths: Iterable[Path]) -> List[FileRecord]:
    """Read each file once and record its line count, keeping input order."""
    return [FileRecord(path=Path(p), line_count=count_lines(Path(p))) for p in paths]


def sort_records(records: Sequence[FileRecord]) -> List[FileRecord]:
    """Order records by line count, descending.

    Records with equal line counts keep their enumeration order.
    ``sorted`` is stable, and the key negates the count instead of using
    ``reverse=True`` so that ties are never reordered.
    """
    return sorted(records, key=lambda record: -record.line_count)


def format_message(record: FileRecord) -> str:
    return MESSAGE_TEMPLATE.format(name=record.path.name, lines=record.line_count)


def generate_commit_messages(paths: Sequence[Path], count: int) -> CommitPlan:
    """Build a plan of exactly ``count`` commit messages.

    Parameters
    ----------
    paths : Sequence[Path]
        Files to derive messages from, in enumeration order.
    count : int
        Number of messages to produce; must be at least 1.

    Returns
    -------
    CommitPlan
        Message ``i`` describes ``sorted_records[i % len(sorted_records)]``,
        so messages repeat when ``count`` exceeds the number of files.

    Raises
    ------
    EmptyFileSetError
        If ``paths`` is empty.
    ValueError
        If ``count`` is less than 1.
    """
    if not paths:
        raise EmptyFileSetError("No files to derive commit messages from.")
    if count < 1:
        raise ValueError(f"Commit count must be at least 1, got {count}")

    ordered = sort_records(scan_files(paths))
    messages = tuple(format_message(ordered[i % len(ordered)]) for i in range(count))
    logger.debug("Generated %d commit message(s) from %d file(s)", len(messages), len(ordered))
    return CommitPlan(messages=messages)
