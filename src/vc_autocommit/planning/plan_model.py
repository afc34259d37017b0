"""
Data models for commit planning.

A :class:`FileRecord` captures the line count of one scanned file. A
:class:`CommitPlan` is the ordered list of commit messages derived from
those records for a single session.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple


@dataclass(frozen=True)
class FileRecord:
    """Line count of a single file in the target folder.

    Attributes
    ----------
    path : Path
        Path of the scanned file.
    line_count : int
        Number of newline-delimited segments in the file content.
    """

    path: Path
    line_count: int


@dataclass(frozen=True)
class CommitPlan:
    """Ordered commit messages for one session."""

    messages: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.messages)

    def __getitem__(self, index: int) -> str:
        return self.messages[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)
