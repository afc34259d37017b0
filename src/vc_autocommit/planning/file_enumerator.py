"""
Recursive listing of the files in the target folder.

Directory entries are visited in sorted name order so that two runs over
the same tree produce the same sequence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Union


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class DirectoryNotFoundError(Exception):
    """Raised when the folder to enumerate does not exist or is not a directory."""

    pass


def iter_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield every regular file below ``root``.

    Directories are descended into but never yielded themselves.

    Raises
    ------
    DirectoryNotFoundError
        If ``root`` is missing or is not a directory. The check happens on
        the first call to ``next()``.
    """
    root = Path(root)
    if not root.is_dir():
        raise DirectoryNotFoundError(f"Directory not found: {root}")
    yield from _walk(root)


def _walk(directory: Path) -> Iterator[Path]:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            yield from _walk(entry)
        elif entry.is_file():
            yield entry
        else:
            logger.debug("Skipping non-regular file: %s", entry)


def list_files(root: Union[str, Path]) -> List[Path]:
    """Return :func:`iter_files` as a list."""
    files = list(iter_files(root))
    logger.debug("Found %d file(s) under %s", len(files), root)
    return files
