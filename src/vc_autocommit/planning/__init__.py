"""
Commit planning: file enumeration and message generation.
"""

from .file_enumerator import DirectoryNotFoundError, iter_files, list_files  # noqa: F401
from .message_generator import EmptyFileSetError, generate_commit_messages  # noqa: F401
from .plan_model import CommitPlan, FileRecord  # noqa: F401
