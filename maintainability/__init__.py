

from .metrics import count_loc, count_methods, find_todos
from .file_analyzer import analyze, file_issues, todo_entries
from .aggregator import aggregate, is_eligible
from .models import (
    ChangedFile,
    FileMetrics,
    PRFindings,
    PullRequestAPI,
    PullRequestEvent,
    PullRequestRef,
)

__all__ = [
    "count_loc",
    "count_methods",
    "find_todos",
    "analyze",
    "file_issues",
    "todo_entries",
    "aggregate",
    "is_eligible",
    "ChangedFile",
    "FileMetrics",
    "PRFindings",
    "PullRequestAPI",
    "PullRequestEvent",
    "PullRequestRef",
]
