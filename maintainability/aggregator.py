"""
Pull request aggregation
========================
Walks the changed files of one pull request, analyzes the eligible ones and
collects issues and TODO entries in file order.
"""

import logging
from typing import Awaitable, Callable, Iterable

from maintainability.file_analyzer import analyze, file_issues, todo_entries
from maintainability.models import ChangedFile, PRFindings

logger = logging.getLogger(__name__)

ANALYZED_EXTENSIONS = (".js", ".ts", ".tsx")
MANIFEST_FILENAME = "package.json"
LOCKFILE_FILENAME = "package-lock.json"

ContentFetcher = Callable[[str], Awaitable[str]]


def is_eligible(changed_file: ChangedFile) -> bool:
    """Only JavaScript / TypeScript files with a textual diff are analyzed."""
    return changed_file.path.endswith(ANALYZED_EXTENSIONS) and changed_file.has_patch


async def aggregate(
    changed_files: Iterable[ChangedFile],
    fetch_content: ContentFetcher,
) -> PRFindings:
    """
    Analyze the changed files of a pull request.

    Args:
        changed_files: Files in the order the hosting API listed them
        fetch_content: Returns the full text of a path at the PR head commit

    Returns:
        PRFindings for the whole pull request. A file whose content cannot be
        fetched is recorded in ``failed_files`` and skipped.
    """
    findings = PRFindings()

    for changed_file in changed_files:
        path = changed_file.path

        if is_eligible(changed_file):
            try:
                content = await fetch_content(path)
                metrics = analyze(path, content)
            except Exception as e:
                logger.error(f"Error analyzing {path}: {e}")
                findings.failed_files.append(path)
            else:
                logger.info(
                    f"Analyzed {path}: loc={metrics.loc}, "
                    f"methods={metrics.method_count}, todos={len(metrics.todo_lines)}"
                )
                findings.analyzed_files.append(path)
                findings.issues.extend(file_issues(metrics))
                findings.todo_entries.extend(todo_entries(metrics))

        # Manifest / lockfile tracking needs only the filename
        if path == MANIFEST_FILENAME:
            findings.manifest_changed = True
        if path == LOCKFILE_FILENAME:
            findings.lockfile_changed = True

    return findings
