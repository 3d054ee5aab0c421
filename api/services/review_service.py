"""
PR Review Service
=================
Orchestrates the maintainability review of one pull request:
  1. List the files changed in the PR
  2. Fetch each eligible file at the head commit and compute its metrics
  3. Compose the summary comment
  4. Post it on the PR
"""

import logging
from typing import Optional

from api.utils.comment_formatter import compose
from maintainability.aggregator import aggregate
from maintainability.models import PullRequestAPI, PullRequestEvent

logger = logging.getLogger(__name__)


async def handle_pull_request_event(
    event: PullRequestEvent,
    github: PullRequestAPI,
) -> Optional[str]:
    """
    Review a pull request and post the summary comment.

    Returns the posted comment body, or None when the event carries no
    installation and was skipped. Errors while listing files or posting the
    comment are logged and re-raised.
    """
    if not event.installation_present:
        logger.error(
            "Missing installation ID in PR event payload for %s#%s, skipping",
            event.repo_full_name,
            event.pr_number,
        )
        return None

    pr = event.pull_request

    try:
        logger.info(f"🔍 Analyzing PR #{event.pr_number} in {event.repo_full_name}")

        changed_files = await github.list_changed_files(pr)

        async def _fetch(path: str) -> str:
            return await github.get_file_content(pr, path, event.head_ref)

        findings = await aggregate(changed_files, _fetch)
        logger.info(
            f"Aggregated {len(changed_files)} changed files for {pr}: "
            f"analyzed={len(findings.analyzed_files)}, failed={len(findings.failed_files)}, "
            f"issues={len(findings.issues)}, todos={len(findings.todo_entries)}"
        )

        body = compose(findings)
        await github.create_comment(pr, body)

        logger.info(f"✅ Successfully commented on PR #{event.pr_number}")
        return body
    except Exception as e:
        logger.error(
            f"❌ Error processing PR #{event.pr_number} in {event.repo_full_name}: {e}"
        )
        raise
