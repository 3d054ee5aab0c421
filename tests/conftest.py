import pytest

from common.github_client import ContentFetchError
from maintainability.models import ChangedFile, PullRequestEvent, PullRequestRef


class FakePullRequestAPI:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(
        self,
        files: list[ChangedFile] | None = None,
        contents: dict[str, str] | None = None,
        list_error: Exception | None = None,
        comment_error: Exception | None = None,
    ):
        self.files = files or []
        self.contents = contents or {}
        self.list_error = list_error
        self.comment_error = comment_error
        self.fetched: list[tuple[str, str]] = []
        self.comments: list[tuple[PullRequestRef, str]] = []

    async def list_changed_files(self, pr: PullRequestRef) -> list[ChangedFile]:
        if self.list_error:
            raise self.list_error
        return list(self.files)

    async def get_file_content(self, pr: PullRequestRef, path: str, ref: str) -> str:
        self.fetched.append((path, ref))
        if path not in self.contents:
            raise ContentFetchError(f"Failed to fetch {path}@{ref[:7]}: 404")
        return self.contents[path]

    async def create_comment(self, pr: PullRequestRef, body: str) -> None:
        if self.comment_error:
            raise self.comment_error
        self.comments.append((pr, body))


@pytest.fixture
def make_github():
    """Factory for FakePullRequestAPI instances."""
    return FakePullRequestAPI


@pytest.fixture
def pr_event():
    return PullRequestEvent(
        installation_present=True,
        installation_id=42,
        pr_number=7,
        repo_owner="octo",
        repo_name="shop",
        head_ref="abc1234def5678",
        action="opened",
    )
