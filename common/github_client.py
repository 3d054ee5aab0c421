"""
GitHub Client for Pull Request Review

Handles GitHub App authentication and the pull request calls the reviewer
needs: listing changed files, reading file content and posting comments.
"""
import asyncio
import datetime
import logging
from typing import Any, Dict, List, Optional

from github import Auth, Github, GithubException, GithubIntegration

from common.config import BotSettings, get_settings
from maintainability.models import ChangedFile, PullRequestRef

logger = logging.getLogger(__name__)

# Refresh installation tokens this long before GitHub expires them
_TOKEN_EXPIRY_BUFFER = datetime.timedelta(minutes=5)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""


class GitHubAuthError(GitHubClientError):
    """Installation token could not be obtained."""


class ListFilesError(GitHubClientError):
    """Changed files of a pull request could not be listed."""


class ContentFetchError(GitHubClientError):
    """A file's content could not be retrieved at the requested ref."""


class SubmissionError(GitHubClientError):
    """A comment could not be posted."""


class GitHubClient:
    """
    GitHub API client using GitHub App authentication via PyGithub.

    Provides async interface wrapping PyGithub's synchronous methods.
    """

    def __init__(
        self,
        app_id: Optional[str] = None,
        private_key: Optional[str] = None,
        private_key_path: Optional[str] = None,
        settings: Optional[BotSettings] = None,
    ):
        """
        Initialize GitHub client.

        Args:
            app_id: GitHub App ID (defaults to GITHUB_APP_ID setting)
            private_key: PEM contents (defaults to GITHUB_PRIVATE_KEY setting)
            private_key_path: Path to .pem file (defaults to GITHUB_PRIVATE_KEY_PATH setting)
            settings: Settings to fall back on (defaults to get_settings())
        """
        settings = settings or get_settings()

        raw_app_id = app_id if app_id is not None else settings.github_app_id
        if not raw_app_id:
            raise ValueError("GitHub App ID not provided")

        try:
            self.app_id = int(raw_app_id)
        except ValueError:
            raise ValueError(f"GitHub App ID must be an integer, got: {raw_app_id}")

        self.private_key = private_key or settings.github_private_key
        if not self.private_key:
            key_path = private_key_path or settings.github_private_key_path
            if not key_path:
                raise ValueError("GitHub private key not provided")
            with open(key_path, "r") as f:
                self.private_key = f.read()

        self.integration = GithubIntegration(auth=Auth.AppAuth(self.app_id, self.private_key))
        self._github_cache: Dict[int, Dict[str, Any]] = {}

    def _get_github_instance(self, installation_id: Optional[int]) -> Github:
        """
        Get an authenticated Github instance for an installation.

        Tokens are cached per installation until shortly before they expire.
        """
        if installation_id is None:
            raise GitHubAuthError("No installation id on the pull request")

        cache_entry = self._github_cache.get(installation_id)
        if cache_entry:
            token_expires_at = cache_entry.get("expires_at")
            now = datetime.datetime.now(datetime.timezone.utc)
            if token_expires_at and now < (token_expires_at - _TOKEN_EXPIRY_BUFFER):
                return cache_entry["github"]

        try:
            auth = self.integration.get_access_token(installation_id)
        except GithubException as e:
            raise GitHubAuthError(
                f"Failed to obtain installation token for installation {installation_id}: {e.data}"
            ) from e

        github = Github(auth=Auth.Token(auth.token))
        self._github_cache[installation_id] = {
            "github": github,
            "expires_at": auth.expires_at,
        }
        return github

    async def list_changed_files(self, pr: PullRequestRef) -> List[ChangedFile]:
        """
        Get the files changed in a pull request, in the order GitHub lists them.

        Raises:
            ListFilesError: on any GitHub API error
        """
        def _get_files():
            github = self._get_github_instance(pr.installation_id)
            try:
                repository = github.get_repo(pr.full_name)
                pull = repository.get_pull(pr.number)
                return [
                    ChangedFile(path=f.filename, has_patch=bool(f.patch))
                    for f in pull.get_files()
                ]
            except GithubException as e:
                raise ListFilesError(
                    f"Failed to list files for {pr}: {e.status} {e.data}"
                ) from e

        return await asyncio.to_thread(_get_files)

    async def get_file_content(self, pr: PullRequestRef, path: str, ref: str) -> str:
        """
        Get the full text of a file at a commit.

        Raises:
            ContentFetchError: if the file is missing, inaccessible, a
                directory, or too large to be returned inline
        """
        def _get_content():
            github = self._get_github_instance(pr.installation_id)
            try:
                repository = github.get_repo(pr.full_name)
                content_file = repository.get_contents(path, ref=ref)
            except GithubException as e:
                raise ContentFetchError(
                    f"Failed to fetch {path}@{ref[:7]} in {pr.full_name}: {e.status}"
                ) from e

            if isinstance(content_file, list):
                raise ContentFetchError(f"{path} is a directory in {pr.full_name}")

            try:
                # Invalid bytes are replaced so the rest of the file is still analyzed
                return content_file.decoded_content.decode("utf-8", errors="replace")
            except AssertionError as e:
                # PyGithub asserts base64 encoding; files over 1 MB come back as "none"
                raise ContentFetchError(f"Could not decode {path} in {pr.full_name}: {e}") from e

        return await asyncio.to_thread(_get_content)

    async def create_comment(self, pr: PullRequestRef, body: str) -> None:
        """
        Post a comment on a pull request (via issue comments API).

        Raises:
            SubmissionError: on any GitHub API error
        """
        def _post():
            github = self._get_github_instance(pr.installation_id)
            try:
                repository = github.get_repo(pr.full_name)
                issue = repository.get_issue(pr.number)
                issue.create_comment(body)
            except GithubException as e:
                raise SubmissionError(
                    f"Failed to comment on {pr}: {e.status} {e.data}"
                ) from e

        await asyncio.to_thread(_post)
