"""Pydantic models shared by the analysis pipeline and the GitHub boundary."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field


class ChangedFile(BaseModel):
    """A file touched by a pull request."""

    model_config = ConfigDict(frozen=True)

    path: str
    has_patch: bool = Field(
        default=False,
        description="False for binary or rename-only changes that carry no textual diff",
    )


class FileMetrics(BaseModel):
    """Metrics computed for one analyzed file."""

    model_config = ConfigDict(frozen=True)

    path: str
    loc: int
    method_count: int
    todo_lines: list[str] = Field(default_factory=list)


class PRFindings(BaseModel):
    """Everything collected across the changed files of one pull request."""

    issues: list[str] = Field(default_factory=list)
    todo_entries: list[str] = Field(default_factory=list)
    manifest_changed: bool = False
    lockfile_changed: bool = False
    # Operator bookkeeping, logged but never rendered into the comment
    analyzed_files: list[str] = Field(default_factory=list)
    failed_files: list[str] = Field(default_factory=list)


class PullRequestRef(BaseModel):
    """Identifies a pull request together with the installation allowed to act on it."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int
    installation_id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


class PullRequestEvent(BaseModel):
    """The subset of a GitHub ``pull_request`` webhook payload the reviewer consumes."""

    model_config = ConfigDict(frozen=True)

    installation_present: bool
    installation_id: Optional[int] = None
    pr_number: int
    repo_owner: str
    repo_name: str
    head_ref: str = Field(description="Head commit SHA of the pull request")
    action: Optional[str] = None

    @property
    def repo_full_name(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"

    @property
    def pull_request(self) -> PullRequestRef:
        return PullRequestRef(
            owner=self.repo_owner,
            repo=self.repo_name,
            number=self.pr_number,
            installation_id=self.installation_id,
        )

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PullRequestEvent":
        """
        Build an event from a raw webhook payload.

        Raises:
            pydantic.ValidationError: if the pull request number, repository
                or head SHA are missing.
        """
        installation = payload.get("installation") or {}
        pr = payload.get("pull_request") or {}
        repo_info = payload.get("repository") or {}
        owner = repo_info.get("owner") or {}

        return cls(
            installation_present=bool(installation.get("id")),
            installation_id=installation.get("id"),
            pr_number=pr.get("number"),
            repo_owner=owner.get("login") or owner.get("name"),
            repo_name=repo_info.get("name"),
            head_ref=(pr.get("head") or {}).get("sha"),
            action=payload.get("action"),
        )


class PullRequestAPI(Protocol):
    """The source-hosting operations the reviewer needs."""

    async def list_changed_files(self, pr: PullRequestRef) -> list[ChangedFile]:
        ...

    async def get_file_content(self, pr: PullRequestRef, path: str, ref: str) -> str:
        ...

    async def create_comment(self, pr: PullRequestRef, body: str) -> None:
        ...
