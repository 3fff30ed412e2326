"""Data models for pull requests, commits and the assembled report."""

from datetime import datetime, timezone
from typing import Literal, Optional
from pydantic import BaseModel, Field


class PullRequest(BaseModel):
    """PR summary built from a GitHub search result item.

    ``logo_url`` stays ``None`` until the aggregator resolves the
    repository's logo; after that it is always a string (empty when the
    lookup failed).
    """

    title: str
    url: str  # html_url of the PR
    repository_id: str  # e.g., "facebook/react"
    number: int = Field(..., ge=1)
    created_at: str  # ISO 8601 timestamp, as returned by GitHub
    logo_url: Optional[str] = None

    @property
    def key(self) -> tuple[str, int]:
        """Identity of the PR within one run."""
        return (self.repository_id, self.number)


class Commit(BaseModel):
    """A commit as shown in the report (normalized message only)."""

    message: str


class LogoResult(BaseModel):
    """Outcome of a repository logo lookup.

    A failed lookup is cached for the rest of the run just like a resolved
    one, so it has to be distinguishable from a resolved empty URL.
    """

    status: Literal["resolved", "failed"]
    url: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def resolved(cls, url: str) -> "LogoResult":
        return cls(status="resolved", url=url)

    @classmethod
    def failed(cls, error: str) -> "LogoResult":
        return cls(status="failed", error=error)

    @property
    def ok(self) -> bool:
        return self.status == "resolved"

    @property
    def logo_url(self) -> str:
        """URL to render; empty string when the lookup failed."""
        return self.url or ""


class PullRequestDetail(BaseModel):
    """A PR together with its normalized commit history."""

    pull_request: PullRequest
    commits: list[Commit] = Field(default_factory=list)


class Report(BaseModel):
    """Everything the report page renders."""

    pull_requests: list[PullRequestDetail] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> int:
        return len(self.pull_requests)

    @property
    def repositories(self) -> list[str]:
        """Distinct repository ids in first-seen order."""
        seen: dict[str, None] = {}
        for detail in self.pull_requests:
            seen.setdefault(detail.pull_request.repository_id, None)
        return list(seen)
