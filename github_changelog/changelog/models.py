"""Data models for changelog generation."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from githubkit.versions.latest.models import PullRequest as GitHubPullRequest


class OutputFormat(str, Enum):
    """Output formats a changelog can be rendered to."""

    JSON = "json"
    MARKDOWN = "markdown"


class PullRequestUser(BaseModel):
    """Author of a pull request."""

    model_config = ConfigDict(frozen=True)

    login: str
    html_url: str | None = None


class PullRequest(BaseModel):
    """A merged pull request as it appears in a changelog section."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    user: PullRequestUser
    html_url: str | None = None
    merge_commit_sha: str | None = None
    merged_at: datetime | None = None

    @classmethod
    def from_github(cls, pull_request: "GitHubPullRequest") -> "PullRequest":
        """Build from a githubkit pull request model."""
        return cls(
            number=pull_request.number,
            title=pull_request.title,
            user=PullRequestUser(login=pull_request.user.login, html_url=pull_request.user.html_url),
            html_url=pull_request.html_url,
            merge_commit_sha=pull_request.merge_commit_sha,
            merged_at=pull_request.merged_at,
        )


class Section(BaseModel):
    """Changes between two revisions.

    An empty ``from_revision`` means the beginning of history and an empty
    ``to_revision`` means the current tip. ``changed_at`` is None whenever
    the commit at ``to_revision`` could not be resolved.
    """

    model_config = ConfigDict(frozen=True)

    pull_requests: list[PullRequest] = Field(default_factory=list)
    from_revision: str = ""
    to_revision: str = ""
    changed_at: datetime | None = None
    owner: str = ""
    repo: str = ""


class Changelog(BaseModel):
    """Sections for every version boundary, newest first."""

    model_config = ConfigDict(populate_by_name=True)

    sections: list[Section] = Field(default_factory=list, alias="Sections")
