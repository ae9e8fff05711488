"""Base ABCs for GitHub clients and pull request providers."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from github_changelog.changelog.models import PullRequest


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Pull Request Read Operations
    @abstractmethod
    async def get_pull_request(self, pull_request_number: int) -> Any:
        """Get a pull request for a repository."""
        pass


class PullRequestProviderBase(ABC):
    """Base ABC for providers of merged pull requests."""

    @abstractmethod
    async def merged_pull_requests(self, owner: str, repo: str, from_revision: str, to_revision: str) -> list["PullRequest"]:
        """List the pull requests merged in (from_revision, to_revision], ordered by merge time."""
        pass
