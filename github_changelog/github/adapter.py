"""Read-only pull request access through the githubkit library."""

import structlog
from githubkit import Response
from githubkit.versions.latest.models import PullRequest

from github_changelog.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import GitHubClient

logger = structlog.get_logger(__name__)


class GitHubKitAdapter(GitHubClientBase):
    """Fetches pull requests of one repository with a githubkit client."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize with an already-initialized client and the repository to read from."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @retry_on_rate_limit()
    async def get_pull_request(self, pull_request_number: int) -> PullRequest:
        """Get a pull request by number, retrying when rate limited."""
        logger.debug("Fetching pull request", owner=self.owner, repo=self.repo_name, pull_request_number=pull_request_number)
        response: Response[PullRequest] = await self.client.rest.pulls.async_get(
            owner=self.owner, repo=self.repo_name, pull_number=pull_request_number
        )
        return response.parsed_data
