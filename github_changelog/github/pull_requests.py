"""Finds the pull requests merged into a revision range."""

from dataclasses import dataclass

import structlog
from githubkit.exception import GitHubException

from github_changelog.changelog.models import PullRequest
from github_changelog.git.abc import RepositoryProviderBase
from github_changelog.git.exceptions import GitCommandError
from github_changelog.git.models import MergeCommit
from github_changelog.utils.constants import MERGE_PULL_REQUEST_PATTERN, SQUASH_PULL_REQUEST_PATTERN

from .abc import PullRequestProviderBase
from .adapter import GitHubKitAdapter
from .client import GitHubClient

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PullRequestReference:
    """A pull request number found in a commit subject."""

    number: int
    sha: str
    squashed: bool


def find_pull_request_references(commits: list[MergeCommit]) -> list[PullRequestReference]:
    """Find pull request references in commits listed newest first.

    Returns one reference per pull request number, oldest first. When a
    number shows up both in a merge commit and in a squash-style subject, the
    merge commit wins.
    """
    references: dict[int, PullRequestReference] = {}
    for commit in reversed(commits):
        merge_match = MERGE_PULL_REQUEST_PATTERN.match(commit.subject)
        if merge_match:
            number = int(merge_match.group(1))
            existing = references.get(number)
            if existing is None or existing.squashed:
                references[number] = PullRequestReference(number=number, sha=commit.sha, squashed=False)
            continue

        squash_match = SQUASH_PULL_REQUEST_PATTERN.search(commit.subject)
        if squash_match:
            number = int(squash_match.group(1))
            if number not in references:
                references[number] = PullRequestReference(number=number, sha=commit.sha, squashed=True)
    return list(references.values())


class GitHubPullRequestProvider(PullRequestProviderBase):
    """Correlates merge commits in the local history with pull requests on GitHub."""

    def __init__(self, repository: RepositoryProviderBase, client: GitHubClient) -> None:
        """Initialize with the repository to read merge commits from and a GitHub client."""
        self.repository = repository
        self.client = client
        self._adapters: dict[tuple[str, str], GitHubKitAdapter] = {}

    def _get_adapter(self, owner: str, repo: str) -> GitHubKitAdapter:
        """Get the adapter for a repository, creating it on first use."""
        key = (owner, repo)
        if key not in self._adapters:
            self._adapters[key] = GitHubKitAdapter(self.client, owner, repo)
        return self._adapters[key]

    async def merged_pull_requests(self, owner: str, repo: str, from_revision: str, to_revision: str) -> list[PullRequest]:
        """List the pull requests merged in (from_revision, to_revision], ordered by merge time.

        Pull requests that cannot be fetched are logged and left out. A
        squash-style reference is only trusted when GitHub reports the same
        merge commit, since any commit subject can end in "(#123)".
        """
        if not owner or not repo:
            logger.warning("Repository owner and name are unknown, skipping pull request lookup", owner=owner, repo=repo)
            return []

        try:
            commits = self.repository.merge_commits(from_revision, to_revision)
        except GitCommandError as exc:
            logger.error("Failed to list commits", from_revision=from_revision, to_revision=to_revision, error=str(exc))
            return []

        references = find_pull_request_references(commits)
        logger.debug(
            f"Found {len(references)} pull request references",
            from_revision=from_revision,
            to_revision=to_revision,
            numbers=[reference.number for reference in references],
        )

        adapter = self._get_adapter(owner, repo)
        pull_requests: list[PullRequest] = []
        for reference in references:
            try:
                github_pull_request = await adapter.get_pull_request(reference.number)
            except GitHubException as exc:
                logger.warning("Failed to fetch pull request", pr_number=reference.number, error=str(exc))
                continue

            if github_pull_request.merged_at is None:
                logger.debug("Skipping unmerged pull request", pr_number=reference.number)
                continue
            if reference.squashed and github_pull_request.merge_commit_sha != reference.sha:
                logger.debug(
                    "Skipping pull request merged through a different commit",
                    pr_number=reference.number,
                    sha=reference.sha,
                    merge_commit_sha=github_pull_request.merge_commit_sha,
                )
                continue
            pull_requests.append(PullRequest.from_github(github_pull_request))

        # Stable sort keeps history order for pull requests merged in the same second.
        return sorted(pull_requests, key=lambda pull_request: pull_request.merged_at)  # type: ignore[arg-type,return-value]
