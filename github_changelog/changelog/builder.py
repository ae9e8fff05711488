"""Builds a single changelog section for a revision range."""

from datetime import datetime

import structlog

from github_changelog.git.abc import RepositoryProviderBase
from github_changelog.git.exceptions import GitCommandError
from github_changelog.github.abc import PullRequestProviderBase

from .models import Section

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SectionBuilder:
    """Combines a repository and a pull request provider into changelog sections.

    Resolution failures never abort a section. A missing remote leaves the
    owner and repository empty, and an unresolvable ``to`` revision (including
    the empty tip) leaves ``changed_at`` as None. Both are logged so a
    partial section is still produced.
    """

    def __init__(self, repository: RepositoryProviderBase, pull_request_provider: PullRequestProviderBase) -> None:
        """Initialize with the providers sections are built from."""
        self.repository = repository
        self.pull_request_provider = pull_request_provider
        self._owner_and_repo: tuple[str, str] | None = None

    def owner_and_repo(self) -> tuple[str, str]:
        """Get the owner and repository of the remote, resolved once per builder."""
        if self._owner_and_repo is None:
            try:
                self._owner_and_repo = self.repository.remote_owner_and_repo()
            except GitCommandError as exc:
                logger.error("Failed to determine repository owner and name", error=str(exc))
                self._owner_and_repo = ("", "")
        return self._owner_and_repo

    def changed_at(self, revision: str) -> datetime | None:
        """Get the commit timestamp of a revision, or None if it cannot be resolved."""
        try:
            return self.repository.commit_timestamp(revision)
        except GitCommandError as exc:
            if revision:
                logger.warning("Failed to resolve commit timestamp", revision=revision, error=str(exc))
            else:
                logger.debug("No revision to resolve a commit timestamp for, leaving it unset")
            return None

    async def build_section(self, from_revision: str, to_revision: str) -> Section:
        """Build the section for the pull requests merged in (from_revision, to_revision]."""
        owner, repo = self.owner_and_repo()
        pull_requests = await self.pull_request_provider.merged_pull_requests(owner, repo, from_revision, to_revision)
        section = Section(
            pull_requests=pull_requests,
            from_revision=from_revision,
            to_revision=to_revision,
            changed_at=self.changed_at(to_revision),
            owner=owner,
            repo=repo,
        )
        logger.debug(
            "Built changelog section",
            from_revision=from_revision,
            to_revision=to_revision,
            pull_requests=len(section.pull_requests),
        )
        return section
