"""Base ABC for repository providers."""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import MergeCommit


class RepositoryProviderBase(ABC):
    """Base ABC for providers of revision history."""

    @abstractmethod
    def list_version_tags(self) -> list[str]:
        """List version tags, newest first."""
        pass

    @abstractmethod
    def latest_semver_tag(self) -> str:
        """Get the highest semantic version tag, or an empty string if there is none."""
        pass

    @abstractmethod
    def commit_timestamp(self, revision: str) -> datetime:
        """Get the commit timestamp of a revision."""
        pass

    @abstractmethod
    def remote_owner_and_repo(self) -> tuple[str, str]:
        """Get the owner and repository name of the configured remote."""
        pass

    @abstractmethod
    def merge_commits(self, from_revision: str, to_revision: str) -> list[MergeCommit]:
        """List the commits in the range (from_revision, to_revision], newest first."""
        pass
