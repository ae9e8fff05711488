"""Assembles changelog sections for a single range or for every version tag."""

import structlog

from github_changelog.git.abc import RepositoryProviderBase
from github_changelog.git.exceptions import GitCommandError

from .builder import SectionBuilder
from .models import Changelog, Section

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def boundary_pairs(version_tags: list[str]) -> list[tuple[str, str]]:
    """Pair version tags (newest first) into (from, to) revision ranges, newest first.

    The empty string stands for the current tip as the newest ``to`` and for
    the beginning of history as the oldest ``from``. Tags [v3, v2, v1] give
    (v3, ""), (v2, v3), (v1, v2) and ("", v1). No tags give a single
    ("", "") range covering the whole history.
    """
    from_revisions = [*version_tags, ""]
    to_revisions = ["", *version_tags]
    return list(zip(from_revisions, to_revisions))


def apply_next_version(section: Section, next_version: str) -> Section:
    """Label an unreleased section with the upcoming version."""
    if section.to_revision or not next_version:
        return section
    return section.model_copy(update={"to_revision": next_version})


class ChangelogAssembler:
    """Drives a SectionBuilder over one revision range or over all version tags."""

    def __init__(self, repository: RepositoryProviderBase, builder: SectionBuilder) -> None:
        """Initialize with the repository to read tags from and the section builder."""
        self.repository = repository
        self.builder = builder

    def _latest_semver_tag(self) -> str:
        try:
            return self.repository.latest_semver_tag()
        except GitCommandError as exc:
            logger.error("Failed to determine the latest version tag", error=str(exc))
            return ""

    def _version_tags(self) -> list[str]:
        try:
            return self.repository.list_version_tags()
        except GitCommandError as exc:
            logger.error("Failed to list version tags", error=str(exc))
            return []

    async def build_range(self, from_revision: str = "", to_revision: str = "", next_version: str = "") -> Section:
        """Build the section for one revision range.

        Without either boundary the range starts at the latest semantic
        version tag and ends at the current tip.
        """
        if not from_revision and not to_revision:
            from_revision = self._latest_semver_tag()
            logger.debug("Defaulting range start to the latest version tag", from_revision=from_revision)
        section = await self.builder.build_section(from_revision, to_revision)
        return apply_next_version(section, next_version)

    async def build_all(self, next_version: str = "") -> Changelog:
        """Build one section per version boundary, newest first."""
        version_tags = self._version_tags()
        logger.info(f"Building changelog for {len(version_tags)} version tags")

        sections: list[Section] = []
        for index, (from_revision, to_revision) in enumerate(boundary_pairs(version_tags)):
            section = await self.builder.build_section(from_revision, to_revision)
            if index == 0:
                section = apply_next_version(section, next_version)
            sections.append(section)
        return Changelog(sections=sections)
