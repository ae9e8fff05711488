"""Orchestrates a changelog run from configuration to rendered output."""

import structlog

from github_changelog.configuration.models import ChangelogConfig
from github_changelog.git.repository import GitRepository
from github_changelog.github.client import get_github_client
from github_changelog.github.pull_requests import GitHubPullRequestProvider

from .assembler import ChangelogAssembler
from .builder import SectionBuilder
from .exceptions import RenderError
from .models import Changelog, Section
from .renderer import render

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def build_changelog(config: ChangelogConfig, assembler: ChangelogAssembler) -> Section | Changelog:
    """Build every section in all-sections mode, or the single configured range otherwise."""
    if config.all_sections:
        return await assembler.build_all(next_version=config.next_version)
    return await assembler.build_range(
        from_revision=config.from_revision,
        to_revision=config.to_revision,
        next_version=config.next_version,
    )


async def run_changelog_workflow(config: ChangelogConfig) -> str | None:
    """Run the changelog workflow and return the rendered output.

    Returns None when the output could not be rendered; the failure has
    already been logged.
    """
    repository = GitRepository(repo_path=config.repo_path, git_path=config.git_path, remote=config.remote)
    client = await get_github_client(config.github_token, config.github_api_url)
    pull_request_provider = GitHubPullRequestProvider(repository, client)
    assembler = ChangelogAssembler(repository, SectionBuilder(repository, pull_request_provider))

    logger.info(
        "Generating changelog",
        repo_path=str(config.repo_path),
        all_sections=config.all_sections,
        from_revision=config.from_revision,
        to_revision=config.to_revision,
    )
    result = await build_changelog(config, assembler)

    try:
        return render(result, config.output_format, config.github_server_url)
    except RenderError as exc:
        logger.error("Failed to render changelog", output_format=config.output_format.value, error=str(exc))
        return None
