"""Configuration models for the changelog command."""

from dataclasses import dataclass
from pathlib import Path

from github_changelog.changelog.models import OutputFormat
from github_changelog.utils.constants import DEFAULT_GIT_PATH, DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_SERVER_URL, DEFAULT_REMOTE


@dataclass
class ChangelogConfig:
    """Configuration for a changelog run, built from the command line options."""

    repo_path: Path = Path(".")
    git_path: str = DEFAULT_GIT_PATH
    from_revision: str = ""
    to_revision: str = ""
    github_token: str | None = None
    verbose: bool = False
    remote: str = DEFAULT_REMOTE
    output_format: OutputFormat = OutputFormat.JSON
    all_sections: bool = False
    next_version: str = ""
    github_api_url: str = DEFAULT_GITHUB_API_URL
    github_server_url: str = DEFAULT_GITHUB_SERVER_URL
