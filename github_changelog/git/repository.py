"""Repository provider backed by the git command line."""

import subprocess
from datetime import datetime
from pathlib import Path

import structlog
from packaging.version import InvalidVersion, Version

from github_changelog.utils.constants import DEFAULT_GIT_PATH, DEFAULT_REMOTE, TAG_DECORATION_PREFIX, VERSION_TAG_PATTERN
from github_changelog.utils.github import split_remote_url

from .abc import RepositoryProviderBase
from .exceptions import GitCommandError, RemoteResolutionError, RevisionResolutionError
from .models import MergeCommit

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_version_tag(tag: str) -> Version | None:
    """Parse a tag name as a semantic version, returning None for non-version tags."""
    if not VERSION_TAG_PATTERN.match(tag):
        return None
    try:
        return Version(tag.lstrip("vV"))
    except InvalidVersion:
        return None


def parse_tag_decorations(decorations: str) -> list[str]:
    """Extract tag names from a single line of git %D ref decorations."""
    tags: list[str] = []
    for decoration in decorations.split(", "):
        decoration = decoration.strip()
        if decoration.startswith(TAG_DECORATION_PREFIX):
            tags.append(decoration[len(TAG_DECORATION_PREFIX) :])
    return tags


def revision_range(from_revision: str, to_revision: str) -> str:
    """Build a git revision range where empty boundaries mean the root and the tip."""
    to_ref = to_revision or "HEAD"
    if not from_revision:
        return to_ref
    return f"{from_revision}..{to_ref}"


class GitRepository(RepositoryProviderBase):
    """Reads tags, commits and remotes from a local git repository."""

    def __init__(self, repo_path: Path | str = ".", git_path: str = DEFAULT_GIT_PATH, remote: str = DEFAULT_REMOTE) -> None:
        """Initialize with the repository location, the git executable and the remote to inspect."""
        self.repo_path = Path(repo_path)
        self.git_path = git_path
        self.remote = remote

    def _run(self, *args: str) -> str:
        """Run a git command inside the repository and return its standard output."""
        command = [self.git_path, "-C", str(self.repo_path), *args]
        logger.debug("Running git command", command=" ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=True)
        except FileNotFoundError as exc:
            raise GitCommandError(command, None, f"git executable not found: {self.git_path}") from exc
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(command, exc.returncode, exc.stderr or "") from exc
        return result.stdout

    def list_version_tags(self) -> list[str]:
        """List version tags ordered by the date of the tagged commit, newest first.

        When several version tags point at the same commit only the highest
        version is kept, so every tag in the result is a distinct boundary.
        """
        output = self._run("log", "--no-walk", "--tags", "--format=%D")
        tags: list[str] = []
        for line in output.splitlines():
            versions: list[tuple[Version, str]] = []
            for tag in parse_tag_decorations(line):
                version = parse_version_tag(tag)
                if version is not None:
                    versions.append((version, tag))
            if versions:
                tags.append(max(versions)[1])
        logger.debug("Found version tags", tags=tags)
        return tags

    def latest_semver_tag(self) -> str:
        """Get the highest semantic version tag, or an empty string if there is none."""
        tags = self.list_version_tags()
        if not tags:
            return ""
        return max(tags, key=lambda tag: parse_version_tag(tag) or Version("0"))

    def commit_timestamp(self, revision: str) -> datetime:
        """Get the committer timestamp of a revision."""
        if not revision:
            raise RevisionResolutionError([], None, "no revision given to resolve a commit timestamp for")
        try:
            output = self._run("show", "-s", "--format=%cI", "--end-of-options", f"{revision}^{{commit}}")
        except GitCommandError as exc:
            raise RevisionResolutionError(exc.command, exc.returncode, exc.stderr) from exc
        return datetime.fromisoformat(output.strip())

    def remote_owner_and_repo(self) -> tuple[str, str]:
        """Get the owner and repository name the configured remote points at."""
        try:
            remote_url = self._run("remote", "get-url", self.remote).strip()
        except GitCommandError as exc:
            raise RemoteResolutionError(exc.command, exc.returncode, exc.stderr) from exc
        try:
            return split_remote_url(remote_url)
        except ValueError as exc:
            raise RemoteResolutionError(["remote", "get-url", self.remote], 0, str(exc)) from exc

    def merge_commits(self, from_revision: str, to_revision: str) -> list[MergeCommit]:
        """List the commits in the range (from_revision, to_revision], newest first."""
        output = self._run("log", "--format=%H%x09%s", "--end-of-options", revision_range(from_revision, to_revision))
        commits: list[MergeCommit] = []
        for line in output.splitlines():
            if "\t" not in line:
                continue
            sha, subject = line.split("\t", 1)
            commits.append(MergeCommit(sha=sha.strip(), subject=subject.strip()))
        return commits
