"""Contains utility functions for GitHub interactions."""

from github_changelog.utils.constants import REMOTE_URL_PATTERN


def split_remote_url(remote_url: str | None) -> tuple[str, str]:
    """Splits a git remote URL into the owner and repository it points at."""
    if remote_url is None:
        raise ValueError("A remote URL is required to determine the repository owner and name.")
    match = REMOTE_URL_PATTERN.match(remote_url.strip())
    if match is None:
        raise ValueError(f"Remote URL '{remote_url}' is not in a recognized 'host/owner/repo' format.")
    return match.group("owner"), match.group("repo")


def strip_trailing_slash(url: str) -> str:
    """Strips trailing slashes so URLs can be joined with '/'."""
    return url.rstrip("/")
