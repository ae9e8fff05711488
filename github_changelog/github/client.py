"""Sets up the githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


async def get_github_token_client(github_token: str, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns a GitHub client authenticated with a token."""
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)


async def get_github_client(github_token: str | None, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client, authenticated when a token is available.

    Without a token the client makes anonymous requests, which is enough for
    public repositories within GitHub's unauthenticated rate limit.
    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    if github_token:
        return await get_github_token_client(github_token, github_api_url)
    return GitHub(auth=UnauthAuthStrategy(), base_url=github_api_url, http_cache=False)
