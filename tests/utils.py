"""Helpers for building test repositories and pull requests."""

import os
import shutil
import subprocess
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from github_changelog.changelog.models import PullRequest, PullRequestUser

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")

GIT_ENVIRONMENT = {
    "GIT_AUTHOR_NAME": "Changelog Tests",
    "GIT_AUTHOR_EMAIL": "changelog-tests@example.com",
    "GIT_COMMITTER_NAME": "Changelog Tests",
    "GIT_COMMITTER_EMAIL": "changelog-tests@example.com",
    "GIT_CONFIG_GLOBAL": os.devnull,
    "GIT_CONFIG_NOSYSTEM": "1",
}


@dataclass
class ChangelogRepository:
    """A local repository with known tags, merges and commit SHAs."""

    path: Path
    shas: dict[str, str]


def run_git(repo_path: Path, *args: str, date: str | None = None) -> str:
    """Run a git command in a test repository with a fixed identity and optional commit date."""
    env = {**os.environ, **GIT_ENVIRONMENT}
    if date is not None:
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
    result = subprocess.run(["git", "-C", str(repo_path), *args], env=env, capture_output=True, text=True, check=True)
    return result.stdout


def init_repository(repo_path: Path, remote_url: str | None = "https://github.com/acme/widget.git") -> Path:
    """Initialize an empty repository on a 'main' branch."""
    repo_path.mkdir(parents=True, exist_ok=True)
    run_git(repo_path, "init", "-q")
    run_git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    if remote_url is not None:
        run_git(repo_path, "remote", "add", "origin", remote_url)
    return repo_path


def commit(repo_path: Path, subject: str, date: str) -> str:
    """Create an empty commit and return its SHA."""
    run_git(repo_path, "commit", "-q", "--allow-empty", "-m", subject, date=date)
    return run_git(repo_path, "rev-parse", "HEAD").strip()


def merge_branch(repo_path: Path, branch: str, subject: str, branch_commit_date: str, merge_date: str) -> str:
    """Create a branch with one commit and merge it into main with a merge commit, returning the merge SHA."""
    run_git(repo_path, "checkout", "-q", "-b", branch)
    commit(repo_path, f"Work on {branch}", branch_commit_date)
    run_git(repo_path, "checkout", "-q", "main")
    run_git(repo_path, "merge", "-q", "--no-ff", "--no-edit", branch, "-m", subject, date=merge_date)
    return run_git(repo_path, "rev-parse", "HEAD").strip()


def make_pull_request(number: int, title: str = "", login: str = "alice", merged_at: datetime | None = None) -> PullRequest:
    """Build a merged pull request for tests."""
    return PullRequest(
        number=number,
        title=title or f"Pull request {number}",
        user=PullRequestUser(login=login, html_url=f"https://github.com/{login}"),
        html_url=f"https://github.com/acme/widget/pull/{number}",
        merge_commit_sha=f"{number:040x}",
        merged_at=merged_at or datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(hours=number),
    )
