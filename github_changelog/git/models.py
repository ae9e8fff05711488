"""Data models for revision history."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MergeCommit:
    """A commit that may carry a pull request reference in its subject."""

    sha: str
    subject: str
