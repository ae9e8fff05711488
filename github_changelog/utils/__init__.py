"""Utility modules for shared functionality."""

from .constants import (
    MERGE_PULL_REQUEST_PATTERN,
    REMOTE_URL_PATTERN,
    SQUASH_PULL_REQUEST_PATTERN,
    VERSION_TAG_PATTERN,
)
from .retry import retry_on_rate_limit

__all__ = [
    "MERGE_PULL_REQUEST_PATTERN",
    "SQUASH_PULL_REQUEST_PATTERN",
    "VERSION_TAG_PATTERN",
    "REMOTE_URL_PATTERN",
    "retry_on_rate_limit",
]
