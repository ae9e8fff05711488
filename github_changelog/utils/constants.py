"""Shared constants used across the application."""

import re

# Changelog Constants
# -------------------

# Regex Patterns
MERGE_PULL_REQUEST_PATTERN = re.compile(r"^Merge pull request #(\d+) from")
"""Pattern to match the subject of a GitHub merge commit (e.g., Merge pull request #12 from owner/branch)."""

SQUASH_PULL_REQUEST_PATTERN = re.compile(r"\(#(\d+)\)\s*$")
"""Pattern to match the subject of a squash or rebase merge (e.g., Fix bug (#12))."""

VERSION_TAG_PATTERN = re.compile(r"^[vV]?\d+\.\d+\.\d+")
"""Pattern a tag name must start with to be treated as a version tag (e.g., v1.2.3)."""

REMOTE_URL_PATTERN = re.compile(r"^(?:[a-z+]+://)?(?:[^@/]+@)?[^/:]+(?::\d+)?[:/](?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")
"""Pattern to extract owner and repository from an https, ssh or scp-like git remote URL."""

TAG_DECORATION_PREFIX = "tag: "
"""Prefix git uses for tag names in %D ref decorations."""

# Default Settings
DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL."""

DEFAULT_GITHUB_SERVER_URL = "https://github.com"
"""Default GitHub web URL used for links in rendered changelogs."""

DEFAULT_REMOTE = "origin"
"""Default git remote used to determine the repository owner and name."""

DEFAULT_GIT_PATH = "git"
"""Default git executable."""

# Exit Codes
# ----------

EXIT_CODE_OK = 0
EXIT_CODE_PARSE_FLAG_ERROR = 1
EXIT_CODE_ERROR = 2
