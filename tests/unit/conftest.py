"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

from tests.utils import ChangelogRepository, commit, init_repository, merge_branch, run_git


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def changelog_repository(tmp_path: Path) -> ChangelogRepository:
    """Build a repository with this history (oldest first).

    - Initial commit
    - Merge pull request #1 (tagged v0.1.0, v0.1.0-rc.1 and nightly)
    - Add widget (#2), a squash merge (tagged v0.2.0 with an annotated tag)
    - Update docs
    - Merge pull request #3 (untagged tip)
    """
    path = init_repository(tmp_path / "widget")
    shas: dict[str, str] = {}
    shas["initial"] = commit(path, "Initial commit", "2024-01-01T00:00:00+00:00")
    shas["merge_1"] = merge_branch(
        path, "feature-one", "Merge pull request #1 from alice/feature-one", "2024-01-02T00:00:00+00:00", "2024-01-03T00:00:00+00:00"
    )
    run_git(path, "tag", "v0.1.0-rc.1")
    run_git(path, "tag", "v0.1.0")
    run_git(path, "tag", "nightly")
    shas["squash_2"] = commit(path, "Add widget (#2)", "2024-01-10T00:00:00+00:00")
    run_git(path, "tag", "-a", "v0.2.0", "-m", "Release 0.2.0", date="2024-01-10T00:00:00+00:00")
    shas["docs"] = commit(path, "Update docs", "2024-01-15T00:00:00+00:00")
    shas["merge_3"] = merge_branch(
        path, "fix-typo", "Merge pull request #3 from bob/fix-typo", "2024-01-15T12:00:00+00:00", "2024-01-16T00:00:00+00:00"
    )
    return ChangelogRepository(path=path, shas=shas)
