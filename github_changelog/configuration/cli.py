"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import contextlib
import importlib
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_changelog.changelog.driver import run_changelog_workflow
from github_changelog.changelog.models import OutputFormat
from github_changelog.configuration.exceptions import ConfigurationError
from github_changelog.configuration.models import ChangelogConfig
from github_changelog.utils.constants import (
    DEFAULT_GIT_PATH,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_SERVER_URL,
    DEFAULT_REMOTE,
    EXIT_CODE_ERROR,
    EXIT_CODE_OK,
    EXIT_CODE_PARSE_FLAG_ERROR,
)
from github_changelog.utils.log_config import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

# Newer typer releases ship their own copy of click, so usage errors are taken
# from the module that defines the exceptions typer raises.
UsageError = importlib.import_module(typer.BadParameter.__module__).UsageError

typer_app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


@typer_app.command(name="changelog")
def changelog_cli(
    repo_path: Annotated[Path, Option("--repo", "-r", help="git repository path")] = Path("."),
    git_path: Annotated[str, Option("--git", "-g", help="git path")] = DEFAULT_GIT_PATH,
    from_revision: Annotated[str, Option("--from", "-f", help="git commit revision range start from")] = "",
    to_revision: Annotated[str, Option("--to", "-t", help="git commit revision range end to")] = "",
    github_token: Annotated[str | None, Option("--token", envvar="GITHUB_TOKEN", help="GitHub token")] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", envvar="DEBUG", help="Log git commands and API calls to standard error.")] = False,
    remote: Annotated[str, Option("--remote", help="default remote name")] = DEFAULT_REMOTE,
    output_format: Annotated[OutputFormat, Option("--format", "-F", case_sensitive=False, help="json or markdown")] = OutputFormat.JSON,
    all_sections: Annotated[bool, Option("--all", "-A", help="output all changes")] = False,
    next_version: Annotated[str, Option("--next-version", "-N", help="Label for the unreleased section.")] = "",
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    github_server_url: Annotated[str, Option(envvar="GITHUB_SERVER_URL", help="GitHub URL used for links in markdown output.")] = DEFAULT_GITHUB_SERVER_URL,
) -> None:
    """Generate a changelog from the pull requests merged between git revisions."""
    config = ChangelogConfig(
        repo_path=repo_path,
        git_path=git_path,
        from_revision=from_revision,
        to_revision=to_revision,
        github_token=github_token,
        verbose=verbose,
        remote=remote,
        output_format=output_format,
        all_sections=all_sections,
        next_version=next_version,
        github_api_url=github_api_url,
        github_server_url=github_server_url,
    )
    configure_logging(config.verbose)
    if not config.repo_path.is_dir():
        raise ConfigurationError("repository path", "--repo", f"{config.repo_path.absolute()} is not a directory")

    output = asyncio.run(run_changelog_workflow(config))
    if output is not None:
        typer.echo(output)


def main(args: list[str] | None = None) -> int:
    """Run the CLI and map its outcome to a process exit code."""
    try:
        result = typer_app(args=args, prog_name="github-changelog", standalone_mode=False)
    except UsageError as exc:
        if exc.ctx is not None:
            # Rich help is printed rather than returned, so send it to stderr as well.
            with contextlib.redirect_stdout(sys.stderr):
                help_text = exc.ctx.get_help()
            if help_text:
                typer.echo(help_text, err=True)
        typer.echo(f"Error: {exc.format_message()}", err=True)
        return EXIT_CODE_PARSE_FLAG_ERROR
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        return EXIT_CODE_PARSE_FLAG_ERROR
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return EXIT_CODE_ERROR
    except Exception:
        logger.exception("Changelog generation failed")
        return EXIT_CODE_ERROR
    # Only --help exits early, and a help request counts as an argument error.
    if isinstance(result, int):
        return EXIT_CODE_PARSE_FLAG_ERROR
    return EXIT_CODE_OK


if __name__ == "__main__":
    sys.exit(main())
