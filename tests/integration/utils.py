"""Utility functions for integration tests."""

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_cli_with_starting_args() -> list[str]:
    """Get the command that runs the changelog CLI with the current interpreter."""
    return [sys.executable, "-m", "github_changelog.configuration.cli"]


def run_cli(args: list[str], token: str | None = None) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.
        token: GitHub token to expose as GITHUB_TOKEN, or None to run unauthenticated.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    complete_command = get_cli_with_starting_args() + args
    env = {key: value for key, value in os.environ.items() if key not in ("GITHUB_TOKEN", "DEBUG")}
    if token is not None:
        env["GITHUB_TOKEN"] = token
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(complete_command, capture_output=True, text=True, cwd=PROJECT_ROOT, env=env)
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result
