"""Contains exceptions raised when querying a local git repository."""


class GitCommandError(Exception):
    """Raised when a git command cannot be run or exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int | None, stderr: str) -> None:
        """Initializes the exception with the failed command and its error output."""
        super().__init__(f"git command failed ({returncode}): {' '.join(command)}: {stderr.strip()}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class RevisionResolutionError(GitCommandError):
    """Raised when a revision cannot be resolved to a commit."""

    pass


class RemoteResolutionError(GitCommandError):
    """Raised when the owner and repository cannot be determined from a remote."""

    pass
