"""Contains exceptions raised when validating application configuration."""


class ConfigurationError(Exception):
    """Raised when a configuration value parses but cannot be used."""

    def __init__(self, name: str, cli_name: str, message: str) -> None:
        """Initializes the exception with the offending element and the reason it was rejected."""
        super().__init__(f"Invalid configuration element {name} (command line option {cli_name}): {message}")
        self.name = name
        self.cli_name = cli_name
