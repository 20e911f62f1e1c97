from covgate.cli.errors import EXIT_GENERIC, EXIT_OK
from covgate.cli.root import cli, create_app, main

__all__ = ["EXIT_GENERIC", "EXIT_OK", "cli", "create_app", "main"]
