from runcfg.cli.entry import cli, create_app, main
from runcfg.cli.exit_codes import EXIT_GENERIC, EXIT_NOINPUT, EXIT_OK, EXIT_USAGE

__all__ = ["EXIT_GENERIC", "EXIT_NOINPUT", "EXIT_OK", "EXIT_USAGE", "cli", "create_app", "main"]
