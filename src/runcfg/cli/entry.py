"""Console entry point: parse a runner command line and show the result."""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer
from typer.main import get_command

from runcfg._meta import __version__, logger
from runcfg.cli.exit_codes import EXIT_NOINPUT, EXIT_OK, EXIT_USAGE
from runcfg.core import HELP_SWITCHES, LOG_FORMAT, CommandLine, OutputFormat
from runcfg.errors import ArgumentValidationError, ErrorKind
from runcfg.io import color_allowed, write_output
from runcfg.render import format_usage, render

# Only long "--" options belong to this tool; every other token, including
# runner switches such as -maxthreads, is forwarded to the parser untouched.
CONTEXT_SETTINGS = {
    "help_option_names": ["--help"],
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}


def _configure_runtime(*, quiet: bool, verbose: bool, debug: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if debug:
        logger.debug("debug mode active")


def _exit_code_for(exc: ArgumentValidationError) -> int:
    if exc.kind is ErrorKind.ASSEMBLY_OR_CONFIG_NOT_FOUND:
        return EXIT_NOINPUT
    return EXIT_USAGE


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Parse a test runner command line into a validated project configuration.",
        add_completion=False,
    )

    @app.command(context_settings=CONTEXT_SETTINGS)
    def parse(
        ctx: typer.Context,
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit"),
        ] = False,
        fmt: Annotated[
            OutputFormat,
            typer.Option("--format", help="Output format for the parsed project.", case_sensitive=False),
        ] = OutputFormat.HUMAN,
        output: Annotated[
            Path | None,
            typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
        ] = None,
        quiet: Annotated[bool, typer.Option("--quiet", help="Suppress INFO logs, emit only errors")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", help="Emit diagnostic logging")] = False,
        debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks for errors")] = False,
    ) -> None:
        """Parse ASSEMBLY [CONFIG] [SWITCHES]... and print the resulting project."""
        if version:
            typer.echo(f"runcfg {__version__}")
            raise typer.Exit(code=EXIT_OK)

        _configure_runtime(quiet=quiet, verbose=verbose, debug=debug)

        arguments: list[str] = list(ctx.args)
        command_line = CommandLine(arguments)
        use_color = color_allowed(output)

        if not arguments or arguments[0].lower() in HELP_SWITCHES:
            write_output(format_usage(command_line.switches, color=use_color), output)
            raise typer.Exit(code=EXIT_OK)

        try:
            project = command_line.parse()
        except ArgumentValidationError as exc:
            typer.echo(f"ERROR: {exc}", err=True)
            if debug:
                raise
            raise typer.Exit(code=_exit_code_for(exc)) from exc

        logger.debug("parsed %d assembly(ies), reporter %s", len(project.assemblies), project.reporter.switch_name)
        write_output(render(project, fmt, color=use_color), output)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
