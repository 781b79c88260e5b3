import sys
from pathlib import Path

import click.utils as click_utils


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        click_utils.echo(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")


def color_allowed(destination: Path | None) -> bool:
    """Return whether ANSI colour may be used for *destination*."""
    if destination not in {None, Path("-")}:
        return False
    stdout = sys.stdout
    is_tty = bool(getattr(stdout, "isatty", lambda: False)())
    return is_tty and not click_utils.should_strip_ansi(stdout)
