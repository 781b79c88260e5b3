from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from runcfg.core.types import SwitchKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from runcfg.core.switches import SwitchSpec

_SECTIONS: tuple[tuple[str, tuple[SwitchKind, ...]], ...] = (
    ("Options", (SwitchKind.FLAG, SwitchKind.SCALAR)),
    ("Filtering (optional, choose one or more)", (SwitchKind.COLLECTION, SwitchKind.TRAIT)),
    ("Reporters (optional, choose only one)", (SwitchKind.REPORTER,)),
    ("Result formats (optional, choose one or more)", (SwitchKind.TRANSFORM,)),
)


def format_usage(switches: Mapping[str, SwitchSpec], *, prog: str = "runcfg", color: bool = False) -> str:
    """Render the switch vocabulary, grouped by kind, in table order."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=100)
    console.print(
        f"usage: {prog} <assemblyFile> [configFile] [options] [reporter] [resultFormat filename [...]]",
        markup=False,
    )
    console.print()
    console.print("Valid options for all files:", markup=False)

    for title, kinds in _SECTIONS:
        specs = [spec for spec in switches.values() if spec.kind in kinds]
        if not specs:
            continue
        table = Table(title=title, title_justify="left", box=box.SIMPLE, show_header=False, expand=True)
        table.add_column("Switch", no_wrap=True)
        table.add_column("Description", overflow="fold")
        for spec in specs:
            name = escape(f"{spec.switch} {spec.metavar}".rstrip())
            table.add_row(name, escape(spec.description))
        console.print(table)

    return buf.getvalue().rstrip()


__all__ = ["format_usage"]
