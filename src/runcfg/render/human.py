from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from runcfg.core.model import AssemblyConfig, Filters, Project


def _flag(value: bool | None) -> str:
    if value is None:
        return "[dim]unset[/dim]"
    return "[green]on[/green]" if value else "[red]off[/red]"


def _scalar(value: object) -> str:
    if value is None:
        return "[dim]default[/dim]"
    if value == "":
        return "[italic]invariant[/italic]"
    return escape(str(value))


def _traits(traits: Mapping[str, tuple[str, ...]]) -> str:
    return escape(", ".join(f"{name}={value}" for name, values in traits.items() for value in values))


def _filter_rows(filters: Filters) -> list[tuple[str, str]]:
    rows = [
        ("-namespace", escape(", ".join(filters.included_namespaces))),
        ("-nonamespace", escape(", ".join(filters.excluded_namespaces))),
        ("-class", escape(", ".join(filters.included_classes))),
        ("-noclass", escape(", ".join(filters.excluded_classes))),
        ("-method", escape(", ".join(filters.included_methods))),
        ("-nomethod", escape(", ".join(filters.excluded_methods))),
        ("-trait", _traits(filters.included_traits)),
        ("-notrait", _traits(filters.excluded_traits)),
    ]
    return [(name, text) for name, text in rows if text]


def _assembly_table(assembly: AssemblyConfig) -> Table:
    cfg = assembly.configuration
    table = Table(
        title=escape(str(assembly.assembly_file)),
        box=box.SIMPLE_HEAVY,
        header_style="bold",
        expand=True,
    )
    table.add_column("Setting")
    table.add_column("Value", overflow="fold")

    config_file = escape(str(assembly.config_file)) if assembly.config_file else "[dim]none[/dim]"
    table.add_row("config file", config_file)
    table.add_row("diagnostics", _flag(cfg.diagnostic_messages))
    table.add_row("internal diagnostics", _flag(cfg.internal_diagnostic_messages))
    table.add_row("fail skips", _flag(cfg.fail_skips))
    table.add_row("pre-enumerate theories", _flag(cfg.pre_enumerate_theories))
    table.add_row("stop on fail", _flag(cfg.stop_on_fail))
    table.add_row("culture", _scalar(cfg.culture))
    threads = "unlimited" if cfg.max_parallel_threads == -1 else cfg.max_parallel_threads
    table.add_row("max threads", _scalar(threads))
    table.add_row("parallelize collections", _flag(cfg.parallelize_test_collections))

    filter_rows = _filter_rows(cfg.filters)
    if filter_rows:
        table.add_section()
        for name, text in filter_rows:
            table.add_row(name, text)
    return table


def format_human(project: Project, *, color: bool = True) -> str:
    """Render the parsed project as Rich tables."""
    cfg = project.configuration
    run = Table(title="Run", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)
    run.add_column("Setting")
    run.add_column("Value", overflow="fold")
    reporter = getattr(project.reporter, "name", None) or str(project.reporter.switch_name)
    run.add_row("reporter", escape(reporter))
    for label, value in (
        ("debug", cfg.debug),
        ("ignore failures", cfg.ignore_failures),
        ("no auto reporters", cfg.no_auto_reporters),
        ("no color", cfg.no_color),
        ("no logo", cfg.no_logo),
        ("pause", cfg.pause),
        ("wait", cfg.wait),
    ):
        run.add_row(label, _flag(value))
    if cfg.output:
        run.add_section()
        for transform_id, filename in cfg.output.items():
            run.add_row(f"-{transform_id}", escape(filename))

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=100)
    console.print(run)
    for assembly in project.assemblies:
        console.print(_assembly_table(assembly))
    return buf.getvalue().rstrip()


__all__ = ["format_human"]
