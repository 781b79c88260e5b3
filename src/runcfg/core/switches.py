"""The switch vocabulary: switch name -> how its value is handled."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Literal

from runcfg._meta import logger
from runcfg.core.config import SWITCH_PREFIX
from runcfg.core.types import SwitchKind
from runcfg.core.validators import parse_culture, parse_max_threads, parse_parallel

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from runcfg.core.reporters import Reporter
    from runcfg.core.transforms import Transform

Scope = Literal["project", "assembly"]


@dataclass(frozen=True, slots=True)
class SwitchSpec:
    """One entry of the switch table.

    ``target`` names the configuration field (flags and scalars), the
    filter collection (collections and traits) or the transform id.
    """

    name: str
    kind: SwitchKind
    description: str = ""
    scope: Scope = "assembly"
    target: str = ""
    parse: Callable[[str], object] | None = None
    reporter: Reporter | None = None
    metavar: str = ""

    @property
    def switch(self) -> str:
        return f"{SWITCH_PREFIX}{self.name}"


def _flag(name: str, target: str, scope: Scope, description: str) -> SwitchSpec:
    return SwitchSpec(name, SwitchKind.FLAG, description, scope=scope, target=target)


def _collection(name: str, target: str, description: str) -> SwitchSpec:
    return SwitchSpec(name, SwitchKind.COLLECTION, description, target=target, metavar="name")


def _trait(name: str, target: str, description: str) -> SwitchSpec:
    return SwitchSpec(name, SwitchKind.TRAIT, description, target=target, metavar='"name=value"')


def _builtin_switches(processor_count: int) -> list[SwitchSpec]:
    return [
        _flag("debug", "debug", "project", "launch the debugger to debug the tests"),
        _flag("diagnostics", "diagnostic_messages", "assembly", "enable diagnostics messages"),
        _flag("failskips", "fail_skips", "assembly", "convert skipped tests into failures"),
        _flag("ignorefailures", "ignore_failures", "project", "if tests fail, do not return a failure exit code"),
        _flag(
            "internaldiagnostics",
            "internal_diagnostic_messages",
            "assembly",
            "enable internal diagnostics messages",
        ),
        _flag("noautoreporters", "no_auto_reporters", "project", "do not allow reporters to be auto-enabled"),
        _flag("nocolor", "no_color", "project", "do not output results with colors"),
        _flag("nologo", "no_logo", "project", "do not show the copyright message"),
        _flag("pause", "pause", "project", "wait for input before running tests"),
        _flag(
            "preenumeratetheories",
            "pre_enumerate_theories",
            "assembly",
            "enable theory pre-enumeration (disabled by default)",
        ),
        _flag("stoponfail", "stop_on_fail", "assembly", "stop on first test failure"),
        _flag("wait", "wait", "project", "wait for input after completion"),
        SwitchSpec(
            "culture",
            SwitchKind.SCALAR,
            "run tests under the given culture ('default', 'invariant' or a culture name)",
            target="culture",
            parse=parse_culture,
            metavar="option",
        ),
        SwitchSpec(
            "maxthreads",
            SwitchKind.SCALAR,
            "maximum thread count for collection parallelization "
            "('default', 'unlimited', a number, or a multiplier like '2x')",
            target="max_parallel_threads",
            parse=partial(parse_max_threads, processor_count=processor_count),
            metavar="count",
        ),
        SwitchSpec(
            "parallel",
            SwitchKind.SCALAR,
            "set parallelization based on option ('none' or 'collections')",
            target="parallelize_test_collections",
            parse=parse_parallel,
            metavar="option",
        ),
        _collection("namespace", "included_namespaces", "run all methods in a given namespace"),
        _collection("nonamespace", "excluded_namespaces", "do not run any methods in a given namespace"),
        _collection("class", "included_classes", "run all methods in a given test class"),
        _collection("noclass", "excluded_classes", "do not run any methods in a given test class"),
        _collection("method", "included_methods", "run a given test method"),
        _collection("nomethod", "excluded_methods", "do not run a given test method"),
        _trait("trait", "included_traits", "only run tests with matching name/value traits"),
        _trait("notrait", "excluded_traits", "do not run tests with matching name/value traits"),
    ]


def build_switch_table(
    *,
    transforms: Iterable[Transform],
    reporters: Iterable[Reporter],
    processor_count: int,
) -> dict[str, SwitchSpec]:
    """Build the lookup table, keyed by the upper-cased switch name.

    Built-in switches come first, then one switch per transform, then one
    per reporter with a switch name. A later entry never replaces an
    earlier one.
    """
    table: dict[str, SwitchSpec] = {}

    def register(spec: SwitchSpec) -> None:
        key = spec.name.upper()
        if key in table:
            logger.warning("ignoring %s switch %s: name already in use", spec.kind.value, spec.switch)
            return
        table[key] = spec

    for spec in _builtin_switches(processor_count):
        register(spec)

    for transform in transforms:
        register(
            SwitchSpec(
                transform.id,
                SwitchKind.TRANSFORM,
                transform.description,
                scope="project",
                target=transform.id.lower(),
                metavar="filename",
            )
        )

    for reporter in reporters:
        if not reporter.switch_name:
            continue
        register(
            SwitchSpec(
                reporter.switch_name,
                SwitchKind.REPORTER,
                getattr(reporter, "description", ""),
                scope="project",
                reporter=reporter,
            )
        )

    return table


__all__ = ["SwitchSpec", "build_switch_table"]
