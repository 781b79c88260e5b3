"""Typed configuration values produced by the command line parser.

Booleans are stored as ``bool | None`` so a caller can tell "not given"
from "given"; the ``*_or_default`` accessors fold ``None`` into ``False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from runcfg.core.model.filters import Filters

if TYPE_CHECKING:
    from collections.abc import Mapping

    from runcfg.core.types import MaxThreads


def _empty_output() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class AssemblyConfiguration:
    """Settings that apply to a single test assembly."""

    diagnostic_messages: bool | None = None
    fail_skips: bool | None = None
    internal_diagnostic_messages: bool | None = None
    pre_enumerate_theories: bool | None = None
    stop_on_fail: bool | None = None
    culture: str | None = None
    max_parallel_threads: MaxThreads = None
    parallelize_test_collections: bool | None = None
    filters: Filters = field(default_factory=Filters)

    @property
    def diagnostic_messages_or_default(self) -> bool:
        return bool(self.diagnostic_messages)

    @property
    def fail_skips_or_default(self) -> bool:
        return bool(self.fail_skips)

    @property
    def internal_diagnostic_messages_or_default(self) -> bool:
        return bool(self.internal_diagnostic_messages)

    @property
    def pre_enumerate_theories_or_default(self) -> bool:
        return bool(self.pre_enumerate_theories)

    @property
    def stop_on_fail_or_default(self) -> bool:
        return bool(self.stop_on_fail)


@dataclass(frozen=True, slots=True)
class ProjectConfiguration:
    """Settings that apply to the whole run."""

    debug: bool | None = None
    ignore_failures: bool | None = None
    no_auto_reporters: bool | None = None
    no_color: bool | None = None
    no_logo: bool | None = None
    pause: bool | None = None
    wait: bool | None = None
    # transform id (lowercase) -> output file name
    output: Mapping[str, str] = field(default_factory=_empty_output)

    @property
    def debug_or_default(self) -> bool:
        return bool(self.debug)

    @property
    def ignore_failures_or_default(self) -> bool:
        return bool(self.ignore_failures)

    @property
    def no_auto_reporters_or_default(self) -> bool:
        return bool(self.no_auto_reporters)

    @property
    def no_color_or_default(self) -> bool:
        return bool(self.no_color)

    @property
    def no_logo_or_default(self) -> bool:
        return bool(self.no_logo)

    @property
    def pause_or_default(self) -> bool:
        return bool(self.pause)

    @property
    def wait_or_default(self) -> bool:
        return bool(self.wait)


__all__ = ["AssemblyConfiguration", "ProjectConfiguration"]
