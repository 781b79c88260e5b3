"""Runner reporter descriptors and the selection of the active reporter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from runcfg._meta import logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class Reporter(Protocol):
    """Anything that can be picked as the run's result reporter.

    ``switch_name`` is ``None`` for reporters that can only be enabled by
    the environment.
    """

    @property
    def switch_name(self) -> str | None: ...

    def is_environmentally_enabled(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class RunnerReporter:
    """Built-in reporter descriptor.

    The reporter turns itself on when *all* of ``env_vars`` are set to a
    non-empty value; with no ``env_vars`` it never does.
    """

    name: str
    switch_name: str | None
    description: str
    env_vars: tuple[str, ...] = ()
    environ: Mapping[str, str] | None = field(default=None, compare=False, repr=False)

    def is_environmentally_enabled(self) -> bool:
        if not self.env_vars:
            return False
        env = os.environ if self.environ is None else self.environ
        return all(env.get(var) for var in self.env_vars)


DEFAULT_REPORTER = RunnerReporter(
    name="default",
    switch_name=None,
    description="show standard progress messages",
)


def builtin_reporters(environ: Mapping[str, str] | None = None) -> tuple[RunnerReporter, ...]:
    """Return the built-in reporters in registry order."""
    return (
        RunnerReporter("json", "json", "show full progress messages in JSON", environ=environ),
        RunnerReporter("quiet", "quiet", "do not show progress messages", environ=environ),
        RunnerReporter("silent", "silent", "do not show any messages", environ=environ),
        RunnerReporter(
            "teamcity",
            "teamcity",
            "TeamCity CI support [normally auto-enabled]",
            env_vars=("TEAMCITY_PROJECT_NAME",),
            environ=environ,
        ),
        RunnerReporter(
            "appveyor",
            "appveyor",
            "AppVeyor CI support [normally auto-enabled]",
            env_vars=("APPVEYOR_API_URL",),
            environ=environ,
        ),
        RunnerReporter(
            "vsts",
            "vsts",
            "Azure DevOps/VSTS CI support [normally auto-enabled]",
            env_vars=("SYSTEM_TEAMFOUNDATIONCOLLECTIONURI", "BUILD_BUILDID"),
            environ=environ,
        ),
        RunnerReporter("verbose", "verbose", "show verbose progress messages", environ=environ),
    )


def select_reporter(
    reporters: Sequence[Reporter],
    *,
    explicit: Reporter | None,
    no_auto_reporters: bool,
    default: Reporter = DEFAULT_REPORTER,
) -> Reporter:
    """Pick the active reporter.

    The first environmentally enabled reporter wins over an explicit
    switch, unless ``no_auto_reporters`` is set; then the explicit
    reporter, then ``default``.
    """
    if not no_auto_reporters:
        for reporter in reporters:
            if reporter.is_environmentally_enabled():
                logger.debug("reporter %r enabled by environment", reporter.switch_name)
                return reporter

    if explicit is not None:
        logger.debug("reporter %r selected by switch", explicit.switch_name)
        return explicit

    logger.debug("no reporter selected, using default")
    return default


__all__ = [
    "DEFAULT_REPORTER",
    "Reporter",
    "RunnerReporter",
    "builtin_reporters",
    "select_reporter",
]
