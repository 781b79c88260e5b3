from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from runcfg.core.model.configuration import AssemblyConfiguration, ProjectConfiguration

if TYPE_CHECKING:
    from pathlib import Path

    from runcfg.core.reporters import Reporter


@dataclass(frozen=True, slots=True)
class AssemblyConfig:
    """One test binary plus the options it runs with."""

    assembly_file: Path
    config_file: Path | None = None
    configuration: AssemblyConfiguration = field(default_factory=AssemblyConfiguration)


@dataclass(frozen=True, slots=True)
class Project:
    """Fully parsed and validated runner invocation."""

    assemblies: tuple[AssemblyConfig, ...]
    configuration: ProjectConfiguration
    reporter: Reporter

    def __post_init__(self) -> None:
        if not self.assemblies:
            msg = "a project needs at least one assembly"
            raise ValueError(msg)

    @property
    def output(self) -> dict[str, str]:
        """Transform id -> output file name, as a plain dict."""
        return dict(self.configuration.output)


__all__ = ["AssemblyConfig", "Project"]
