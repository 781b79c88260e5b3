"""Turn a runner's raw argument list into a validated :class:`Project`.

Grammar::

    <assembly> [<config-file>] [<switch> [<value>]]...

When the parser runs inside the test binary itself (``assembly_file`` is
given) the assembly token is omitted and the first positional token, if
any, is the config file.
"""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from runcfg._meta import logger
from runcfg.core.config import CONFIG_FILE_SUFFIXES, SWITCH_PREFIX
from runcfg.core.filesystem import LocalFileSystem
from runcfg.core.filters import FilterCollector, parse_trait
from runcfg.core.model import AssemblyConfig, AssemblyConfiguration, Project, ProjectConfiguration
from runcfg.core.reporters import builtin_reporters, select_reporter
from runcfg.core.switches import build_switch_table
from runcfg.core.transforms import AVAILABLE_TRANSFORMS
from runcfg.core.types import SwitchKind
from runcfg.errors import ArgumentValidationError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from runcfg.core.filesystem import FileSystem
    from runcfg.core.reporters import Reporter
    from runcfg.core.switches import SwitchSpec
    from runcfg.core.transforms import Transform


def _is_switch(token: str) -> bool:
    return token.startswith(SWITCH_PREFIX)


@dataclass(slots=True)
class _ParseState:
    project: dict[str, object] = field(default_factory=dict)
    assembly: dict[str, object] = field(default_factory=dict)
    filters: FilterCollector = field(default_factory=FilterCollector)
    output: dict[str, str] = field(default_factory=dict)
    explicit_reporter: Reporter | None = None


class CommandLine:
    """Parser for one runner invocation.

    Collaborators default to the real process: the local disk,
    ``os.cpu_count()`` and ``os.environ``. Tests substitute them.
    """

    def __init__(
        self,
        arguments: Sequence[str],
        *,
        assembly_file: str | None = None,
        reporters: Sequence[Reporter] | None = None,
        transforms: Sequence[Transform] = AVAILABLE_TRANSFORMS,
        file_system: FileSystem | None = None,
        processor_count: int | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.arguments = tuple(arguments)
        self.assembly_file = assembly_file
        self.reporters: tuple[Reporter, ...] = tuple(
            builtin_reporters(environ) if reporters is None else reporters
        )
        self.transforms = tuple(transforms)
        self.file_system: FileSystem = file_system or LocalFileSystem()
        self.processor_count = processor_count if processor_count is not None else (os.cpu_count() or 1)
        self.switches: dict[str, SwitchSpec] = build_switch_table(
            transforms=self.transforms,
            reporters=self.reporters,
            processor_count=self.processor_count,
        )

    # ------------------------------------------------------------------ #
    # Positional tokens                                                  #
    # ------------------------------------------------------------------ #

    def _take_assembly(self, tokens: deque[str]) -> Path:
        if self.assembly_file is not None:
            return self.file_system.resolve(self.assembly_file)

        if not tokens or _is_switch(tokens[0]):
            raise ArgumentValidationError(ErrorKind.MISSING_ASSEMBLY, "must specify an assembly file")

        token = tokens.popleft()
        if not self.file_system.exists(token):
            raise ArgumentValidationError.not_found(token)
        return self.file_system.resolve(token)

    def _take_config_file(self, tokens: deque[str]) -> Path | None:
        if not tokens or _is_switch(tokens[0]):
            return None

        token = tokens.popleft()
        if not self.file_system.exists(token):
            raise ArgumentValidationError.not_found(token)
        if not token.lower().endswith(CONFIG_FILE_SUFFIXES):
            raise ArgumentValidationError.unknown_option(token)
        return self.file_system.resolve(token)

    # ------------------------------------------------------------------ #
    # Switches                                                           #
    # ------------------------------------------------------------------ #

    def lookup(self, token: str) -> SwitchSpec | None:
        """Return the table entry for *token*, ignoring case."""
        if not _is_switch(token):
            return None
        return self.switches.get(token[len(SWITCH_PREFIX) :].upper())

    @staticmethod
    def _take_value(tokens: deque[str]) -> str | None:
        if tokens and not _is_switch(tokens[0]):
            return tokens.popleft()
        return None

    def _apply(self, spec: SwitchSpec, token: str, tokens: deque[str], state: _ParseState) -> None:
        settings = state.project if spec.scope == "project" else state.assembly

        if spec.kind is SwitchKind.FLAG:
            settings[spec.target] = True
            return

        if spec.kind is SwitchKind.REPORTER:
            state.explicit_reporter = spec.reporter
            return

        value = self._take_value(tokens)
        if value is None:
            if spec.kind is SwitchKind.TRANSFORM:
                raise ArgumentValidationError.missing_filename(token)
            raise ArgumentValidationError.missing_argument(token)

        if spec.kind is SwitchKind.SCALAR:
            settings[spec.target] = spec.parse(value) if spec.parse else value
        elif spec.kind is SwitchKind.COLLECTION:
            state.filters.add(spec.target, value)
        elif spec.kind is SwitchKind.TRAIT:
            name, trait_value = parse_trait(token, value)
            state.filters.add_trait(spec.target, name, trait_value)
        elif spec.kind is SwitchKind.TRANSFORM:
            state.output[spec.target] = value

    # ------------------------------------------------------------------ #
    # Entry point                                                        #
    # ------------------------------------------------------------------ #

    def parse(self) -> Project:
        """Parse the arguments, raising :class:`ArgumentValidationError` on the first bad token."""
        tokens = deque(self.arguments)
        state = _ParseState()

        assembly_file = self._take_assembly(tokens)
        config_file = self._take_config_file(tokens)
        logger.debug("assembly %s, config %s", assembly_file, config_file)

        while tokens:
            token = tokens.popleft()
            spec = self.lookup(token)
            if spec is None:
                raise ArgumentValidationError.unknown_option(token)
            logger.debug("switch %s (%s)", token, spec.kind.value)
            self._apply(spec, token, tokens, state)

        return self._build(state, assembly_file, config_file)

    def _build(self, state: _ParseState, assembly_file: Path, config_file: Path | None) -> Project:
        assembly = AssemblyConfig(
            assembly_file=assembly_file,
            config_file=config_file,
            configuration=AssemblyConfiguration(**state.assembly, filters=state.filters.freeze()),  # type: ignore[arg-type]
        )
        configuration = ProjectConfiguration(
            **state.project,  # type: ignore[arg-type]
            output=MappingProxyType(dict(state.output)),
        )
        reporter = select_reporter(
            self.reporters,
            explicit=state.explicit_reporter,
            no_auto_reporters=configuration.no_auto_reporters_or_default,
        )
        return Project(assemblies=(assembly,), configuration=configuration, reporter=reporter)


def parse_command_line(arguments: Sequence[str], **kwargs: Any) -> Project:
    """Shortcut for ``CommandLine(arguments, **kwargs).parse()``."""
    return CommandLine(arguments, **kwargs).parse()


__all__ = ["CommandLine", "parse_command_line"]
