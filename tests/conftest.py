from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from runcfg.core import CommandLine

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from runcfg.core import Reporter

TEST_ASSEMBLY = "runcfg.tests.dll"


class FakeFileSystem:
    """Every file exists except ``badConfig.*``; paths resolve under ``/full/path``."""

    def exists(self, path: str) -> bool:
        return not path.startswith("badConfig.") and path != "fileName"

    def resolve(self, path: str) -> Path:
        return Path(f"/full/path/{path}")


@dataclass(eq=False)
class FakeReporter:
    switch_name: str | None = None
    environmentally_enabled: bool = False
    checked: int = 0

    def is_environmentally_enabled(self) -> bool:
        self.checked += 1
        return self.environmentally_enabled


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def file_system() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def command_line(file_system: FakeFileSystem) -> Callable[..., CommandLine]:
    """Build an in-process command line for :data:`TEST_ASSEMBLY`.

    The first positional argument is therefore the config file, the way a
    test binary sees its own arguments.
    """

    def build(*arguments: str, reporters: Sequence[Reporter] = (), processor_count: int = 4) -> CommandLine:
        return CommandLine(
            arguments,
            assembly_file=TEST_ASSEMBLY,
            reporters=reporters,
            file_system=file_system,
            processor_count=processor_count,
        )

    return build


@pytest.fixture
def make_reporter() -> Callable[..., FakeReporter]:
    """Factory for reporters with a chosen switch and environment state."""
    return FakeReporter
