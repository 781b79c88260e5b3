from __future__ import annotations

from typing import TYPE_CHECKING

from runcfg.core import DEFAULT_REPORTER, builtin_reporters, select_reporter

if TYPE_CHECKING:
    from collections.abc import Callable

    from runcfg.core import CommandLine


def test_no_reporters_uses_default_reporter(command_line: Callable[..., CommandLine]) -> None:
    project = command_line("no-config.json").parse()
    assert project.reporter is DEFAULT_REPORTER


def test_no_explicit_reporter_no_environmentally_enabled_reporters(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    implicit = make_reporter(environmentally_enabled=False)

    project = command_line("no-config.json", reporters=[implicit]).parse()

    assert project.reporter is DEFAULT_REPORTER


def test_explicit_reporter_without_environmental_override(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    explicit = make_reporter("switch")

    project = command_line("no-config.json", "-switch", reporters=[explicit]).parse()

    assert project.reporter is explicit


def test_explicit_reporter_switch_is_case_insensitive(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    explicit = make_reporter("teamcity")

    project = command_line("no-config.json", "-TeamCity", reporters=[explicit]).parse()

    assert project.reporter is explicit


def test_environmental_override_beats_explicit_reporter(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    explicit = make_reporter("switch")
    implicit = make_reporter(environmentally_enabled=True)

    project = command_line("no-config.json", "-switch", reporters=[explicit, implicit]).parse()

    assert project.reporter is implicit


def test_environmental_override_disabled_uses_default_reporter(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    implicit = make_reporter(environmentally_enabled=True)

    project = command_line("no-config.json", "-noautoreporters", reporters=[implicit]).parse()

    assert project.reporter is DEFAULT_REPORTER
    assert implicit.checked == 0  # type: ignore[attr-defined]


def test_no_auto_reporters_keeps_explicit_reporter(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    explicit = make_reporter("switch")
    implicit = make_reporter(environmentally_enabled=True)

    project = command_line(
        "no-config.json", "-noautoreporters", "-switch", reporters=[explicit, implicit]
    ).parse()

    assert project.reporter is explicit


def test_first_environmentally_enabled_reporter_wins(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    explicit = make_reporter("switch")
    implicit1 = make_reporter(environmentally_enabled=True)
    implicit2 = make_reporter(environmentally_enabled=True)

    project = command_line("no-config.json", reporters=[explicit, implicit1, implicit2]).parse()

    assert project.reporter is implicit1
    assert implicit2.checked == 0  # type: ignore[attr-defined]


def test_last_explicit_reporter_wins(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    first = make_reporter("first")
    second = make_reporter("second")

    project = command_line("no-config.json", "-second", "-first", reporters=[first, second]).parse()

    assert project.reporter is first


def test_reporter_switch_cannot_shadow_builtin_switch(
    command_line: Callable[..., CommandLine],
    make_reporter: Callable[..., object],
) -> None:
    shadow = make_reporter("debug")

    project = command_line("no-config.json", "-debug", reporters=[shadow]).parse()

    assert project.reporter is DEFAULT_REPORTER
    assert project.configuration.debug is True


def test_select_reporter_with_custom_default(make_reporter: Callable[..., object]) -> None:
    fallback = make_reporter("fallback")
    selected = select_reporter([], explicit=None, no_auto_reporters=False, default=fallback)  # type: ignore[arg-type]
    assert selected is fallback


def test_builtin_reporters_read_environment() -> None:
    reporters = {r.name: r for r in builtin_reporters({"TEAMCITY_PROJECT_NAME": "proj"})}

    assert reporters["teamcity"].is_environmentally_enabled()
    assert not reporters["appveyor"].is_environmentally_enabled()
    assert not reporters["json"].is_environmentally_enabled()


def test_vsts_reporter_needs_all_variables() -> None:
    partial = {r.name: r for r in builtin_reporters({"BUILD_BUILDID": "1"})}
    full = {
        r.name: r
        for r in builtin_reporters({"BUILD_BUILDID": "1", "SYSTEM_TEAMFOUNDATIONCOLLECTIONURI": "https://dev"})
    }

    assert not partial["vsts"].is_environmentally_enabled()
    assert full["vsts"].is_environmentally_enabled()


def test_builtin_registry_auto_selects_ci_reporter(file_system: object) -> None:
    from runcfg.core import CommandLine

    environ = {"APPVEYOR_API_URL": "http://localhost:1234"}
    project = CommandLine(
        ["no-config.json", "-json"],
        assembly_file="tests.dll",
        file_system=file_system,  # type: ignore[arg-type]
        environ=environ,
    ).parse()

    assert project.reporter.switch_name == "appveyor"


def test_builtin_registry_explicit_switch(file_system: object) -> None:
    from runcfg.core import CommandLine

    project = CommandLine(
        ["no-config.json", "-quiet"],
        assembly_file="tests.dll",
        file_system=file_system,  # type: ignore[arg-type]
        environ={},
    ).parse()

    assert project.reporter.switch_name == "quiet"
