from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from runcfg.core import FilterCollector, parse_trait
from runcfg.errors import ArgumentValidationError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from runcfg.core import CommandLine

FILTER_SWITCHES: list[tuple[str, str]] = [
    ("-namespace", "included_namespaces"),
    ("-nonamespace", "excluded_namespaces"),
    ("-class", "included_classes"),
    ("-noclass", "excluded_classes"),
    ("-method", "included_methods"),
    ("-nomethod", "excluded_methods"),
]
FILTER_CASES = FILTER_SWITCHES + [(switch.upper(), attr) for switch, attr in FILTER_SWITCHES]

TRAIT_SWITCHES: list[tuple[str, str]] = [
    ("-trait", "included_traits"),
    ("-notrait", "excluded_traits"),
]
TRAIT_CASES = TRAIT_SWITCHES + [(switch.upper(), attr) for switch, attr in TRAIT_SWITCHES]

BAD_TRAITS = [
    "foobar",  # missing equals
    "foo=",  # missing value
    "=bar",  # missing name
    "foo=bar=baz",  # double equal signs
]


def test_default_filters(command_line: Callable[..., CommandLine]) -> None:
    filters = command_line("no-config.json").parse().assemblies[0].configuration.filters

    assert filters.empty
    for _, attr in FILTER_SWITCHES + TRAIT_SWITCHES:
        assert len(getattr(filters, attr)) == 0


# --------------------------------------------------------------------------- #
# name filters                                                                #
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(("switch", "attr"), FILTER_CASES)
def test_filter_missing_value(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    with pytest.raises(ArgumentValidationError) as excinfo:
        command_line("no-config.json", switch).parse()

    assert excinfo.value.kind is ErrorKind.MISSING_ARGUMENT
    assert str(excinfo.value) == f"missing argument for {switch.lower()}"


@pytest.mark.parametrize(("switch", "attr"), FILTER_CASES)
def test_filter_single_value(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    project = command_line("no-config.json", switch, "value1").parse()

    values = getattr(project.assemblies[0].configuration.filters, attr)
    assert values == ("value1",)


@pytest.mark.parametrize(("switch", "attr"), FILTER_CASES)
def test_filter_multiple_values_are_sorted(
    command_line: Callable[..., CommandLine],
    switch: str,
    attr: str,
) -> None:
    project = command_line("no-config.json", switch, "value2", switch, "value1").parse()

    values = getattr(project.assemblies[0].configuration.filters, attr)
    assert values == ("value1", "value2")


def test_filter_duplicates_collapse(command_line: Callable[..., CommandLine]) -> None:
    project = command_line("no-config.json", "-class", "A", "-CLASS", "A").parse()
    assert project.assemblies[0].configuration.filters.included_classes == ("A",)


# --------------------------------------------------------------------------- #
# trait filters                                                               #
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(("switch", "attr"), TRAIT_CASES)
def test_single_trait(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    project = command_line("no-config.json", switch, "foo=bar").parse()

    traits = getattr(project.assemblies[0].configuration.filters, attr)
    assert dict(traits) == {"foo": ("bar",)}


@pytest.mark.parametrize(("switch", "attr"), TRAIT_CASES)
def test_traits_same_name_accumulate(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    project = command_line("no-config.json", switch, "foo=bar", switch, "foo=baz").parse()

    traits = getattr(project.assemblies[0].configuration.filters, attr)
    assert len(traits) == 1
    assert sorted(traits["foo"]) == ["bar", "baz"]


@pytest.mark.parametrize(("switch", "attr"), TRAIT_CASES)
def test_traits_different_names(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    project = command_line("no-config.json", switch, "foo=bar", switch, "baz=biff").parse()

    traits = getattr(project.assemblies[0].configuration.filters, attr)
    assert dict(traits) == {"foo": ("bar",), "baz": ("biff",)}


@pytest.mark.parametrize(("switch", "attr"), TRAIT_CASES)
def test_trait_missing_value(command_line: Callable[..., CommandLine], switch: str, attr: str) -> None:
    with pytest.raises(ArgumentValidationError) as excinfo:
        command_line("no-config.json", switch).parse()

    assert str(excinfo.value) == f"missing argument for {switch.lower()}"


@pytest.mark.parametrize("switch", [switch for switch, _ in TRAIT_CASES])
@pytest.mark.parametrize("value", BAD_TRAITS)
def test_trait_incorrect_format(command_line: Callable[..., CommandLine], switch: str, value: str) -> None:
    with pytest.raises(ArgumentValidationError) as excinfo:
        command_line("no-config.json", switch, value).parse()

    assert excinfo.value.kind is ErrorKind.INCORRECT_FORMAT
    assert str(excinfo.value) == f'incorrect argument format for {switch.lower()} (should be "name=value")'


def test_include_and_exclude_traits_are_independent(command_line: Callable[..., CommandLine]) -> None:
    project = command_line("no-config.json", "-trait", "cat=fast", "-notrait", "cat=slow").parse()

    filters = project.assemblies[0].configuration.filters
    assert dict(filters.included_traits) == {"cat": ("fast",)}
    assert dict(filters.excluded_traits) == {"cat": ("slow",)}


# --------------------------------------------------------------------------- #
# collector                                                                   #
# --------------------------------------------------------------------------- #


def test_parse_trait_splits_name_and_value() -> None:
    assert parse_trait("-trait", "category=integration") == ("category", "integration")


def test_collector_keeps_trait_value_order_and_uniqueness() -> None:
    collector = FilterCollector()
    collector.add_trait("included_traits", "os", "linux")
    collector.add_trait("included_traits", "os", "darwin")
    collector.add_trait("included_traits", "os", "linux")

    assert collector.freeze().included_traits["os"] == ("linux", "darwin")


def test_collector_rejects_unknown_targets() -> None:
    collector = FilterCollector()
    with pytest.raises(KeyError):
        collector.add("included_traits", "x")
    with pytest.raises(KeyError):
        collector.add_trait("included_classes", "a", "b")


def test_frozen_filters_are_read_only() -> None:
    collector = FilterCollector()
    collector.add_trait("excluded_traits", "a", "b")
    filters = collector.freeze()

    with pytest.raises(TypeError):
        filters.excluded_traits["c"] = ("d",)  # type: ignore[index]
