"""Accumulation of the repeatable filter switches."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from runcfg.core.model.filters import Filters
from runcfg.core.types import TraitMap
from runcfg.errors import ArgumentValidationError

FILTER_SETS: tuple[str, ...] = (
    "included_namespaces",
    "excluded_namespaces",
    "included_classes",
    "excluded_classes",
    "included_methods",
    "excluded_methods",
)
TRAIT_MAPS: tuple[str, ...] = ("included_traits", "excluded_traits")


def parse_trait(switch: str, value: str) -> tuple[str, str]:
    """Split ``name=value``; both halves must be non-empty and ``=`` must appear once."""
    parts = value.split("=")
    if len(parts) != 2 or not parts[0] or not parts[1]:  # noqa: PLR2004
        raise ArgumentValidationError.incorrect_format(switch)
    return parts[0], parts[1]


@dataclass(slots=True)
class FilterCollector:
    """Mutable filter state while a command line is being parsed."""

    included_namespaces: set[str] = field(default_factory=set)
    excluded_namespaces: set[str] = field(default_factory=set)
    included_classes: set[str] = field(default_factory=set)
    excluded_classes: set[str] = field(default_factory=set)
    included_methods: set[str] = field(default_factory=set)
    excluded_methods: set[str] = field(default_factory=set)
    included_traits: TraitMap = field(default_factory=dict)
    excluded_traits: TraitMap = field(default_factory=dict)

    def add(self, target: str, value: str) -> None:
        if target not in FILTER_SETS:
            msg = f"not a filter set: {target!r}"
            raise KeyError(msg)
        getattr(self, target).add(value)

    def add_trait(self, target: str, name: str, value: str) -> None:
        if target not in TRAIT_MAPS:
            msg = f"not a trait mapping: {target!r}"
            raise KeyError(msg)
        values = getattr(self, target).setdefault(name, [])
        if value not in values:
            values.append(value)

    def freeze(self) -> Filters:
        sets = {name: tuple(sorted(getattr(self, name))) for name in FILTER_SETS}
        traits = {
            name: MappingProxyType({k: tuple(v) for k, v in getattr(self, name).items()})
            for name in TRAIT_MAPS
        }
        return Filters(**sets, **traits)


__all__ = ["FILTER_SETS", "TRAIT_MAPS", "FilterCollector", "parse_trait"]
