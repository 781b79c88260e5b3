from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def _empty_traits() -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Filters:
    """Test selection filters for one assembly.

    The six name collections are sorted; trait values keep the order in
    which they were first given.
    """

    included_namespaces: tuple[str, ...] = ()
    excluded_namespaces: tuple[str, ...] = ()
    included_classes: tuple[str, ...] = ()
    excluded_classes: tuple[str, ...] = ()
    included_methods: tuple[str, ...] = ()
    excluded_methods: tuple[str, ...] = ()
    included_traits: Mapping[str, tuple[str, ...]] = field(default_factory=_empty_traits)
    excluded_traits: Mapping[str, tuple[str, ...]] = field(default_factory=_empty_traits)

    @property
    def empty(self) -> bool:
        return not any(
            (
                self.included_namespaces,
                self.excluded_namespaces,
                self.included_classes,
                self.excluded_classes,
                self.included_methods,
                self.excluded_methods,
                self.included_traits,
                self.excluded_traits,
            )
        )


__all__ = ["Filters"]
