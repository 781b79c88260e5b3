"""Shared type aliases and enumerations used across runcfg."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

TraitMap: TypeAlias = dict[str, list[str]]
"""Trait name mapped to its values, in the order they were given."""

MaxThreads: TypeAlias = int | None
"""``None`` means "runner default", ``-1`` means unlimited."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class SwitchKind(StrEnum):
    """How a switch consumes the tokens that follow it."""

    FLAG = "flag"
    SCALAR = "scalar"
    COLLECTION = "collection"
    TRAIT = "trait"
    TRANSFORM = "transform"
    REPORTER = "reporter"


class OutputFormat(StrEnum):
    """Formats the console entry point can render a parsed project in."""

    HUMAN = "human"
    JSON = "json"


__all__ = ["MaxThreads", "OutputFormat", "SwitchKind", "TraitMap"]
