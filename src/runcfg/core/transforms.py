"""Registry of result transforms selectable with ``-<id> <filename>``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Transform(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def description(self) -> str: ...


@dataclass(frozen=True, slots=True)
class TransformDescriptor:
    id: str
    description: str


AVAILABLE_TRANSFORMS: tuple[TransformDescriptor, ...] = (
    TransformDescriptor("xml", "output results to xUnit.net v2+ XML file"),
    TransformDescriptor("xmlv1", "output results to xUnit.net v1 XML file"),
    TransformDescriptor("html", "output results to HTML file"),
    TransformDescriptor("nunit", "output results to NUnit v2.5 XML file"),
    TransformDescriptor("junit", "output results to JUnit XML file"),
    TransformDescriptor("trx", "output results to Visual Studio TRX file"),
    TransformDescriptor("ctrf", "output results to CTRF JSON file"),
)


__all__ = ["AVAILABLE_TRANSFORMS", "Transform", "TransformDescriptor"]
