from __future__ import annotations

from typing import TYPE_CHECKING

from runcfg.core.types import OutputFormat
from runcfg.render.human import format_human
from runcfg.render.json import format_json, project_to_dict
from runcfg.render.usage import format_usage

if TYPE_CHECKING:
    from runcfg.core.model import Project


def render(project: Project, fmt: OutputFormat, *, color: bool = False) -> str:
    """Render *project* in the requested format."""
    if fmt is OutputFormat.JSON:
        return format_json(project)
    return format_human(project, color=color)


__all__ = ["format_human", "format_json", "format_usage", "project_to_dict", "render"]
