from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from functools import cache
from importlib import resources
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

from jsonschema import validate

from runcfg._meta import __version__

if TYPE_CHECKING:
    from runcfg.core.model import Project
    from runcfg.core.reporters import Reporter

# -----------------------------------------------------------------------------
# JSON schema loading
# -----------------------------------------------------------------------------

_SCHEMA_FILE = "project.schema.json"


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for the rendered project."""
    text = resources.files("runcfg.data").joinpath(_SCHEMA_FILE).read_text(encoding="utf-8")
    return json.loads(text)


def _to_obj(x: object) -> object:
    """Convert dataclasses, mappings and paths to plain JSON containers.

    ``None`` values are dropped so "not given" stays distinguishable from
    an explicit ``false``.
    """
    if is_dataclass(x) and not isinstance(x, type):
        out: dict[str, object] = {}
        for f in fields(cast("Any", x)):
            value = getattr(x, f.name)
            if value is not None:
                out[f.name] = _to_obj(value)
        return out
    if isinstance(x, Mapping):
        return {str(k): _to_obj(v) for k, v in x.items() if v is not None}
    if isinstance(x, (tuple, list)):
        return [_to_obj(v) for v in x]
    if isinstance(x, PurePath):
        return x.as_posix()
    return x


def _reporter_payload(reporter: Reporter) -> dict[str, object]:
    out: dict[str, object] = {}
    name = getattr(reporter, "name", None)
    if isinstance(name, str):
        out["name"] = name
    if reporter.switch_name:
        out["switch"] = reporter.switch_name
    return out


def project_to_dict(project: Project) -> dict[str, object]:
    """Return the project as plain containers (no schema envelope)."""
    return {
        "assemblies": _to_obj(project.assemblies),
        "configuration": _to_obj(project.configuration),
        "reporter": _reporter_payload(project.reporter),
    }


def format_json(project: Project) -> str:
    """Render a parsed project as schema-validated JSON."""
    schema = get_schema()
    payload: dict[str, object] = {
        "schema": str(schema["$id"]),
        "tool": {"name": "runcfg", "version": __version__},
        "project": project_to_dict(project),
    }
    validate(payload, schema)
    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["format_json", "get_schema", "project_to_dict"]
