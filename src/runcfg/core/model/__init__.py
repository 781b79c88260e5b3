from runcfg.core.model.configuration import AssemblyConfiguration, ProjectConfiguration
from runcfg.core.model.filters import Filters
from runcfg.core.model.project import AssemblyConfig, Project

__all__ = [
    "AssemblyConfig",
    "AssemblyConfiguration",
    "Filters",
    "Project",
    "ProjectConfiguration",
]
