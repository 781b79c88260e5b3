from runcfg.core.commandline import CommandLine, parse_command_line
from runcfg.core.config import CONFIG_FILE_SUFFIXES, HELP_SWITCHES, LOG_FORMAT, SWITCH_PREFIX
from runcfg.core.filesystem import FileSystem, LocalFileSystem
from runcfg.core.filters import FilterCollector, parse_trait
from runcfg.core.model import (
    AssemblyConfig,
    AssemblyConfiguration,
    Filters,
    Project,
    ProjectConfiguration,
)
from runcfg.core.reporters import DEFAULT_REPORTER, Reporter, RunnerReporter, builtin_reporters, select_reporter
from runcfg.core.switches import SwitchSpec, build_switch_table
from runcfg.core.transforms import AVAILABLE_TRANSFORMS, Transform, TransformDescriptor
from runcfg.core.types import OutputFormat, SwitchKind
from runcfg.core.validators import parse_culture, parse_max_threads, parse_parallel

__all__ = [
    "AVAILABLE_TRANSFORMS",
    "CONFIG_FILE_SUFFIXES",
    "DEFAULT_REPORTER",
    "HELP_SWITCHES",
    "LOG_FORMAT",
    "SWITCH_PREFIX",
    "AssemblyConfig",
    "AssemblyConfiguration",
    "CommandLine",
    "FileSystem",
    "FilterCollector",
    "Filters",
    "LocalFileSystem",
    "OutputFormat",
    "Project",
    "ProjectConfiguration",
    "Reporter",
    "RunnerReporter",
    "SwitchKind",
    "SwitchSpec",
    "Transform",
    "TransformDescriptor",
    "build_switch_table",
    "builtin_reporters",
    "parse_command_line",
    "parse_culture",
    "parse_max_threads",
    "parse_parallel",
    "parse_trait",
    "select_reporter",
]
