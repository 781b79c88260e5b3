from runcfg._meta import __version__, logger
from runcfg.core import CommandLine, Project, parse_command_line
from runcfg.errors import ArgumentValidationError, ErrorKind, RuncfgError

__all__ = [
    "ArgumentValidationError",
    "CommandLine",
    "ErrorKind",
    "Project",
    "RuncfgError",
    "__version__",
    "logger",
    "parse_command_line",
]
