"""Central configuration and constants for ``runcfg``."""

from __future__ import annotations

# Every switch starts with this prefix; anything else is a positional token.
SWITCH_PREFIX = "-"

# Config files are only accepted in the JSON project format.
CONFIG_FILE_SUFFIXES: tuple[str, ...] = (".json",)

# Tokens that ask the console entry point for usage text instead of a parse.
HELP_SWITCHES: frozenset[str] = frozenset({"-?", "-h", "-help", "/?"})

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


__all__ = ["CONFIG_FILE_SUFFIXES", "HELP_SWITCHES", "LOG_FORMAT", "SWITCH_PREFIX"]
