"""Centralised exception hierarchy for runcfg."""

from __future__ import annotations

from enum import StrEnum


class RuncfgError(Exception):
    """Base class for all custom runcfg exceptions."""


class ErrorKind(StrEnum):
    """Reasons a command line can be rejected."""

    UNKNOWN_OPTION = "unknown-option"
    ASSEMBLY_OR_CONFIG_NOT_FOUND = "assembly-or-config-not-found"
    MISSING_ASSEMBLY = "missing-assembly"
    MISSING_ARGUMENT = "missing-argument"
    MISSING_FILENAME = "missing-filename"
    INCORRECT_FORMAT = "incorrect-format"
    INVALID_VALUE = "invalid-value"


class ArgumentValidationError(RuncfgError, ValueError):
    """The command line could not be turned into a project.

    ``str(exc)`` is the literal message meant for the user; ``kind`` tells
    callers which rule was violated without parsing the text.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def unknown_option(cls, token: str) -> ArgumentValidationError:
        return cls(ErrorKind.UNKNOWN_OPTION, f"unknown option: {token}")

    @classmethod
    def not_found(cls, token: str) -> ArgumentValidationError:
        return cls(ErrorKind.ASSEMBLY_OR_CONFIG_NOT_FOUND, f"config file not found: {token}")

    @classmethod
    def missing_argument(cls, switch: str) -> ArgumentValidationError:
        return cls(ErrorKind.MISSING_ARGUMENT, f"missing argument for {switch.lower()}")

    @classmethod
    def missing_filename(cls, switch: str) -> ArgumentValidationError:
        return cls(ErrorKind.MISSING_FILENAME, f"missing filename for {switch}")

    @classmethod
    def incorrect_format(cls, switch: str) -> ArgumentValidationError:
        msg = f'incorrect argument format for {switch.lower()} (should be "name=value")'
        return cls(ErrorKind.INCORRECT_FORMAT, msg)


__all__ = [
    "ArgumentValidationError",
    "ErrorKind",
    "RuncfgError",
]
