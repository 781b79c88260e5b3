"""Parsers for the values of ``-culture``, ``-maxthreads`` and ``-parallel``."""

from __future__ import annotations

import re

from runcfg.errors import ArgumentValidationError, ErrorKind

_MULTIPLIER_PATTERN = re.compile(r"([0-9]+(?:\.[0-9]+)?)x", re.IGNORECASE)
_INTEGER_PATTERN = re.compile(r"[0-9]+")

MAX_THREADS_ERROR = (
    "incorrect argument value for -maxthreads "
    "(must be 'default', 'unlimited', a positive number, or a multiplier in the form of '0.0x')"
)
PARALLEL_ERROR = "incorrect argument value for -parallel"

UNLIMITED_THREADS = -1

# Thread counts are 32-bit signed integers in the runner.
MAX_THREADS = 2**31 - 1


def parse_culture(value: str) -> str | None:
    """Map ``default`` to ``None`` and ``invariant`` to ``""``; keep anything else."""
    lowered = value.lower()
    if lowered == "default":
        return None
    if lowered == "invariant":
        return ""
    return value


def parse_max_threads(value: str, *, processor_count: int) -> int | None:
    """Parse a ``-maxthreads`` value.

    ``default``/``0`` -> ``None``, ``unlimited`` -> ``-1``, ``N`` -> ``N`` and
    ``N.Nx`` -> ``round(processor_count * N.N)``.
    """
    lowered = value.lower()
    if lowered in {"default", "0"}:
        return None
    if lowered == "unlimited":
        return UNLIMITED_THREADS

    if _INTEGER_PATTERN.fullmatch(value):
        digits = value.lstrip("0")
        if not digits:
            return None
        if len(digits) > len(str(MAX_THREADS)) or int(digits) > MAX_THREADS:
            raise ArgumentValidationError(ErrorKind.INVALID_VALUE, MAX_THREADS_ERROR)
        return int(digits)

    match = _MULTIPLIER_PATTERN.fullmatch(value)
    if match is None:
        raise ArgumentValidationError(ErrorKind.INVALID_VALUE, MAX_THREADS_ERROR)

    # an overlong multiplier parses as inf, which fails the bound check
    product = processor_count * float(match.group(1))
    if not product <= MAX_THREADS:
        raise ArgumentValidationError(ErrorKind.INVALID_VALUE, MAX_THREADS_ERROR)

    # round() is half-to-even; a product that rounds to zero means "default"
    return round(product) or None


def parse_parallel(value: str) -> bool:
    """Return whether test collections run in parallel."""
    lowered = value.lower()
    if lowered == "none":
        return False
    if lowered == "collections":
        return True
    raise ArgumentValidationError(ErrorKind.INVALID_VALUE, PARALLEL_ERROR)


__all__ = [
    "MAX_THREADS",
    "MAX_THREADS_ERROR",
    "PARALLEL_ERROR",
    "UNLIMITED_THREADS",
    "parse_culture",
    "parse_max_threads",
    "parse_parallel",
]
