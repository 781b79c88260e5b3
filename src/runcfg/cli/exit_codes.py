# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_USAGE = 64  # Command line was rejected (unknown switch, bad value, ...)
EXIT_NOINPUT = 66  # Assembly or config file not found

__all__ = ["EXIT_GENERIC", "EXIT_NOINPUT", "EXIT_OK", "EXIT_USAGE"]
