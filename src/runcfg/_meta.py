from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("runcfg")

logger = logging.getLogger("runcfg")

__all__ = ["__version__", "logger"]
