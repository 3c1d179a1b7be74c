"""
Centralized configuration for the shapes demo.

Settings come from the environment so the script and tests agree on them.
"""

from __future__ import annotations

import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Input file. The program reads shapes.txt from the working directory; this
# override exists for tests and scripted runs, not as a user-facing option.
SHAPES_FILE = os.getenv("SHAPES_FILE", "shapes.txt")

# Reject short or non-numeric parameter lists instead of reusing stale values
SHAPES_STRICT = _env_flag("SHAPES_STRICT")
