"""Centralized configuration for the CGP expression package.

This module defines:
- The default seed used when an expression is built without one
- Rendering limits for the human-readable dump
- Default symbol naming for symbolic evaluation
- The package log level

Configuration can be overridden via environment variables (prefixed with CGP_).
"""

import os

VERSION = "0.3.0"

# Seed used when neither a seed nor a generator is passed to an Expression.
# Unset means a fresh, nondeterministic stream per instance.
_seed_env = os.getenv("CGP_DEFAULT_SEED")
DEFAULT_SEED = int(_seed_env) if _seed_env not in (None, "") else None

# Rendering
STREAM_MAX_LENGTH = int(
    os.getenv("CGP_STREAM_MAX_LENGTH", "5")
)  # Lists longer than this are truncated with "..."

# Symbolic evaluation
SYMBOL_PREFIX = os.getenv("CGP_SYMBOL_PREFIX", "x")  # x0, x1, ... by default

# Logging
LOG_LEVEL = os.getenv("CGP_LOG_LEVEL", "WARNING").upper()
