"""Centralized configuration for tinyexpr.

This module defines:
- Input validation limits
- Default exponent associativity
- Output formatting precision
- Default logging level

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with TINYEXPR_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("tinyexpr")
except Exception:
    # Fallback if package not installed
    VERSION = "0.1.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("TINYEXPR_MAX_INPUT_LENGTH", "10000"))  # characters

# Evaluation defaults
POW_FROM_RIGHT = os.getenv("TINYEXPR_POW_FROM_RIGHT", "false").lower() == "true"

# Output formatting
OUTPUT_PRECISION = int(
    os.getenv("TINYEXPR_OUTPUT_PRECISION", "12")
)  # significant digits

# Logging
LOG_LEVEL = os.getenv("TINYEXPR_LOG_LEVEL", "WARNING")

OPERATOR_CHARS = "+-*/^%!()"
SEPARATOR_CHAR = ","

NUMBER_CHAR_RE = re.compile(r"[0-9.]")
IDENT_START_RE = re.compile(r"[A-Za-z_]")
IDENT_CHAR_RE = re.compile(r"[A-Za-z0-9_]")
VAR_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
