"""Shared constants for combiparse.

Centralized configuration constants used across the syntax and diagnostics
packages. Placing them here avoids circular imports and gives a single
source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Nesting limits: Stack overflow prevention for recursive grammars
- Labels: Display defaults for diagnostics

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Nesting limits
    "MAX_NESTING_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    # Labels
    "DEFAULT_LABEL",
    "MAX_DISPLAY_LENGTH",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# The whole input is materialized before parsing, so this bounds memory.
# Pass max_source_size=0 to run() to disable the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# NESTING LIMITS
# ============================================================================

# Default maximum number of nested lazy() entries active at once.
# Each lazy() re-entry is one level, so a JSON value inside 99 arrays sits at
# depth 100. Pass max_nesting_depth to run() to change it.
MAX_NESTING_DEPTH: int = 100

# Python frames reserved per nesting level when run() raises the interpreter
# recursion limit. One level of a grammar like JSON is a chain of roughly ten
# Parser calls, two frames each.
FRAMES_PER_NESTING_LEVEL: int = 64

# ============================================================================
# LABELS
# ============================================================================

# Display label for parsers built from a raw function without a name.
DEFAULT_LABEL: str = "unknown"

# Maximum label/message length in sanitized formatter output.
MAX_DISPLAY_LENGTH: int = 100
