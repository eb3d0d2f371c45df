"""Shared constants for icuformatter.

Centralized configuration constants used across the syntax and runtime
packages. Placing them here avoids circular imports.

Constants are grouped by domain:
- Depth limits: Recursion protection for handler-driven recursion
- Cache limits: Memory bounds for caching subsystems

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Syntax
    "OPEN_BRACE",
    "CLOSE_BRACE",
    "FIELD_SEPARATOR",
    "MAX_FIELDS",
    "NOT_FOUND",
    # Case labels
    "OTHER_CASE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum number of nested recurse() calls a handler chain may make while
# formatting a single message. Top-level placeholders are processed
# iteratively and do not count against this limit; only case bodies that a
# handler hands back to the engine do.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum cache entries for format() results.
DEFAULT_CACHE_SIZE: int = 1000

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# SYNTAX
# ============================================================================

OPEN_BRACE: str = "{"
CLOSE_BRACE: str = "}"
FIELD_SEPARATOR: str = ","

# key, type, format
MAX_FIELDS: int = 3

# Sentinel returned by bracket matching when no closing brace exists.
NOT_FOUND: int = -1

# ============================================================================
# CASE LABELS
# ============================================================================

# Fallback case for branch-based handlers (plural, select).
OTHER_CASE: str = "other"
