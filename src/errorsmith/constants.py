"""Shared constants for errorsmith.

Centralized names and limits used across the syntax, rewrite and CLI layers.
Placing them here avoids circular imports and keeps the emitted Go
identifiers in one place.

Constants are grouped by domain:
- Depth limits: Recursion protection for lowering and traversal
- Guard shape: The reserved identifiers the matcher recognizes
- Emitted Go: Import aliases and paths injected into rewritten sources
- Defaults: CLI and configuration defaults

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Guard shape
    "ERROR_IDENTIFIER",
    "GUARD_OPERATORS",
    "ELSE_KEYWORD",
    # Emitted Go
    "RAND_PACKAGE_PATH",
    "RAND_PACKAGE_NAME",
    "FMT_PACKAGE_PATH",
    "FMT_PACKAGE_NAME",
    "MAX_DENOMINATOR",
    # Defaults
    "DEFAULT_ERROR_PERCENT",
    "DEFAULT_GOFMT",
    "GOFMT_TIMEOUT_SECONDS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum syntax tree depth for lowering and visiting.
# Each level costs two Python frames in the visitor (visit + generic_visit),
# so 256 stays well inside the default recursion limit of 1000.
# Real Go files rarely exceed 60 levels of concrete-tree nesting.
MAX_DEPTH: int = 256

# ============================================================================
# GUARD SHAPE
# ============================================================================

# Only `err` is treated as the error-carrying value. Other names are not
# candidates, trading recall for precision.
ERROR_IDENTIFIER: str = "err"
GUARD_OPERATORS: frozenset[str] = frozenset({"==", "!="})

ELSE_KEYWORD: str = "else"

# ============================================================================
# EMITTED GO
# ============================================================================

# Aliases are deliberately ugly so they cannot collide with user imports.
RAND_PACKAGE_PATH: str = "math/rand"
RAND_PACKAGE_NAME: str = "_errorsmith_rand_"

FMT_PACKAGE_PATH: str = "fmt"
FMT_PACKAGE_NAME: str = "_errorsmith_fmt_"

# The modulus is an untyped Go constant compared against rand.Int(); it must
# fit in int (math.MaxInt64) or the rewritten file does not compile.
MAX_DENOMINATOR: int = 2**63 - 1

# ============================================================================
# DEFAULTS
# ============================================================================

# 5 percent yields a denominator of 20.
DEFAULT_ERROR_PERCENT: float = 5.0

DEFAULT_GOFMT: str = "gofmt"

GOFMT_TIMEOUT_SECONDS: float = 30.0
