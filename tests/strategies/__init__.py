"""Hypothesis strategies for errorsmith property-based testing.

Strategies are organized by domain:

- go: Go source files and statements with known guard counts

Usage:
    from tests.strategies import go_source_files
    from tests.strategies.go import go_statements, GoFragment

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - go_statements, go_source_files
"""

from .go import (
    STATEMENT_SHAPES,
    GoFragment,
    go_blocks,
    go_source_files,
    go_statements,
)

__all__ = [
    "STATEMENT_SHAPES",
    "GoFragment",
    "go_blocks",
    "go_source_files",
    "go_statements",
]
