"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (unreadable or unparseable source)
        2000-2999: Structural assumption violations during rewriting
        3000-3999: Output errors (destination and formatting)
        4000-4999: Configuration errors
    """

    # Input errors (1000-1999)
    SOURCE_UNREADABLE = 1001
    SOURCE_SYNTAX_ERROR = 1002
    MAX_DEPTH_EXCEEDED = 1003
    PACKAGE_CLAUSE_MISSING = 1004

    # Structural assumption violations (2000-2999)
    KEYWORD_NOT_FOUND = 2001
    UNEXPECTED_ALTERNATIVE = 2002

    # Output errors (3000-3999)
    OUTPUT_UNWRITABLE = 3001
    FORMATTING_FAILED = 3002
    FORMATTER_UNAVAILABLE = 3003

    # Configuration errors (4000-4999)
    ERROR_PERCENT_INVALID = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed, in bytes)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no offset applies)
        hint: Suggestion for fixing the error
        source_path: File the diagnostic refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[KEYWORD_NOT_FOUND]: Expected 'else' at or after offset 42
              --> main.go:7:3
              = help: The rewriter only supports gofmt-compatible Go syntax

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
