"""Diagnostic system for errorsmith errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ConfigurationError,
    ErrorsmithError,
    FormattingError,
    GoSyntaxError,
    InputError,
    OutputError,
    StructuralAssumptionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ErrorsmithError",
    "FormattingError",
    "GoSyntaxError",
    "InputError",
    "OutputError",
    "OutputFormat",
    "SourceSpan",
    "StructuralAssumptionError",
]
