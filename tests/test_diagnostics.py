"""Tests for the diagnostics package: codes, templates, formatter, errors.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from errorsmith.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorsmithError,
    ErrorTemplate,
    FormattingError,
    GoSyntaxError,
    InputError,
    OutputError,
    OutputFormat,
    SourceSpan,
    StructuralAssumptionError,
)

# ============================================================================
# Codes and Spans
# ============================================================================


class TestDiagnosticCode:
    """Test code ranges."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.SOURCE_SYNTAX_ERROR, 1000),
            (DiagnosticCode.KEYWORD_NOT_FOUND, 2000),
            (DiagnosticCode.FORMATTING_FAILED, 3000),
            (DiagnosticCode.ERROR_PERCENT_INVALID, 4000),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int) -> None:
        assert low <= code.value < low + 1000


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid(self) -> None:
        span = SourceSpan(start=3, end=5, line=1, column=4)
        assert span.end - span.start == 2

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 4, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# Templates
# ============================================================================


class TestErrorTemplate:
    """Test message construction."""

    def test_source_unreadable(self) -> None:
        diagnostic = ErrorTemplate.source_unreadable("x.go", "No such file or directory")

        assert diagnostic.code == DiagnosticCode.SOURCE_UNREADABLE
        assert diagnostic.message == "Cannot read x.go: No such file or directory"
        assert diagnostic.source_path == "x.go"

    def test_source_syntax_error_variants(self) -> None:
        span = SourceSpan(start=0, end=1, line=2, column=3)
        generic = ErrorTemplate.source_syntax_error("a.go", span, "ERROR")
        missing = ErrorTemplate.source_syntax_error("a.go", span, "}")

        assert generic.message == "Go source could not be parsed"
        assert missing.message == "Go source could not be parsed: missing }"
        assert generic.span == span

    def test_keyword_not_found(self) -> None:
        diagnostic = ErrorTemplate.keyword_not_found("else", 42)

        assert diagnostic.message == "Expected 'else' at or after offset 42"
        assert diagnostic.hint is not None

    def test_formatting_failed_with_detail(self) -> None:
        diagnostic = ErrorTemplate.formatting_failed("  <standard input>:3:1: expected '}'\n")

        assert diagnostic.message == (
            "Code formatting failed with Go parse error: <standard input>:3:1: expected '}'"
        )

    def test_formatting_failed_without_detail(self) -> None:
        diagnostic = ErrorTemplate.formatting_failed("   ")

        assert diagnostic.message == "Code formatting failed with Go parse error"

    def test_formatter_unavailable(self) -> None:
        diagnostic = ErrorTemplate.formatter_unavailable("/opt/gofmt", "not found")

        assert diagnostic.code == DiagnosticCode.FORMATTER_UNAVAILABLE
        assert "/opt/gofmt" in diagnostic.message

    def test_error_percent_invalid(self) -> None:
        diagnostic = ErrorTemplate.error_percent_invalid(0.0)

        assert diagnostic.code == DiagnosticCode.ERROR_PERCENT_INVALID
        assert diagnostic.message.endswith("got 0.0")

    def test_error_percent_too_small(self) -> None:
        diagnostic = ErrorTemplate.error_percent_too_small(1e-20, 2**63 - 1)

        assert diagnostic.code == DiagnosticCode.ERROR_PERCENT_INVALID
        assert "too small" in diagnostic.message
        assert diagnostic.hint is not None
        assert "1.08e-17" in diagnostic.hint


# ============================================================================
# Formatter
# ============================================================================


class TestDiagnosticFormatter:
    """Test Rust, simple and JSON rendering."""

    def _diagnostic(self) -> Diagnostic:
        return ErrorTemplate.source_syntax_error(
            "main.go", SourceSpan(start=10, end=11, line=3, column=9), "ERROR"
        )

    def test_rust_format(self) -> None:
        text = DiagnosticFormatter().format(self._diagnostic())

        assert text == (
            "error[SOURCE_SYNTAX_ERROR]: Go source could not be parsed\n"
            "  --> main.go:3:9\n"
            "  = help: Fix the syntax error before injecting faults"
        )

    def test_rust_format_span_without_path(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNEXPECTED_ALTERNATIVE,
            message="m",
            span=SourceSpan(start=0, end=0, line=2, column=5),
        )

        assert "  --> line 2, column 5" in DiagnosticFormatter().format(diagnostic)

    def test_rust_format_path_without_span(self) -> None:
        text = DiagnosticFormatter().format(ErrorTemplate.output_unwritable("/x/y.go", "denied"))

        assert text.splitlines()[1] == "  --> /x/y.go"

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self._diagnostic()) == (
            "SOURCE_SYNTAX_ERROR: Go source could not be parsed"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._diagnostic()))

        assert data["code"] == "SOURCE_SYNTAX_ERROR"
        assert data["code_value"] == 1002
        assert data["line"] == 3
        assert data["column"] == 9
        assert data["source_path"] == "main.go"

    def test_color_format(self) -> None:
        text = DiagnosticFormatter(color=True).format(self._diagnostic())

        assert text.startswith("\033[1;31merror\033[0m[SOURCE_SYNTAX_ERROR]")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED, message="m", severity="warning"
        )

        assert DiagnosticFormatter().format(diagnostic).startswith("warning[")

    def test_format_error_matches_default_formatter(self) -> None:
        diagnostic = self._diagnostic()

        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
        assert str(diagnostic) == diagnostic.message


@given(st.sampled_from(list(OutputFormat)), st.text(max_size=40))
def test_property_every_format_mentions_code(output_format: OutputFormat, message: str) -> None:
    """Property: every output format names the diagnostic code."""
    event(f"format={output_format.value}")
    diagnostic = Diagnostic(code=DiagnosticCode.KEYWORD_NOT_FOUND, message=message)

    assert "KEYWORD_NOT_FOUND" in DiagnosticFormatter(output_format=output_format).format(
        diagnostic
    )


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptionHierarchy:
    """Test error classes and the diagnostics they carry."""

    @pytest.mark.parametrize(
        ("error_type", "base"),
        [
            (InputError, ErrorsmithError),
            (GoSyntaxError, InputError),
            (StructuralAssumptionError, ErrorsmithError),
            (OutputError, ErrorsmithError),
            (FormattingError, ErrorsmithError),
            (ConfigurationError, ErrorsmithError),
            (ConfigurationError, ValueError),
        ],
    )
    def test_subclassing(self, error_type: type[Exception], base: type[Exception]) -> None:
        assert issubclass(error_type, base)

    def test_plain_message(self) -> None:
        error = ErrorsmithError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.source_unreadable("x.go", "gone")
        error = InputError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_structural_assumption_fields(self) -> None:
        error = StructuralAssumptionError("missing", position=12, keyword="else")

        assert error.position == 12
        assert error.keyword == "else"
        assert StructuralAssumptionError("x", position=0).keyword is None
