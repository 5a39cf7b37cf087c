"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure the rewriter
    can report.
    """

    _SUPPORTED_SYNTAX_HINT = "errorsmith only rewrites Go sources that gofmt accepts"

    # ------------------------------------------------------------------
    # Input errors
    # ------------------------------------------------------------------

    @staticmethod
    def source_unreadable(path: str, reason: str) -> Diagnostic:
        """Source file could not be read.

        Args:
            path: Path that was requested
            reason: Underlying OS error text

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        msg = f"Cannot read {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=msg,
            source_path=path,
        )

    @staticmethod
    def source_syntax_error(path: str, span: SourceSpan | None, node_kind: str) -> Diagnostic:
        """Go parser reported an error node.

        Args:
            path: Source file name
            span: Location of the first error node
            node_kind: "ERROR" or the name of the missing token

        Returns:
            Diagnostic for SOURCE_SYNTAX_ERROR
        """
        if node_kind == "ERROR":
            msg = "Go source could not be parsed"
        else:
            msg = f"Go source could not be parsed: missing {node_kind}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_SYNTAX_ERROR,
            message=msg,
            span=span,
            hint="Fix the syntax error before injecting faults",
            source_path=path,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Syntax tree nesting exceeds the traversal limit.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum syntax tree depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint=(
                "The input may still be valid Go; split the deepest nesting "
                "(nested blocks, closures, parentheses) or raise the limit"
            ),
        )

    # ------------------------------------------------------------------
    # Structural assumption violations
    # ------------------------------------------------------------------

    @staticmethod
    def keyword_not_found(keyword: str, start: int) -> Diagnostic:
        """Text locator reached end of buffer without a match.

        Args:
            keyword: Literal that was searched for
            start: Byte offset where the scan began

        Returns:
            Diagnostic for KEYWORD_NOT_FOUND
        """
        msg = f"Expected '{keyword}' at or after offset {start}"
        return Diagnostic(
            code=DiagnosticCode.KEYWORD_NOT_FOUND,
            message=msg,
            hint=ErrorTemplate._SUPPORTED_SYNTAX_HINT,
        )

    @staticmethod
    def unexpected_alternative(node_kind: str, span: SourceSpan | None) -> Diagnostic:
        """Else branch is neither a block nor an if statement.

        Args:
            node_kind: Kind of the offending alternative node
            span: Location of the alternative

        Returns:
            Diagnostic for UNEXPECTED_ALTERNATIVE
        """
        msg = f"Unexpected node type in else branch: {node_kind}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_ALTERNATIVE,
            message=msg,
            span=span,
            hint=ErrorTemplate._SUPPORTED_SYNTAX_HINT,
        )

    @staticmethod
    def package_clause_missing(path: str) -> Diagnostic:
        """Source file has no package clause to anchor the import block.

        Args:
            path: Source file name

        Returns:
            Diagnostic for PACKAGE_CLAUSE_MISSING
        """
        msg = "Go source has no package clause"
        return Diagnostic(
            code=DiagnosticCode.PACKAGE_CLAUSE_MISSING,
            message=msg,
            hint="Every Go file must start with 'package <name>'",
            source_path=path,
        )

    # ------------------------------------------------------------------
    # Output errors
    # ------------------------------------------------------------------

    @staticmethod
    def output_unwritable(path: str, reason: str) -> Diagnostic:
        """Output destination could not be created.

        Args:
            path: Requested output path
            reason: Underlying OS error text

        Returns:
            Diagnostic for OUTPUT_UNWRITABLE
        """
        msg = f"Cannot create {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_UNWRITABLE,
            message=msg,
            source_path=path,
        )

    @staticmethod
    def formatting_failed(detail: str) -> Diagnostic:
        """Formatter rejected the rewritten source.

        Args:
            detail: Formatter error output

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        detail = detail.strip()
        msg = "Code formatting failed with Go parse error"
        if detail:
            msg = f"{msg}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint="The unformatted rewrite was written for inspection",
        )

    @staticmethod
    def formatter_unavailable(executable: str, reason: str) -> Diagnostic:
        """Formatter executable could not be run.

        Args:
            executable: Formatter command
            reason: Why it could not run

        Returns:
            Diagnostic for FORMATTER_UNAVAILABLE
        """
        msg = f"Cannot run formatter '{executable}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_UNAVAILABLE,
            message=msg,
            hint="Install the Go toolchain or pass -gofmt PATH",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def error_percent_invalid(value: float) -> Diagnostic:
        """Error likelihood outside (0, 100].

        Args:
            value: The rejected percentage

        Returns:
            Diagnostic for ERROR_PERCENT_INVALID
        """
        msg = f"error percent must be greater than 0 and at most 100, got {value}"
        return Diagnostic(
            code=DiagnosticCode.ERROR_PERCENT_INVALID,
            message=msg,
            hint="A percentage p injects with probability 1/int(100/p)",
        )

    @staticmethod
    def error_percent_too_small(value: float, max_denominator: int) -> Diagnostic:
        """Error likelihood whose modulus overflows Go's int.

        Args:
            value: The rejected percentage
            max_denominator: Largest modulus the emitted Go can hold

        Returns:
            Diagnostic for ERROR_PERCENT_INVALID
        """
        msg = f"error percent {value} is too small: int(100/p) exceeds {max_denominator}"
        return Diagnostic(
            code=DiagnosticCode.ERROR_PERCENT_INVALID,
            message=msg,
            hint=f"Use a percentage of at least {100 / max_denominator:.3g}",
        )
