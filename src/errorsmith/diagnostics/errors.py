"""errorsmith exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ErrorsmithError(Exception):
    """Base exception for all errorsmith errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ErrorsmithError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InputError(ErrorsmithError):
    """Source file could not be read or parsed.

    Fatal: raised before any output is produced.
    """


class GoSyntaxError(InputError):
    """Go parser reported an error in the original source."""


class StructuralAssumptionError(ErrorsmithError):
    """Rewriter met a syntactic shape it assumes cannot occur.

    This is an internal-consistency failure, not a recoverable input
    condition. The run aborts.

    Attributes:
        position: Byte offset where the assumption failed
        keyword: Landmark that was expected, if any
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int,
        keyword: str | None = None,
    ) -> None:
        """Initialize StructuralAssumptionError.

        Args:
            message: Error message string OR Diagnostic object
            position: Byte offset where the assumption failed
            keyword: Landmark that was expected, if any
        """
        super().__init__(message)
        self.position = position
        self.keyword = keyword


class OutputError(ErrorsmithError):
    """Output destination could not be created or written."""


class FormattingError(ErrorsmithError):
    """Formatter rejected the rewritten source.

    Recoverable for output purposes: callers still write the unformatted
    text, then report the run as failed.
    """


class ConfigurationError(ErrorsmithError, ValueError):
    """Invalid run configuration (for example an unusable error percent)."""
