"""Output emission.

Materializes the edit buffer, appends the reference declarations that keep
the injected imports used, and canonicalizes the result with gofmt.

A formatter failure does not lose the output: the raw rewrite is returned
together with the FormattingError so callers can write it for inspection
and still report the run as failed.

Python 3.13+.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

from errorsmith.constants import DEFAULT_GOFMT, GOFMT_TIMEOUT_SECONDS
from errorsmith.diagnostics import ErrorTemplate, FormattingError
from errorsmith.rewrite.buffer import EditBuffer
from errorsmith.rewrite.templates import reference_declarations

__all__ = ["EmitResult", "Emitter", "GofmtFormatter", "SourceFormatter"]

logger = logging.getLogger(__name__)


class SourceFormatter(Protocol):
    """Canonicalizes Go source; raises FormattingError on failure."""

    def format(self, source: bytes) -> bytes: ...


@dataclass(frozen=True, slots=True)
class GofmtFormatter:
    """Run gofmt over standard input.

    Attributes:
        executable: gofmt command or path
        timeout: Seconds before the formatter is abandoned
    """

    executable: str = DEFAULT_GOFMT
    timeout: float = GOFMT_TIMEOUT_SECONDS

    def format(self, source: bytes) -> bytes:
        """Format source with gofmt.

        Raises:
            FormattingError: If gofmt rejects the source, cannot be started
                or times out
        """
        try:
            completed = subprocess.run(
                [self.executable],
                input=source,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            reason = f"timed out after {self.timeout}s"
            raise FormattingError(ErrorTemplate.formatter_unavailable(self.executable, reason)) from e
        except OSError as e:
            raise FormattingError(ErrorTemplate.formatter_unavailable(self.executable, str(e))) from e

        if completed.returncode != 0:
            detail = completed.stderr.decode("utf-8", errors="replace")
            raise FormattingError(ErrorTemplate.formatting_failed(detail))
        return completed.stdout


@dataclass(frozen=True, slots=True)
class EmitResult:
    """Emitted bytes plus the formatting failure, if any.

    Attributes:
        content: Formatted source, or the raw rewrite when formatting failed
        formatting_error: The formatter's error, None on success
    """

    content: bytes
    formatting_error: FormattingError | None = None

    @property
    def ok(self) -> bool:
        """True when the content was canonicalized."""
        return self.formatting_error is None


class Emitter:
    """Turn an edit buffer into final output bytes."""

    __slots__ = ("_formatter",)

    def __init__(self, formatter: SourceFormatter | None = None) -> None:
        self._formatter = formatter if formatter is not None else GofmtFormatter()

    def emit(self, buffer: EditBuffer) -> EmitResult:
        """Materialize, append reference declarations and format.

        Args:
            buffer: Edit buffer populated by the traversal

        Returns:
            EmitResult with formatted content, or raw content and the
            formatting error
        """
        content = buffer.materialize() + reference_declarations().encode("utf-8")

        try:
            formatted = self._formatter.format(content)
        except FormattingError as e:
            logger.warning("Formatting failed; emitting unformatted source: %s", e)
            return EmitResult(content=content, formatting_error=e)

        logger.debug("Formatted %d bytes into %d bytes", len(content), len(formatted))
        return EmitResult(content=formatted)
