"""Go text fragments emitted by the rewriter.

Three fragments are produced:
- the import block placed after the package clause,
- the injection block placed before each matched guard,
- the reference declarations appended at end of file so the Go compiler
  never rejects the added imports as unused.

Python 3.13+.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from errorsmith.constants import (
    ERROR_IDENTIFIER,
    FMT_PACKAGE_NAME,
    FMT_PACKAGE_PATH,
    RAND_PACKAGE_NAME,
    RAND_PACKAGE_PATH,
)

__all__ = [
    "InjectionTemplate",
    "go_string_literal",
    "import_block",
    "reference_declarations",
]


def go_string_literal(value: str) -> str:
    """Quote value as a Go interpreted string literal.

    Backslashes are escaped first to prevent double-escaping. Path bytes
    that are not valid UTF-8 (surrogate-escaped by os.fsdecode) become Go
    \\xNN byte escapes, so the literal is valid Go and valid UTF-8.

    Example:
        >>> print(go_string_literal('a "b".go'))
        "a \\"b\\".go"
        >>> print(go_string_literal(os.fsdecode(b"x\\xff.go")))
        "x\\xff.go"
    """
    escaped = value.replace("\\", "\\\\")
    escaped = escaped.replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n")
    escaped = escaped.replace("\r", "\\r")
    escaped = escaped.replace("\t", "\\t")
    escaped = os.fsencode(escaped).decode("utf-8", errors="backslashreplace")
    return f'"{escaped}"'


def import_block() -> str:
    """Aliased imports for the random source and the formatter."""
    return (
        f"\nimport {RAND_PACKAGE_NAME} {go_string_literal(RAND_PACKAGE_PATH)}"
        f"\nimport {FMT_PACKAGE_NAME} {go_string_literal(FMT_PACKAGE_PATH)}\n"
    )


def reference_declarations() -> str:
    """Blank-identifier declarations keeping the aliased imports used."""
    return f"\nvar _ = {RAND_PACKAGE_NAME}.Int\nvar _ = {FMT_PACKAGE_NAME}.Printf\n"


@dataclass(frozen=True, slots=True)
class InjectionTemplate:
    """Probability-gated error assignment placed before a guard.

    At runtime the block fires when rand.Int() % denominator == 0, so a
    denominator of 1 always fires and 20 fires about 5% of the time.

    File name and line are passed as Printf/Errorf arguments rather than
    spliced into the format string, so '%' in a path stays inert.

    Attributes:
        denominator: Modulus for the runtime coin flip (>= 1)
        trace: Emit a Printf line announcing each injected failure

    Example:
        >>> print(InjectionTemplate(denominator=20).render("main.go", 7), end="")
        if _errorsmith_rand_.Int()%20 == 0 {
        	_errorsmith_fmt_.Printf("injected error at %s:%d\\n", "main.go", 7)
        	err = _errorsmith_fmt_.Errorf("injected error at %s:%d", "main.go", 7)
        }
    """

    denominator: int
    trace: bool = True

    def __post_init__(self) -> None:
        if self.denominator < 1:
            msg = f"denominator must be >= 1, got {self.denominator}"
            raise ValueError(msg)

    def render(self, filename: str, line: int) -> str:
        """Instantiate the template for one injection site.

        Args:
            filename: Source file name baked into the message
            line: 1-based line of the guard in the original source

        Returns:
            Go statements ending in a newline
        """
        name = go_string_literal(filename)
        lines = [f"if {RAND_PACKAGE_NAME}.Int()%{self.denominator} == 0 {{"]
        if self.trace:
            lines.append(
                f'\t{FMT_PACKAGE_NAME}.Printf("injected error at %s:%d\\n", {name}, {line})'
            )
        lines.append(
            f'\t{ERROR_IDENTIFIER} = {FMT_PACKAGE_NAME}.Errorf('
            f'"injected error at %s:%d", {name}, {line})'
        )
        lines.append("}")
        return "\n".join(lines) + "\n"
