"""Engine entry points.

Pipeline for one source file:

    read -> parse -> insert import block -> visit guards and else chains
         -> materialize -> append references -> format

Everything is scoped to a single call; no state survives between runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from errorsmith.config import InjectionConfig
from errorsmith.diagnostics import ErrorTemplate, FormattingError, GoSyntaxError, InputError
from errorsmith.emitter import Emitter, GofmtFormatter, SourceFormatter
from errorsmith.rewrite import (
    EditBuffer,
    GuardInjector,
    InjectionSite,
    InjectionTemplate,
    import_block,
)
from errorsmith.syntax import GoParser

__all__ = ["InjectionResult", "inject_file", "inject_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InjectionResult:
    """Outcome of one rewrite.

    Attributes:
        content: Output bytes (formatted, or raw if formatting failed)
        sites: Instrumented guards in source order
        formatting_error: Formatter failure, None on success
    """

    content: bytes
    sites: tuple[InjectionSite, ...]
    formatting_error: FormattingError | None = None

    @property
    def ok(self) -> bool:
        """True when the output was canonicalized."""
        return self.formatting_error is None


def inject_source(
    source: bytes,
    filename: str,
    config: InjectionConfig | None = None,
    *,
    formatter: SourceFormatter | None = None,
) -> InjectionResult:
    """Rewrite Go source with probabilistic fault injection.

    Args:
        source: Original Go source bytes
        filename: Name baked into injected messages and diagnostics
        config: Injection settings (default: InjectionConfig())
        formatter: Formatter override (default: gofmt from config)

    Returns:
        InjectionResult

    Raises:
        GoSyntaxError: If the source does not parse or has no package clause
        StructuralAssumptionError: If an expected landmark is missing
        DepthLimitExceededError: If nesting is too deep to traverse
    """
    config = config if config is not None else InjectionConfig()

    tree = GoParser().parse(source, filename)
    if tree.package is None:
        raise GoSyntaxError(ErrorTemplate.package_clause_missing(filename))

    buffer = EditBuffer(source)
    buffer.insert(tree.package.span.end, import_block())

    template = InjectionTemplate(denominator=config.denominator, trace=config.trace)
    injector = GuardInjector(buffer, filename, template)
    injector.visit(tree)

    logger.info(
        "Instrumented %d guard(s) in %s (1 in %d)",
        len(injector.sites),
        filename,
        config.denominator,
    )

    emitter = Emitter(formatter if formatter is not None else GofmtFormatter(config.gofmt))
    emitted = emitter.emit(buffer)
    return InjectionResult(
        content=emitted.content,
        sites=injector.sites,
        formatting_error=emitted.formatting_error,
    )


def inject_file(
    path: str | Path,
    config: InjectionConfig | None = None,
    *,
    formatter: SourceFormatter | None = None,
) -> InjectionResult:
    """Read a Go file and rewrite it.

    The path is used verbatim as the file name in injected messages.

    Raises:
        InputError: If the file cannot be read
        GoSyntaxError: If the file does not parse
    """
    name = str(path)
    try:
        source = Path(path).read_bytes()
    except OSError as e:
        raise InputError(ErrorTemplate.source_unreadable(name, e.strerror or str(e))) from e

    logger.debug("Read %d bytes from %s", len(source), name)
    return inject_source(source, name, config, formatter=formatter)
