"""Command-line interface.

Usage:
    errorsmith file.go
    errorsmith -o out.go -error-percent 10 file.go
    errorsmith -diagnostics json file.go

Exit Codes:
    0   Rewrite written and formatted
    1   Input, structural or output error; or formatting failed (the
        unformatted rewrite is still written)
    2   Usage or configuration error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from errorsmith.config import InjectionConfig, RunConfig
from errorsmith.constants import DEFAULT_ERROR_PERCENT, DEFAULT_GOFMT
from errorsmith.diagnostics import (
    ConfigurationError,
    DiagnosticFormatter,
    ErrorsmithError,
    ErrorTemplate,
    OutputError,
    OutputFormat,
)
from errorsmith.engine import inject_file

__all__ = ["build_parser", "main", "write_output"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_DESCRIPTION = "Randomly inject errors into a Go file."

_EPILOG = """
Every `if err != nil` / `if err == nil` without an initializer is preceded
by a block that, with the given likelihood, assigns a synthetic error to
err at runtime.

Examples:
  errorsmith main.go
  errorsmith -o main_faulty.go -error-percent 10 main.go
  errorsmith -diagnostics json main.go
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (single-dash long flags, Go style)."""
    parser = argparse.ArgumentParser(
        prog="errorsmith",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Go source file to transform",
    )
    parser.add_argument(
        "-o",
        dest="output",
        type=Path,
        default=None,
        metavar="PATH",
        help="file for output; default: stdout",
    )
    parser.add_argument(
        "-error-percent",
        dest="error_percent",
        type=float,
        default=DEFAULT_ERROR_PERCENT,
        metavar="PERCENT",
        help=f"percent error likelihood per guard (default: {DEFAULT_ERROR_PERCENT:g})",
    )
    parser.add_argument(
        "-no-trace",
        dest="trace",
        action="store_false",
        help="omit the Printf trace line from injected blocks",
    )
    parser.add_argument(
        "-gofmt",
        dest="gofmt",
        default=DEFAULT_GOFMT,
        metavar="PATH",
        help=f"formatter executable (default: {DEFAULT_GOFMT})",
    )
    parser.add_argument(
        "-diagnostics",
        dest="diagnostics",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.RUST,
        metavar="FORMAT",
        help="error report style: rust, simple or json (default: rust)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug details to stderr",
    )
    return parser


def _report(error: ErrorsmithError, formatter: DiagnosticFormatter) -> None:
    if error.diagnostic is None:
        sys.stderr.write(f"errorsmith: {error}\n")
    elif formatter.output_format is OutputFormat.JSON:
        # One JSON object per line, unprefixed, for tooling
        sys.stderr.write(formatter.format(error.diagnostic) + "\n")
    else:
        sys.stderr.write(f"errorsmith: {formatter.format(error.diagnostic)}\n")


def write_output(content: bytes, output_path: Path | None) -> None:
    """Write content to output_path, or standard output when None.

    Raises:
        OutputError: If the destination cannot be created or written
    """
    if output_path is None:
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
        return
    try:
        output_path.write_bytes(content)
    except OSError as e:
        raise OutputError(
            ErrorTemplate.output_unwritable(str(output_path), e.strerror or str(e))
        ) from e


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    formatter = DiagnosticFormatter(
        output_format=args.diagnostics,
        color=args.diagnostics is OutputFormat.RUST and sys.stderr.isatty(),
    )

    if args.file is None:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        run = RunConfig(
            source_path=args.file,
            output_path=args.output,
            injection=InjectionConfig(
                error_percent=args.error_percent,
                trace=args.trace,
                gofmt=args.gofmt,
            ),
        )
    except ConfigurationError as e:
        _report(e, formatter)
        return EXIT_USAGE

    try:
        result = inject_file(run.source_path, run.injection)
        write_output(result.content, run.output_path)
    except ErrorsmithError as e:
        _report(e, formatter)
        return EXIT_FAILURE

    if result.formatting_error is not None:
        _report(result.formatting_error, formatter)
        return EXIT_FAILURE

    logger.debug("Wrote %d bytes (%d site(s))", len(result.content), len(result.sites))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
