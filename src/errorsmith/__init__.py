"""errorsmith - probabilistic fault injection for Go error guards.

Rewrites a Go source file so that every `if err != nil` / `if err == nil`
guard without an initializer is preceded by a block that, at runtime and
with a configured likelihood, assigns a synthetic error to err. The
rewritten program exercises error-handling paths tests rarely reach.

Public API:
    inject_source - Rewrite Go source bytes
    inject_file - Read and rewrite a Go file
    InjectionConfig - Error likelihood, trace and formatter settings
    InjectionResult - Output bytes, instrumented sites, formatting failure

Exceptions:
    ErrorsmithError - Base exception class
    InputError / GoSyntaxError - Unreadable or unparseable source
    StructuralAssumptionError - Internal-consistency failure while rewriting
    OutputError - Output destination could not be written
    FormattingError - gofmt rejected or could not format the rewrite
    ConfigurationError - Invalid configuration

Submodules:
    errorsmith.syntax - tree-sitter adapter, AST, visitor
    errorsmith.rewrite - Edit buffer, locator, matcher, normalizer
    errorsmith.emitter - Materialization and gofmt
    errorsmith.cli - Command-line entry point
"""

from .config import InjectionConfig
from .diagnostics import (
    ConfigurationError,
    ErrorsmithError,
    FormattingError,
    GoSyntaxError,
    InputError,
    OutputError,
    StructuralAssumptionError,
)
from .engine import InjectionResult, inject_file, inject_source

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("errorsmith")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "ErrorsmithError",
    "FormattingError",
    "GoSyntaxError",
    "InjectionConfig",
    "InjectionResult",
    "InputError",
    "OutputError",
    "StructuralAssumptionError",
    "__version__",
    "inject_file",
    "inject_source",
]
