"""Run configuration.

Explicit, immutable configuration values passed into the engine entry
points. Nothing in the rewriting core reads flags or environment state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

from errorsmith.constants import DEFAULT_ERROR_PERCENT, DEFAULT_GOFMT, MAX_DENOMINATOR
from errorsmith.diagnostics import ConfigurationError, ErrorTemplate

__all__ = ["InjectionConfig", "RunConfig"]


@dataclass(frozen=True, slots=True)
class InjectionConfig:
    """Immutable configuration for fault injection.

    Attributes:
        error_percent: Likelihood (0 < p <= 100) that a matched guard
            injects a failure at runtime (default: 5).
        trace: Emit a Printf trace line in each injected block
            (default: True).
        gofmt: Formatter executable (default: "gofmt").

    Example:
        >>> InjectionConfig(error_percent=5).denominator
        20
        >>> InjectionConfig(error_percent=100).denominator
        1
        >>> InjectionConfig(error_percent=0)
        Traceback (most recent call last):
        ...
        errorsmith.diagnostics.errors.ConfigurationError: ...
    """

    error_percent: float = DEFAULT_ERROR_PERCENT
    trace: bool = True
    gofmt: str = DEFAULT_GOFMT

    def __post_init__(self) -> None:
        """Validate error_percent at construction time.

        Raises:
            ConfigurationError: If error_percent is not finite, not
                positive, or yields a denominator outside [1, MAX_DENOMINATOR].
        """
        percent = self.error_percent
        if not math.isfinite(percent) or percent <= 0:
            raise ConfigurationError(ErrorTemplate.error_percent_invalid(percent))
        ratio = 100 / percent
        # Above 100 the ratio rounds to 0
        if math.isfinite(ratio) and int(ratio) < 1:
            raise ConfigurationError(ErrorTemplate.error_percent_invalid(percent))
        # The modulus is emitted as a Go int constant; subnormal inputs
        # overflow the ratio outright
        if not math.isfinite(ratio) or int(ratio) > MAX_DENOMINATOR:
            raise ConfigurationError(
                ErrorTemplate.error_percent_too_small(percent, MAX_DENOMINATOR)
            )

    @property
    def denominator(self) -> int:
        """Modulus for the runtime coin flip: int(100 / error_percent)."""
        return int(100 / self.error_percent)


@dataclass(frozen=True, slots=True)
class RunConfig:
    """One CLI invocation: source, destination and injection settings.

    Attributes:
        source_path: Go file to transform
        output_path: Destination file, or None for standard output
        injection: Injection settings
    """

    source_path: Path
    output_path: Path | None = None
    injection: InjectionConfig = field(default_factory=InjectionConfig)
