"""Tests for config.py: error percent validation and denominators.

Python 3.13+.
"""

from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from errorsmith.config import InjectionConfig, RunConfig
from errorsmith.constants import DEFAULT_ERROR_PERCENT, DEFAULT_GOFMT, MAX_DENOMINATOR
from errorsmith.diagnostics import ConfigurationError, DiagnosticCode


class TestInjectionConfigDefaults:
    """Test default values."""

    def test_defaults(self) -> None:
        config = InjectionConfig()

        assert config.error_percent == DEFAULT_ERROR_PERCENT
        assert config.trace is True
        assert config.gofmt == DEFAULT_GOFMT
        assert config.denominator == 20

    def test_frozen(self) -> None:
        config = InjectionConfig()

        with pytest.raises(AttributeError):
            config.error_percent = 10  # type: ignore[misc]


class TestDenominator:
    """Test int(100 / error_percent)."""

    @pytest.mark.parametrize(
        ("percent", "denominator"),
        [
            (100, 1),
            (50, 2),
            (33, 3),
            (10, 10),
            (5, 20),
            (3, 33),
            (0.1, 1000),
            (0.01, 10000),
            (99.9, 1),
        ],
    )
    def test_denominator(self, percent: float, denominator: int) -> None:
        assert InjectionConfig(error_percent=percent).denominator == denominator


class TestValidation:
    """Test rejection of unusable percentages."""

    @pytest.mark.parametrize(
        "percent",
        [0, -1, -100, 100.5, 1000, math.nan, math.inf, -math.inf, sys.float_info.min / 2, 1e-20],
    )
    def test_rejected(self, percent: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            InjectionConfig(error_percent=percent)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.ERROR_PERCENT_INVALID

    def test_denominator_must_fit_go_int(self) -> None:
        """A modulus above math.MaxInt64 would not compile as a Go int."""
        with pytest.raises(ConfigurationError, match="too small"):
            InjectionConfig(error_percent=1e-17)

        assert InjectionConfig(error_percent=1e-16).denominator <= MAX_DENOMINATOR

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="error percent"):
            InjectionConfig(error_percent=0)


class TestRunConfig:
    """Test the CLI run configuration."""

    def test_defaults(self) -> None:
        run = RunConfig(source_path=Path("main.go"))

        assert run.output_path is None
        assert run.injection == InjectionConfig()

    def test_explicit_values(self) -> None:
        injection = InjectionConfig(error_percent=50, trace=False)
        run = RunConfig(Path("a.go"), Path("b.go"), injection)

        assert run.injection.denominator == 2
        assert run.output_path == Path("b.go")


@given(st.floats(min_value=1e-6, max_value=100, allow_nan=False, allow_infinity=False))
def test_property_denominator_in_range(percent: float) -> None:
    """Property: every accepted percent gives a denominator of at least 1."""
    event(f"percent={'tiny' if percent < 1 else 'whole'}")

    config = InjectionConfig(error_percent=percent)

    assert config.denominator >= 1
    assert config.denominator == int(100 / percent)


@given(st.floats(max_value=0, allow_nan=False))
def test_property_non_positive_rejected(percent: float) -> None:
    """Property: zero and negative percentages never validate."""
    with pytest.raises(ConfigurationError):
        InjectionConfig(error_percent=percent)
