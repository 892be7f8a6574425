"""
Core infrastructure for fitdetect.

This module provides shared abstractions and utilities used by the
domain-specific submodules (preprocessing, metrics, selection).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: FitConfig and ErrorMetric
    compute: Timing utilities
"""

from fitdetect.core.result import Result
from fitdetect.core.config import FitConfig, ErrorMetric
from fitdetect.core.exceptions import (
    FitDetectError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    UnknownMetricError,
    InvalidWindowError,
    NumericalError,
    DegenerateRangeError,
    NoValidFitError,
)

__all__ = [
    # Result
    "Result",
    # Configuration
    "FitConfig",
    "ErrorMetric",
    # Exceptions
    "FitDetectError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "UnknownMetricError",
    "InvalidWindowError",
    "NumericalError",
    "DegenerateRangeError",
    "NoValidFitError",
]
