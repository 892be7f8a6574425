"""
Exception hierarchy for fitdetect.

All exceptions inherit from FitDetectError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Mapping


class FitDetectError(Exception):
    """Base exception for all fitdetect errors."""
    pass


class ValidationError(FitDetectError):
    """
    Input validation failed.

    Raised when user-provided inputs or configuration values fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired sequences have different lengths.

    Raised for error-metric inputs (observed vs predicted) and for sample
    sets whose x and y do not pair up index by index.

    Attributes:
        lengths: Length of each offending sequence, in argument order
        names: Parameter names matching ``lengths``
    """

    def __init__(
        self,
        message: str,
        lengths: tuple[int, ...] | None = None,
        names: tuple[str, ...] | None = None,
    ):
        super().__init__(message)
        self.lengths = lengths
        self.names = names


class UnknownMetricError(ValidationError):
    """
    Error-metric selector is not recognised.

    Attributes:
        metric: The rejected value
        valid: Accepted metric names
    """

    def __init__(
        self,
        message: str,
        metric: object = None,
        valid: tuple[str, ...] | None = None,
    ):
        super().__init__(message)
        self.metric = metric
        self.valid = valid


class InvalidWindowError(ValidationError):
    """
    Smoothing window is not a positive integer.

    Attributes:
        window: The rejected window value
    """

    def __init__(self, message: str, window: object = None):
        super().__init__(message)
        self.window = window


class NumericalError(FitDetectError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateRangeError(NumericalError):
    """
    Values have zero range (max == min), so they cannot be rescaled.

    Attributes:
        value: The constant value shared by every element
        name: Parameter name of the offending sequence, if known
    """

    def __init__(
        self,
        message: str,
        value: float | None = None,
        name: str | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.name = name


class NoValidFitError(NumericalError):
    """
    Every candidate family produced an invalid (NaN) error.

    Attributes:
        errors: Family name -> error mapping that was reduced
    """

    def __init__(self, message: str, errors: Mapping[str, float] | None = None):
        super().__init__(message)
        self.errors = dict(errors) if errors is not None else {}
