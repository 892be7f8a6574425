"""
Configuration for model selection.

FitConfig is an immutable value passed explicitly into every call that
needs it. Nothing in fitdetect reads or writes module-level settings, so a
single FitConfig can be shared freely between calls.

Usage:
    from fitdetect.core.config import FitConfig, ErrorMetric

    config = FitConfig(error_metric='RMSE', always_normalize=True)
    stricter = config.replace(epsilon=1e-9)
"""

from __future__ import annotations

from dataclasses import dataclass, replace as _dataclass_replace
from enum import Enum
import numbers
import numpy as np

from fitdetect.core.exceptions import (
    InvalidWindowError,
    UnknownMetricError,
    ValidationError,
)


class ErrorMetric(str, Enum):
    """Scalar discrepancy between observed and predicted values."""

    MSE = 'MSE'
    RMSE = 'RMSE'
    MAE = 'MAE'

    @classmethod
    def resolve(cls, metric: ErrorMetric | str) -> ErrorMetric:
        """
        Resolve a metric argument to an ErrorMetric member.

        Strings are matched case-insensitively against member values.

        Raises:
            UnknownMetricError: If metric is not one of MSE, RMSE, MAE.
        """
        if isinstance(metric, cls):
            return metric
        valid = tuple(m.value for m in cls)
        if isinstance(metric, str):
            key = metric.strip().upper()
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownMetricError(
            f"Unknown error metric: {metric!r}. Valid metrics: {', '.join(valid)}",
            metric=metric,
            valid=valid,
        )

    def __str__(self) -> str:
        return self.value


DEFAULT_EPSILON = 1e-12
DEFAULT_SMOOTHING_WINDOW = 3


def check_window(window: object, name: str = 'window') -> int:
    """
    Validate a moving-average window.

    Returns:
        The window as a plain int

    Raises:
        InvalidWindowError: If window is not an integer >= 1
    """
    if isinstance(window, bool) or not isinstance(window, numbers.Integral):
        raise InvalidWindowError(
            f"{name}: expected a positive integer, got {window!r}",
            window=window,
        )
    if window < 1:
        raise InvalidWindowError(
            f"{name}: must be >= 1, got {window}",
            window=window,
        )
    return int(window)


@dataclass(frozen=True)
class FitConfig:
    """
    Immutable model-selection configuration.

    Attributes:
        error_metric: Metric used to score every family (default MSE).
            Strings are resolved to ErrorMetric at construction.
        always_normalize: Min-max normalize both x and y before fitting.
        epsilon: Replacement for normalized values that land exactly on 0,
            keeping later log/reciprocal transforms finite. Must be > 0.
        smoothing_window: Window for the moving-average stage.
        smooth: Apply the moving average to y before fitting. Off unless
            explicitly requested.

    Raises:
        UnknownMetricError: If error_metric is not recognised
        ValidationError: If epsilon is not a positive finite number, or a
            flag is not a bool
        InvalidWindowError: If smoothing_window is not an integer >= 1
    """
    error_metric: ErrorMetric = ErrorMetric.MSE
    always_normalize: bool = False
    epsilon: float = DEFAULT_EPSILON
    smoothing_window: int = DEFAULT_SMOOTHING_WINDOW
    smooth: bool = False

    def __post_init__(self):
        # frozen: normalized values are written through object.__setattr__
        object.__setattr__(self, 'error_metric', ErrorMetric.resolve(self.error_metric))

        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, numbers.Real):
            raise ValidationError(f"epsilon: expected a real number, got {self.epsilon!r}")
        epsilon = float(self.epsilon)
        if not epsilon > 0 or epsilon == float('inf'):
            raise ValidationError(f"epsilon: must be a positive finite number, got {epsilon}")
        object.__setattr__(self, 'epsilon', epsilon)

        object.__setattr__(
            self, 'smoothing_window', check_window(self.smoothing_window, 'smoothing_window')
        )
        for flag in ('always_normalize', 'smooth'):
            value = getattr(self, flag)
            if not isinstance(value, (bool, np.bool_)):
                raise ValidationError(f"{flag}: expected a bool, got {value!r}")
            object.__setattr__(self, flag, bool(value))

    def replace(self, **changes) -> FitConfig:
        """Return a copy with the given fields changed (validated again)."""
        return _dataclass_replace(self, **changes)
