"""
Error metrics for scoring fitted families.

Public API:
    evaluate(y_true, y_pred, metric)  - Dispatch on ErrorMetric
    mean_squared_error(y_true, y_pred)
    root_mean_squared_error(y_true, y_pred)
    mean_absolute_error(y_true, y_pred)
"""

from fitdetect.core.config import ErrorMetric
from fitdetect.metrics.errors import (
    evaluate,
    mean_squared_error,
    root_mean_squared_error,
    mean_absolute_error,
)

__all__ = [
    "evaluate",
    "mean_squared_error",
    "root_mean_squared_error",
    "mean_absolute_error",
    "ErrorMetric",
]
