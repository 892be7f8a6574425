"""
Error metrics between observed and predicted values.

NaN in the predictions is not masked: a family whose predictions contain
NaN scores NaN, which the model selector treats as "no valid fit".
Mismatched lengths, on the other hand, are a caller error and raise.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from fitdetect.core.config import ErrorMetric
from fitdetect.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


def _paired(
    y_true: ArrayLike, y_pred: ArrayLike
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    yt = check_array(y_true, 'y_true')
    yp = check_array(y_pred, 'y_pred')
    check_1d(yt, 'y_true')
    check_1d(yp, 'y_pred')
    check_consistent_length(yt, yp, names=('y_true', 'y_pred'))
    check_min_samples(yt, 1, 'y_true')
    return yt, yp


def mean_squared_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Mean squared error: mean((y_true - y_pred)²).

    Raises:
        LengthMismatchError: If y_true and y_pred differ in length
    """
    yt, yp = _paired(y_true, y_pred)
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.mean((yt - yp) ** 2))


def root_mean_squared_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Root mean squared error: sqrt(MSE).

    Raises:
        LengthMismatchError: If y_true and y_pred differ in length
    """
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))


def mean_absolute_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Mean absolute error: mean(|y_true - y_pred|).

    Raises:
        LengthMismatchError: If y_true and y_pred differ in length
    """
    yt, yp = _paired(y_true, y_pred)
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.mean(np.abs(yt - yp)))


_METRIC_FUNCTIONS: dict[ErrorMetric, Callable[[ArrayLike, ArrayLike], float]] = {
    ErrorMetric.MSE: mean_squared_error,
    ErrorMetric.RMSE: root_mean_squared_error,
    ErrorMetric.MAE: mean_absolute_error,
}


def evaluate(
    y_true: ArrayLike,
    y_pred: ArrayLike,
    metric: ErrorMetric | str = ErrorMetric.MSE,
) -> float:
    """
    Score predictions under the selected metric.

    Parameters
    ----------
    y_true : array-like
        Observed values.
    y_pred : array-like
        Predicted values, same length as y_true. May contain NaN.
    metric : ErrorMetric or str
        'MSE', 'RMSE' or 'MAE' (case-insensitive).

    Returns
    -------
    float
        The error, NaN if any prediction is NaN.

    Raises
    ------
    UnknownMetricError
        If metric is not recognised.
    LengthMismatchError
        If y_true and y_pred differ in length.
    """
    resolved = ErrorMetric.resolve(metric)
    return _METRIC_FUNCTIONS[resolved](y_true, y_pred)
