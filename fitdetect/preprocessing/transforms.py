"""
Sample transforms applied before fitting.

Both transforms return new arrays; inputs are never modified in place.

    normalize        min-max rescale to [0, 1] with an epsilon floor
    moving_average   causal (trailing) moving average, same length as input
    preprocess       the configured pipeline: smooth y, then normalize x and y
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike, NDArray

from fitdetect.core.config import FitConfig, DEFAULT_EPSILON, DEFAULT_SMOOTHING_WINDOW, check_window
from fitdetect.core.exceptions import DegenerateRangeError, NumericalError
from fitdetect.core.validation import check_array, check_1d, check_finite, check_min_samples


def _as_series(values: ArrayLike, name: str, min_samples: int = 1) -> NDArray[np.floating[Any]]:
    arr = check_array(values, name)
    check_1d(arr, name)
    check_min_samples(arr, min_samples, name)
    check_finite(arr, name)
    return arr


def normalize(
    values: ArrayLike,
    epsilon: float = DEFAULT_EPSILON,
    *,
    name: str = 'values',
) -> NDArray[np.floating[Any]]:
    """
    Min-max normalize values to [0, 1].

    Computes (v - min) / (max - min). Any result that is exactly 0.0 is
    replaced by ``epsilon`` when epsilon > 0, so that a later log or
    reciprocal transform of the normalized data stays finite. The maximum
    always maps to exactly 1.0.

    Parameters
    ----------
    values : array-like
        1D finite numeric data.
    epsilon : float
        Floor substituted for exact zeros. Values <= 0 disable the nudge.
    name : str
        Parameter name used in error messages.

    Returns
    -------
    ndarray
        New float64 array of the same length.

    Raises
    ------
    DegenerateRangeError
        If every value is equal (max == min).
    NumericalError
        If max - min overflows to infinity.
    """
    arr = _as_series(values, name)
    lo = arr.min()
    hi = arr.max()
    with np.errstate(over='ignore'):
        span = hi - lo
    if not np.isfinite(span):
        raise NumericalError(
            f"{name}: cannot normalize, range [{float(lo)!r}, {float(hi)!r}] overflows float64"
        )
    if span == 0:
        raise DegenerateRangeError(
            f"{name}: cannot normalize, all {arr.shape[0]} values equal {float(lo)!r} (max == min)",
            value=float(lo),
            name=name,
        )

    out = (arr - lo) / span
    if epsilon > 0:
        out[out == 0.0] = epsilon
    return out


def moving_average(
    values: ArrayLike,
    window: int = DEFAULT_SMOOTHING_WINDOW,
    *,
    name: str = 'values',
) -> NDArray[np.floating[Any]]:
    """
    Causal moving average.

    Element i is the mean of values[max(0, i - window + 1) .. i]. The
    window narrows near the start, so the output has the same length as
    the input. A window of 1 returns a copy of the input, and an empty
    input gives an empty output.

    Raises
    ------
    InvalidWindowError
        If window is not an integer >= 1.
    """
    window = check_window(window)
    arr = _as_series(values, name, min_samples=0)
    n = arr.shape[0]
    if n == 0:
        return arr

    head_len = min(window - 1, n)
    head = np.cumsum(arr[:head_len]) / np.arange(1, head_len + 1)
    if n < window:
        return head

    full = sliding_window_view(arr, window).mean(axis=1)
    return np.concatenate([head, full])


def preprocess(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    config: FitConfig,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], tuple[str, ...]]:
    """
    Apply the preprocessing stages enabled in ``config``.

    Order is fixed: moving average of y (config.smooth), then
    normalization of x and y (config.always_normalize). x is never
    smoothed; it is the independent variable.

    Returns
    -------
    (x, y, stages)
        Transformed copies and the names of the stages that ran.

    Raises
    ------
    DegenerateRangeError
        If normalization is enabled and x or y is constant.
    NumericalError
        If normalization is enabled and the range of x or y overflows.
    """
    stages: list[str] = []

    if config.smooth:
        y = moving_average(y, config.smoothing_window, name='y')
        stages.append(f'moving_average(window={config.smoothing_window})')

    if config.always_normalize:
        x = normalize(x, config.epsilon, name='x')
        y = normalize(y, config.epsilon, name='y')
        stages.append('normalize')

    return x, y, tuple(stages)
