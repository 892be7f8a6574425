"""
Simple (one-predictor) least squares and correlation.

These are the closed-form building blocks reused by the transformed
families: logarithmic, power, exponential and rational all reduce to a
straight-line fit in a transformed space.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def linear_regression(
    u: NDArray[np.floating[Any]],
    v: NDArray[np.floating[Any]],
) -> tuple[float, float]:
    """
    Fit v = slope * u + intercept by ordinary least squares.

    slope = Σ(u - ū)(v - v̄) / Σ(u - ū)², intercept = v̄ - slope * ū.

    Returns (nan, nan) when u has zero variance or when u or v contain
    non-finite values (e.g. log of a non-positive number). No exception
    is raised: the caller's family simply scores NaN.
    """
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)

    with np.errstate(all='ignore'):
        u_mean = np.mean(u)
        v_mean = np.mean(v)
        du = u - u_mean
        denominator = float(np.sum(du ** 2))
        if not np.isfinite(denominator) or denominator == 0.0:
            return float('nan'), float('nan')
        numerator = float(np.sum(du * (v - v_mean)))
        slope = numerator / denominator
        intercept = float(v_mean - slope * u_mean)

    return slope, intercept


def pearson_correlation(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> float:
    """
    Pearson product-moment correlation of x and y.

    NaN when either variable is constant.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    with np.errstate(all='ignore'):
        dx = x - np.mean(x)
        dy = y - np.mean(y)
        denominator = float(np.sqrt(np.sum(dx ** 2) * np.sum(dy ** 2)))
        if denominator == 0.0:
            return float('nan')
        r = float(np.sum(dx * dy)) / denominator

    # Rounding can push |r| a hair past 1 for perfectly collinear data
    return float(np.clip(r, -1.0, 1.0)) if np.isfinite(r) else float('nan')
