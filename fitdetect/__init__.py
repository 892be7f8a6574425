"""
fitdetect: identify the function family behind a set of (x, y) samples.

Fits linear, logarithmic, power, exponential, quadratic, sinusoidal,
rational, tanh and sigmoid models, scores each under a configurable
error metric (MSE, RMSE, MAE) and reports the best one.

Submodules:
    selection: Family library and model selection (identify)
    metrics: Error metrics
    preprocessing: Normalization and smoothing
    core: Configuration, exceptions, result envelope
"""

__version__ = "0.1.0"

from fitdetect import preprocessing
from fitdetect import metrics
from fitdetect import selection
from fitdetect.core.config import FitConfig, ErrorMetric
from fitdetect.selection import identify, identify_function_type

__all__ = [
    "__version__",
    "identify",
    "identify_function_type",
    "FitConfig",
    "ErrorMetric",
    "preprocessing",
    "metrics",
    "selection",
]
