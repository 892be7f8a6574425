"""
Preprocessing transforms.

Public API:
    normalize(values, epsilon)       - Min-max rescale to [0, 1]
    moving_average(values, window)   - Causal moving average
    preprocess(x, y, config)         - Stages enabled by a FitConfig
"""

from fitdetect.preprocessing.transforms import normalize, moving_average, preprocess

__all__ = [
    "normalize",
    "moving_average",
    "preprocess",
]
