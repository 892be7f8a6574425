"""
Tests for normalize(), moving_average() and preprocess().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from fitdetect.core.config import FitConfig
from fitdetect.core.exceptions import (
    DegenerateRangeError,
    InvalidWindowError,
    NumericalError,
    ValidationError,
)
from fitdetect.preprocessing import moving_average, normalize, preprocess


class TestNormalize:
    """Min-max normalization with an epsilon floor."""

    def test_minimum_maps_to_epsilon_maximum_to_one(self):
        out = normalize([3.0, 7.0, 5.0, 11.0])
        assert out[0] == 1e-12
        assert out[3] == 1.0

    def test_interior_values(self):
        out = normalize([0.0, 5.0, 10.0])
        assert_allclose(out, [1e-12, 0.5, 1.0])

    def test_custom_epsilon(self):
        out = normalize([-2.0, 2.0], epsilon=1e-6)
        assert_array_equal(out, [1e-6, 1.0])

    def test_non_positive_epsilon_keeps_zero(self):
        out = normalize([1.0, 2.0, 3.0], epsilon=0.0)
        assert out[0] == 0.0

    def test_every_minimum_nudged(self):
        out = normalize([4.0, 1.0, 1.0, 2.0])
        assert_array_equal(out[[1, 2]], [1e-12, 1e-12])

    def test_input_not_mutated(self):
        values = np.array([5.0, 1.0, 3.0])
        normalize(values)
        assert_array_equal(values, [5.0, 1.0, 3.0])

    def test_constant_raises(self):
        with pytest.raises(DegenerateRangeError, match="max == min") as exc_info:
            normalize([4.0, 4.0, 4.0], name="y")
        assert exc_info.value.value == 4.0
        assert exc_info.value.name == "y"

    def test_single_value_is_degenerate(self):
        with pytest.raises(DegenerateRangeError):
            normalize([1.0])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            normalize([])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            normalize([1.0, np.nan, 2.0])

    def test_overflowing_range_rejected(self):
        with pytest.raises(NumericalError, match="overflows"):
            normalize([-1e308, 0.0, 1e308], name="y")

    def test_overflowing_range_is_not_degenerate(self):
        with pytest.raises(NumericalError) as exc_info:
            normalize([-1e308, 1e308])
        assert not isinstance(exc_info.value, DegenerateRangeError)


class TestMovingAverage:
    """Causal moving average with a narrowing head."""

    def test_window_three(self):
        out = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        assert_allclose(out, [1.0, 1.5, 2.0, 3.0, 4.0])

    def test_default_window_is_three(self):
        assert_allclose(moving_average([3.0, 6.0, 9.0, 0.0]), [3.0, 4.5, 6.0, 5.0])

    def test_window_one_is_identity(self):
        values = [4.0, -1.0, 2.5]
        assert_array_equal(moving_average(values, 1), values)

    def test_window_longer_than_input(self):
        out = moving_average([2.0, 4.0, 6.0], 10)
        assert_allclose(out, [2.0, 3.0, 4.0])

    def test_window_equal_to_length(self):
        out = moving_average([2.0, 4.0, 6.0], 3)
        assert_allclose(out, [2.0, 3.0, 4.0])

    def test_length_preserved(self, rng):
        values = rng.standard_normal(37)
        assert moving_average(values, 5).shape == (37,)

    def test_matches_direct_definition(self, rng):
        values = rng.standard_normal(25)
        window = 4
        expected = [values[max(0, i - window + 1):i + 1].mean() for i in range(25)]
        assert_allclose(moving_average(values, window), expected, rtol=1e-12)

    @pytest.mark.parametrize("window", [1, 3])
    def test_empty_input(self, window):
        out = moving_average([], window)
        assert out.shape == (0,)
        assert out.dtype == np.float64

    @pytest.mark.parametrize("window", [0, -1, 1.5])
    def test_invalid_window(self, window):
        with pytest.raises(InvalidWindowError):
            moving_average([1.0, 2.0], window)


class TestPreprocess:
    """Stages run only when enabled, smoothing before normalization."""

    def test_default_config_is_passthrough(self, linear_data):
        x, y = linear_data
        x2, y2, stages = preprocess(x, y, FitConfig())
        assert stages == ()
        assert_array_equal(x2, x)
        assert_array_equal(y2, y)

    def test_normalize_both(self, linear_data):
        x, y = linear_data
        x2, y2, stages = preprocess(x, y, FitConfig(always_normalize=True))
        assert stages == ("normalize",)
        assert x2[0] == 1e-12 and x2[-1] == 1.0
        assert y2[0] == 1e-12 and y2[-1] == 1.0

    def test_smoothing_applies_to_y_only(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, 3.0, 0.0, 3.0])
        x2, y2, stages = preprocess(x, y, FitConfig(smooth=True, smoothing_window=2))
        assert stages == ("moving_average(window=2)",)
        assert_array_equal(x2, x)
        assert_allclose(y2, [0.0, 1.5, 1.5, 1.5])

    def test_smoothing_then_normalization(self):
        x = np.array([1.0, 2.0, 3.0])
        y = np.array([2.0, 4.0, 9.0])
        config = FitConfig(smooth=True, smoothing_window=2, always_normalize=True)
        _, y2, stages = preprocess(x, y, config)
        assert stages == ("moving_average(window=2)", "normalize")
        # smoothed y = [2, 3, 6.5] -> normalized
        assert_allclose(y2, [1e-12, 1.0 / 4.5, 1.0])

    def test_constant_x_with_normalize(self):
        with pytest.raises(DegenerateRangeError) as exc_info:
            preprocess(np.ones(3), np.array([1.0, 2.0, 3.0]), FitConfig(always_normalize=True))
        assert exc_info.value.name == "x"
