"""
Tests for SelectionSolution accessors and reporting.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from fitdetect import FitConfig, identify
from fitdetect.core.config import ErrorMetric
from fitdetect.selection import FAMILY_NAMES, FittedModel


@pytest.fixture
def solution(linear_data):
    return identify(*linear_data)


@pytest.fixture
def partial_solution():
    """Negative x: logarithmic and power are demoted to NaN."""
    x = np.array([-3.0, -1.0, 1.0, 3.0, 4.0, 8.0])
    return identify(x, 3.0 * x + 10.0)


class TestAccessors:

    def test_best_model(self, solution):
        assert isinstance(solution.best_model, FittedModel)
        assert solution.best_model.family == "linear"

    def test_errors_is_a_copy(self, solution):
        errors = solution.errors
        errors["linear"] = 99.0
        assert solution.errors["linear"] == 0.0

    def test_metric_and_config(self, solution):
        assert solution.metric is ErrorMetric.MSE
        assert solution.config == FitConfig()

    def test_n(self, solution):
        assert solution.n == 5

    def test_correlation(self, solution):
        assert solution.correlation == pytest.approx(1.0)

    def test_predict_uses_best_model(self, solution):
        assert_allclose(solution.predict([6.0, 7.0]), [12.0, 14.0])

    def test_backend_and_timing(self, solution):
        assert solution.backend_name == "cpu_closed_form"
        for name in FAMILY_NAMES + ("preprocess", "selection", "total_seconds"):
            assert name in solution.timing

    def test_info(self, solution):
        assert solution.info["method"] == "closed_form"
        assert solution.info["families"] == FAMILY_NAMES
        assert solution.info["n_valid"] == len(FAMILY_NAMES)

    def test_info_and_timing_are_copies(self, solution):
        solution.info["method"] = "edited"
        solution.timing["total_seconds"] = -1.0
        assert solution.info["method"] == "closed_form"
        assert solution.timing["total_seconds"] >= 0.0

    def test_no_warnings_on_clean_data(self, solution):
        assert solution.warnings == ()


class TestPartialReport:

    def test_valid_families(self, partial_solution):
        assert "logarithmic" not in partial_solution.valid_families
        assert "linear" in partial_solution.valid_families
        assert partial_solution.info["n_valid"] == len(FAMILY_NAMES) - 2

    def test_ranking_puts_nan_last(self, partial_solution):
        ranking = partial_solution.ranking()
        assert ranking[0] == partial_solution.best_fit
        assert ranking[-2:] == ["logarithmic", "power"]
        assert sorted(ranking) == sorted(FAMILY_NAMES)

    def test_warnings_name_the_family(self, partial_solution):
        assert any(w.startswith("power: requires x > 0") for w in partial_solution.warnings)


class TestReporting:

    def test_as_dict(self, solution):
        report = solution.as_dict()
        assert report["bestFit"] == "linear"
        assert list(report["errors"]) == list(FAMILY_NAMES)

    def test_summary(self, partial_solution):
        text = partial_solution.summary()
        assert "Best fit: linear" in text
        assert "Metric: MSE" in text
        assert "NA" in text
        for name in FAMILY_NAMES:
            assert name in text

    def test_summary_flags_heuristic_winner(self):
        x = np.linspace(0.0, 2 * np.pi, 50)
        text = identify(x, 3.0 * np.sin(x) + 5.0).summary()
        assert "heuristic parameters" in text

    def test_repr(self, solution):
        text = repr(solution)
        assert "best_fit='linear'" in text
        assert "MSE=" in text

    def test_nan_best_error_impossible(self, partial_solution):
        assert not math.isnan(partial_solution.best_error)
