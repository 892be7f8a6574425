"""
Tests for fitdetect exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via FitDetectError)
    - Diagnostic attributes on the specialised errors
    - Default attribute values
"""

import math

import pytest

from fitdetect.core.exceptions import (
    DegenerateRangeError,
    DimensionError,
    FitDetectError,
    InvalidWindowError,
    LengthMismatchError,
    NoValidFitError,
    NumericalError,
    UnknownMetricError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via FitDetectError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        LengthMismatchError,
        UnknownMetricError,
        InvalidWindowError,
        NumericalError,
        DegenerateRangeError,
        NoValidFitError,
    ])
    def test_is_fitdetect_error(self, exc_type):
        with pytest.raises(FitDetectError):
            raise exc_type("boom")

    def test_length_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise LengthMismatchError("x=3, y=4")

    def test_structural_errors_are_validation_errors(self):
        for exc_type in (UnknownMetricError, InvalidWindowError, LengthMismatchError):
            assert issubclass(exc_type, ValidationError)

    def test_numeric_errors_are_not_validation_errors(self):
        for exc_type in (DegenerateRangeError, NoValidFitError):
            assert issubclass(exc_type, NumericalError)
            assert not issubclass(exc_type, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestLengthMismatchError:
    """LengthMismatchError records the offending lengths."""

    def test_attributes(self):
        err = LengthMismatchError("bad", lengths=(3, 4), names=("y_true", "y_pred"))
        assert str(err) == "bad"
        assert err.lengths == (3, 4)
        assert err.names == ("y_true", "y_pred")

    def test_defaults_are_none(self):
        err = LengthMismatchError("bad")
        assert err.lengths is None
        assert err.names is None


class TestUnknownMetricError:
    """UnknownMetricError records the rejected value."""

    def test_attributes(self):
        err = UnknownMetricError("nope", metric="R2", valid=("MSE", "RMSE", "MAE"))
        assert err.metric == "R2"
        assert err.valid == ("MSE", "RMSE", "MAE")


class TestInvalidWindowError:

    def test_attributes(self):
        err = InvalidWindowError("window", window=0)
        assert err.window == 0


class TestDegenerateRangeError:
    """DegenerateRangeError records the constant value."""

    def test_attributes(self):
        err = DegenerateRangeError("constant", value=7.0, name="y")
        assert err.value == 7.0
        assert err.name == "y"

    def test_defaults_are_none(self):
        err = DegenerateRangeError("constant")
        assert err.value is None
        assert err.name is None


class TestNoValidFitError:
    """NoValidFitError carries a copy of the error table."""

    def test_errors_copied(self):
        table = {"linear": math.nan, "power": math.nan}
        err = NoValidFitError("none", errors=table)
        table["linear"] = 1.0
        assert math.isnan(err.errors["linear"])
        assert list(err.errors) == ["linear", "power"]

    def test_default_empty(self):
        assert NoValidFitError("none").errors == {}
