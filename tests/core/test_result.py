"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factory for warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from fitdetect.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("power: requires x > 0", "rational: requires y != 0"),
        )
        assert result.has_warning("power")
        assert result.has_warning("y != 0")
        assert not result.has_warning("sigmoid")
