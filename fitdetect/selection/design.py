"""
SampleDesign: validated (x, y) pairs for model selection.

The design is the validation boundary. Everything downstream (backends,
families, metrics) trusts that x and y are finite, 1D, float64, equal in
length and hold at least two samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from fitdetect.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
)

MIN_SAMPLES = 2


@dataclass(frozen=True)
class SampleDesign:
    """
    Paired sample set.

    Holds private float64 copies of x and y; the caller's sequences are
    never modified. Immutable after construction.

    Construction:
        SampleDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SampleDesign:
        """
        Build SampleDesign from array-likes.

        Raises:
            ValidationError: Non-numeric or non-finite values, or fewer
                than two samples
            DimensionError: x or y is not 1D
            LengthMismatchError: x and y differ in length
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> SampleDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_min_samples(x, MIN_SAMPLES, 'x')
        check_finite(x, 'x')
        check_finite(y, 'y')

        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y, _n=int(x.shape[0]))

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Independent values (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Dependent values (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    def __repr__(self) -> str:
        return f"SampleDesign(n={self._n})"
