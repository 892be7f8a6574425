"""
Parametric function families and the fixed family registry.

Each Family defines:
- The ordered names of its parameters
- Domain preconditions on (x, y) for its transform (e.g. x > 0 for log)
- fit(x, y) → parameters, by closed-form least squares or a heuristic
- predict(parameters, x) → ŷ

Least-squares families transform (x, y) into a space where a straight
line (or, for the quadratic, the 3x3 normal equations) applies:

    linear        y = slope·x + intercept
    logarithmic   y = slope·log(x) + intercept          u = log x
    power         y = a·x^b                             u = log x, v = log y
    exponential   y = a·exp(b·x)                        v = log y
    quadratic     y = a·x² + b·x + c                    normal equations
    rational      y = a / (x + b)                       v = 1/y

Heuristic families only produce a closed-form starting guess; their
parameters are not least-squares estimates and they are expected to
score worse than the families above on data they do not match exactly:

    sinusoidal    y = amplitude·sin(frequency·x + phase) + offset
    tanh          y = amplitude·tanh(scale·x + offset) + meanY
    sigmoid       y = 1 / (1 + exp(-scale·(x - inflection))) + offset

The registry order is part of the public contract: model selection breaks
ties in favour of the earlier family.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
import scipy.linalg

from fitdetect.core.exceptions import ValidationError
from fitdetect.selection._ols import linear_regression


FloatArray = NDArray[np.floating[Any]]


def _count(mask: NDArray[np.bool_], what: str) -> str:
    n = int(np.sum(mask))
    return f"{n} {what} value{'s' if n != 1 else ''}"


# =====================================================================
# Family base class
# =====================================================================

class Family(ABC):
    """
    A parametric function shape with its own estimation and prediction rule.

    Families are stateless; one shared instance per family lives in the
    registry. Subclasses implement ``_fit`` and ``_predict``; the public
    ``fit``/``predict`` wrappers handle array conversion and silence numpy
    floating-point warnings, since invalid arithmetic surfaces as NaN.
    """

    #: True when parameters are a heuristic guess rather than a fit.
    heuristic: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def parameter_names(self) -> tuple[str, ...]:
        ...

    @property
    def formula(self) -> str:
        """Human-readable model equation."""
        return self.name

    def domain_violation(self, x: FloatArray, y: FloatArray) -> str | None:
        """
        Describe why (x, y) is outside this family's domain, or None.

        The default family has no domain restrictions.
        """
        return None

    @abstractmethod
    def _fit(self, x: FloatArray, y: FloatArray) -> tuple[float, ...]:
        ...

    @abstractmethod
    def _predict(self, params: Mapping[str, float], x: FloatArray) -> FloatArray:
        ...

    def fit(self, x: ArrayLike, y: ArrayLike) -> dict[str, float]:
        """Estimate parameters from samples. Pure; never raises on bad domains."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        with np.errstate(all='ignore'):
            values = self._fit(x, y)
        return {k: float(v) for k, v in zip(self.parameter_names, values)}

    def predict(self, params: Mapping[str, float], x: ArrayLike) -> FloatArray:
        """Evaluate the model at x."""
        missing = [k for k in self.parameter_names if k not in params]
        if missing:
            raise ValidationError(
                f"{self.name}: missing parameters {missing}, "
                f"expected {list(self.parameter_names)}"
            )
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(all='ignore'):
            return np.asarray(self._predict(params, x), dtype=np.float64)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# =====================================================================
# Least-squares families
# =====================================================================

class Linear(Family):
    """y = slope·x + intercept, by OLS."""

    @property
    def name(self) -> str:
        return 'linear'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('slope', 'intercept')

    @property
    def formula(self) -> str:
        return 'slope*x + intercept'

    def _fit(self, x, y):
        return linear_regression(x, y)

    def _predict(self, params, x):
        return params['slope'] * x + params['intercept']


class Logarithmic(Family):
    """y = slope·log(x) + intercept, by OLS on (log x, y). Requires x > 0."""

    @property
    def name(self) -> str:
        return 'logarithmic'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('slope', 'intercept')

    @property
    def formula(self) -> str:
        return 'slope*log(x) + intercept'

    def domain_violation(self, x, y):
        bad = x <= 0
        if np.any(bad):
            return f"requires x > 0 ({_count(bad, 'non-positive')} in x)"
        return None

    def _fit(self, x, y):
        return linear_regression(np.log(x), y)

    def _predict(self, params, x):
        return params['slope'] * np.log(x) + params['intercept']


class Power(Family):
    """y = a·x^b, by OLS on (log x, log y). Requires x > 0 and y > 0."""

    @property
    def name(self) -> str:
        return 'power'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('a', 'b')

    @property
    def formula(self) -> str:
        return 'a * x^b'

    def domain_violation(self, x, y):
        reasons = []
        if np.any(x <= 0):
            reasons.append(f"x > 0 ({_count(x <= 0, 'non-positive')} in x)")
        if np.any(y <= 0):
            reasons.append(f"y > 0 ({_count(y <= 0, 'non-positive')} in y)")
        if reasons:
            return "requires " + " and ".join(reasons)
        return None

    def _fit(self, x, y):
        slope, intercept = linear_regression(np.log(x), np.log(y))
        return np.exp(intercept), slope

    def _predict(self, params, x):
        return params['a'] * np.power(x, params['b'])


class Exponential(Family):
    """y = a·exp(b·x), by OLS on (x, log y). Requires y > 0."""

    @property
    def name(self) -> str:
        return 'exponential'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('a', 'b')

    @property
    def formula(self) -> str:
        return 'a * exp(b*x)'

    def domain_violation(self, x, y):
        bad = y <= 0
        if np.any(bad):
            return f"requires y > 0 ({_count(bad, 'non-positive')} in y)"
        return None

    def _fit(self, x, y):
        slope, intercept = linear_regression(x, np.log(y))
        return np.exp(intercept), slope

    def _predict(self, params, x):
        return params['a'] * np.exp(params['b'] * x)


class Quadratic(Family):
    """
    y = a·x² + b·x + c, by solving the 3x3 normal equations.

    The normal matrix is symmetric positive definite whenever x has at
    least three distinct values; otherwise it is singular and every
    parameter is NaN.
    """

    @property
    def name(self) -> str:
        return 'quadratic'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('a', 'b', 'c')

    @property
    def formula(self) -> str:
        return 'a*x^2 + b*x + c'

    def _fit(self, x, y):
        if np.unique(x).shape[0] < 3:
            return (np.nan, np.nan, np.nan)
        # Solve in t = (x - mid) / half on [-1, 1] with y centred, so the
        # normal matrix stays well conditioned when x sits far from 0.
        mid = 0.5 * (x.max() + x.min())
        half = 0.5 * (x.max() - x.min())
        y_mean = np.mean(y)
        if not (np.isfinite(mid) and np.isfinite(half) and np.isfinite(y_mean)):
            return (np.nan, np.nan, np.nan)
        t = (x - mid) / half
        v = y - y_mean

        n = float(t.shape[0])
        t2 = t * t
        st, st2 = np.sum(t), np.sum(t2)
        st3, st4 = np.sum(t2 * t), np.sum(t2 * t2)
        normal = np.array([
            [st4, st3, st2],
            [st3, st2, st],
            [st2, st, n],
        ])
        rhs = np.array([np.sum(t2 * v), np.sum(t * v), np.sum(v)])
        if not (np.all(np.isfinite(normal)) and np.all(np.isfinite(rhs))):
            return (np.nan, np.nan, np.nan)
        try:
            with warnings.catch_warnings():
                # near-duplicate x values
                warnings.simplefilter('ignore', scipy.linalg.LinAlgWarning)
                qa, qb, qc = scipy.linalg.solve(normal, rhs, assume_a='pos')
        except scipy.linalg.LinAlgError:
            return (np.nan, np.nan, np.nan)

        # y = qa·t² + qb·t + qc + y_mean, expanded back in powers of x
        a = qa / half ** 2
        b = qb / half - 2.0 * a * mid
        c = a * mid ** 2 - qb * mid / half + qc + y_mean
        return a, b, c

    def _predict(self, params, x):
        return params['a'] * x ** 2 + params['b'] * x + params['c']


class Rational(Family):
    """
    y = a / (x + b), from OLS on (x, 1/y). Requires y != 0.

    With 1/y ≈ slope·x + intercept, the parameters are a = 1/slope and
    b = -intercept/slope.
    """

    @property
    def name(self) -> str:
        return 'rational'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('a', 'b')

    @property
    def formula(self) -> str:
        return 'a / (x + b)'

    def domain_violation(self, x, y):
        bad = y == 0
        if np.any(bad):
            return f"requires y != 0 ({_count(bad, 'zero')} in y)"
        return None

    def _fit(self, x, y):
        slope, intercept = linear_regression(x, 1.0 / y)
        slope = np.float64(slope)
        return 1.0 / slope, -intercept / slope

    def _predict(self, params, x):
        return params['a'] / (x + params['b'])


# =====================================================================
# Heuristic families
# =====================================================================

class Sinusoidal(Family):
    """
    y = amplitude·sin(frequency·x + phase) + offset, heuristic guess.

    amplitude is half the range of y, frequency assumes one full period
    between the first and last x, phase is 0 and offset is mean(y).
    """

    heuristic = True

    @property
    def name(self) -> str:
        return 'sinusoidal'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('amplitude', 'frequency', 'phase', 'offset')

    @property
    def formula(self) -> str:
        return 'amplitude*sin(frequency*x + phase) + offset'

    def _fit(self, x, y):
        amplitude = (np.max(y) - np.min(y)) / 2.0
        frequency = 2.0 * np.pi / (x[-1] - x[0])
        return amplitude, frequency, 0.0, np.mean(y)

    def _predict(self, params, x):
        return (
            params['amplitude'] * np.sin(params['frequency'] * x + params['phase'])
            + params['offset']
        )


class Tanh(Family):
    """
    y = amplitude·tanh(scale·x + offset) + meanY, heuristic guess.

    amplitude is half the range of y, scale is 1, offset is 0 and meanY
    is mean(y).
    """

    heuristic = True

    @property
    def name(self) -> str:
        return 'tanh'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('amplitude', 'scale', 'offset', 'meanY')

    @property
    def formula(self) -> str:
        return 'amplitude*tanh(scale*x + offset) + meanY'

    def _fit(self, x, y):
        amplitude = (np.max(y) - np.min(y)) / 2.0
        return amplitude, 1.0, 0.0, np.mean(y)

    def _predict(self, params, x):
        return (
            params['amplitude'] * np.tanh(params['scale'] * x + params['offset'])
            + params['meanY']
        )


class Sigmoid(Family):
    """
    y = 1 / (1 + exp(-scale·(x - inflection))) + offset, heuristic guess.

    scale is 1/range(y), inflection is mean(x) and offset is mean(y).
    """

    heuristic = True

    @property
    def name(self) -> str:
        return 'sigmoid'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('scale', 'inflection', 'offset')

    @property
    def formula(self) -> str:
        return '1 / (1 + exp(-scale*(x - inflection))) + offset'

    def _fit(self, x, y):
        scale = 1.0 / (np.max(y) - np.min(y))
        return scale, np.mean(x), np.mean(y)

    def _predict(self, params, x):
        z = -params['scale'] * (x - params['inflection'])
        return 1.0 / (1.0 + np.exp(z)) + params['offset']


# =====================================================================
# Registry
# =====================================================================

#: Fixed evaluation order. Ties in model selection go to the earlier entry.
FAMILIES: tuple[Family, ...] = (
    Linear(),
    Logarithmic(),
    Power(),
    Exponential(),
    Quadratic(),
    Sinusoidal(),
    Rational(),
    Tanh(),
    Sigmoid(),
)

FAMILY_NAMES: tuple[str, ...] = tuple(f.name for f in FAMILIES)

_FAMILY_BY_NAME: dict[str, Family] = {f.name: f for f in FAMILIES}


def resolve_family(family: str | Family) -> Family:
    """Resolve a family argument to the registered Family instance.

    Args:
        family: A family name (case-insensitive) or a Family instance.

    Returns:
        Family instance from the registry.

    Raises:
        ValidationError: If the name (or the instance's name) is not registered.
        TypeError: If argument is neither string nor Family.
    """
    if isinstance(family, Family):
        name = family.name
    elif isinstance(family, str):
        name = family.strip().lower()
    else:
        raise TypeError(f"family must be str or Family, got {type(family).__name__}")

    registered = _FAMILY_BY_NAME.get(name)
    if registered is None:
        raise ValidationError(
            f"Unknown family: {family!r}. Valid families: {', '.join(FAMILY_NAMES)}"
        )
    return registered


def resolve_families(families) -> tuple[Family, ...]:
    """
    Resolve a collection of family names to registry entries.

    The result is always in registry order, regardless of the order given,
    and duplicates collapse. None selects every family.

    Raises:
        ValidationError: If the collection is empty or names an unknown family.
    """
    if families is None:
        return FAMILIES
    if isinstance(families, (str, Family)):
        families = [families]
    wanted = {resolve_family(f).name for f in families}
    if not wanted:
        raise ValidationError("families: at least one family is required")
    return tuple(f for f in FAMILIES if f.name in wanted)


# =====================================================================
# Fitted model
# =====================================================================

@dataclass(frozen=True)
class FittedModel:
    """
    A family paired with its estimated parameters.

    Attributes:
        family: Registered family name
        params: Parameter name -> value, in the family's parameter order
    """
    family: str
    params: dict[str, float] = field(default_factory=dict)

    @property
    def is_finite(self) -> bool:
        """Whether every parameter is a finite number."""
        return all(np.isfinite(v) for v in self.params.values())

    @property
    def heuristic(self) -> bool:
        return resolve_family(self.family).heuristic

    def predict(self, x: ArrayLike) -> FloatArray:
        """Evaluate this model at x."""
        return resolve_family(self.family).predict(self.params, x)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v:.6g}" for k, v in self.params.items())
        return f"FittedModel({self.family}: {inner})"
