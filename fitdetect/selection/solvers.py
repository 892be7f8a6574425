"""
Solver dispatch for model selection.

This module provides the identify() function (public API) and backend
selection.
"""

from __future__ import annotations

from typing import Iterable, Literal
from numpy.typing import ArrayLike

from fitdetect.core.config import FitConfig
from fitdetect.core.exceptions import ValidationError
from fitdetect.selection.design import SampleDesign
from fitdetect.selection.families import Family, resolve_families
from fitdetect.selection.solution import SelectionSolution
from fitdetect.selection.backends.cpu import CPUSelectionBackend


BackendChoice = Literal['auto', 'cpu']

_DEFAULT_CONFIG = FitConfig()


def identify(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | None = None,
    config: FitConfig | None = None,
    *,
    families: Iterable[str | Family] | None = None,
    backend: BackendChoice = 'auto',
) -> SelectionSolution:
    """
    Identify which function family best describes y as a function of x.

    Every family in the registry (linear, logarithmic, power, exponential,
    quadratic, sinusoidal, rational, tanh, sigmoid) is fitted and scored
    under ``config.error_metric``. The family with the lowest valid error
    is selected; families whose domain preconditions fail (e.g. log of a
    non-positive x) score NaN and can never be selected. Equal errors go
    to the family registered first.

    Args:
        x: Independent values, or a prebuilt SampleDesign (then y must be None)
        y: Dependent values, same length as x
        config: Selection configuration; defaults to FitConfig()
        families: Restrict the candidates. Evaluation still follows
            registry order.
        backend: 'auto' or 'cpu' (both select the closed-form CPU backend)

    Returns:
        SelectionSolution with the error table, fitted models and best fit

    Raises:
        ValidationError: If inputs are invalid or config is not a FitConfig
        LengthMismatchError: If x and y differ in length
        DegenerateRangeError: If normalization is enabled and x or y is constant
        NoValidFitError: If no family produces a valid error

    Example:
        >>> from fitdetect import identify
        >>> solution = identify([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        >>> solution.best_fit
        'linear'
        >>> print(solution.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(x, SampleDesign):
        if y is not None:
            raise ValidationError("y must be None when x is a SampleDesign")
        design = x
    else:
        if y is None:
            raise ValidationError("y required when x is not a SampleDesign")
        design = SampleDesign.from_arrays(x, y)

    if config is None:
        config = _DEFAULT_CONFIG
    elif not isinstance(config, FitConfig):
        raise ValidationError(
            f"config must be a FitConfig, got {type(config).__name__}"
        )

    candidates = resolve_families(families)

    # === Select Backend and Solve ===
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design, config, candidates)

    return SelectionSolution(_result=result, _design=design, _config=config)


identify_function_type = identify


def _get_backend(choice: BackendChoice) -> CPUSelectionBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUSelectionBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
