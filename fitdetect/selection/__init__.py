"""
Function-family identification.

Fits a paired sample set against a fixed, ordered catalog of parametric
families and selects the one with the lowest error.

Public API:
    identify(x, y, config) -> SelectionSolution
    identify_function_type        alias of identify
    select_best(errors)           NaN-safe reduction of an error table
    linear_regression(u, v)       shared OLS primitive

Example:
    >>> from fitdetect.selection import identify
    >>> solution = identify(x, y)
    >>> print(solution.best_fit)
    >>> print(solution.summary())
"""

from fitdetect.selection.design import SampleDesign
from fitdetect.selection.families import (
    Family,
    FittedModel,
    FAMILIES,
    FAMILY_NAMES,
    resolve_family,
)
from fitdetect.selection._common import select_best, rank_families
from fitdetect.selection._ols import linear_regression, pearson_correlation
from fitdetect.selection.solution import SelectionParams, SelectionSolution
from fitdetect.selection.solvers import identify, identify_function_type

__all__ = [
    "identify",
    "identify_function_type",
    "select_best",
    "rank_families",
    "linear_regression",
    "pearson_correlation",
    "SampleDesign",
    "Family",
    "FittedModel",
    "FAMILIES",
    "FAMILY_NAMES",
    "resolve_family",
    "SelectionParams",
    "SelectionSolution",
]
