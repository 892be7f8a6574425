"""
Reduction of a family → error table to a single best family.

NaN marks a family without a valid fit. It never beats a valid error,
including +inf. Between valid errors the strictly smaller wins; ties keep
the earlier entry, so the table's order (registry order) is the tie-break.
"""

from __future__ import annotations

import math
from typing import Mapping

from fitdetect.core.exceptions import NoValidFitError


def is_valid_error(error: float) -> bool:
    """True for a usable score (not NaN)."""
    return not math.isnan(error)


def select_best(errors: Mapping[str, float]) -> str:
    """
    Name of the family with the smallest valid error.

    Args:
        errors: Ordered family name -> error mapping

    Raises:
        NoValidFitError: If the mapping is empty or every error is NaN
    """
    best_name: str | None = None
    best_error = math.inf
    for name, error in errors.items():
        if not is_valid_error(error):
            continue
        if best_name is None or error < best_error:
            best_name, best_error = name, error

    if best_name is None:
        raise NoValidFitError(
            f"No family produced a valid error ({len(errors)} evaluated: "
            f"{', '.join(errors) or 'none'})",
            errors=errors,
        )
    return best_name


def rank_families(errors: Mapping[str, float]) -> list[str]:
    """
    Family names ordered best first.

    Valid errors ascend, ties keep mapping order, NaN families come last
    in mapping order.
    """
    order = {name: i for i, name in enumerate(errors)}
    valid = [n for n, e in errors.items() if is_valid_error(e)]
    invalid = [n for n, e in errors.items() if not is_valid_error(e)]
    valid.sort(key=lambda n: (errors[n], order[n]))
    return valid + invalid
