"""
Model-selection solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from fitdetect.core.config import ErrorMetric, FitConfig
from fitdetect.core.result import Result
from fitdetect.selection._common import is_valid_error, rank_families
from fitdetect.selection.families import FittedModel

if TYPE_CHECKING:
    from fitdetect.selection.design import SampleDesign


@dataclass(frozen=True)
class SelectionParams:
    """
    Parameter payload for model selection.

    This is the immutable data computed by backends. ``errors`` and
    ``models`` are keyed in registry order.
    """
    errors: dict[str, float]
    models: dict[str, FittedModel]
    best_fit: str
    metric: ErrorMetric
    correlation: float


@dataclass
class SelectionSolution:
    """
    User-facing model-selection results.

    Wraps the backend Result and provides accessors for the error table,
    the fitted models and the selected family.
    """
    _result: Result[SelectionParams]
    _design: 'SampleDesign'
    _config: FitConfig

    @property
    def best_fit(self) -> str:
        """Name of the family with the lowest valid error."""
        return self._result.params.best_fit

    @property
    def best_error(self) -> float:
        return self._result.params.errors[self.best_fit]

    @property
    def errors(self) -> dict[str, float]:
        """Family name -> error (NaN when invalid), in registry order."""
        return dict(self._result.params.errors)

    @property
    def models(self) -> dict[str, FittedModel]:
        return dict(self._result.params.models)

    @property
    def best_model(self) -> FittedModel:
        return self._result.params.models[self.best_fit]

    @property
    def metric(self) -> ErrorMetric:
        return self._result.params.metric

    @property
    def correlation(self) -> float:
        """Pearson correlation of the (preprocessed) samples."""
        return self._result.params.correlation

    @property
    def config(self) -> FitConfig:
        return self._config

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def valid_families(self) -> tuple[str, ...]:
        return tuple(n for n, e in self._result.params.errors.items() if is_valid_error(e))

    def ranking(self) -> list[str]:
        """Family names best first; invalid (NaN) families last."""
        return rank_families(self._result.params.errors)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the best model at x.

        x is taken in the same space the models were fitted in: if
        normalization was enabled, pass normalized x.
        """
        return self.best_model.predict(x)

    def as_dict(self) -> dict[str, Any]:
        """Plain report: {'bestFit': name, 'errors': {name: error}}."""
        return {'bestFit': self.best_fit, 'errors': self.errors}

    @property
    def info(self) -> dict[str, Any]:
        return dict(self._result.info)

    @property
    def timing(self) -> dict[str, float] | None:
        timing = self._result.timing
        return dict(timing) if timing is not None else None

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a text table of every family's error."""
        stages = self.info.get('preprocessing') or ()
        lines = [
            "Function Family Selection",
            "=" * 60,
            f"Observations: {self.n}",
            f"Metric: {self.metric.value}",
            f"Preprocessing: {', '.join(stages) if stages else 'none'}",
            f"Correlation (r): {self.correlation:.6f}",
            "",
            f"{'Family':<14} {'Error':>16}  Parameters",
            "-" * 60,
        ]

        for name, error in self._result.params.errors.items():
            marker = "*" if name == self.best_fit else " "
            err_str = f"{error:16.6g}" if is_valid_error(error) else "              NA"
            model = self._result.params.models.get(name)
            params = ", ".join(f"{k}={v:.4g}" for k, v in model.params.items()) if model else ""
            lines.append(f"{marker}{name:<13} {err_str}  {params}")

        lines.append("-" * 60)
        lines.append(f"Best fit: {self.best_fit}")
        if self.best_model.heuristic:
            lines.append("  (heuristic parameters, not a least-squares fit)")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SelectionSolution(n={self.n}, best_fit={self.best_fit!r}, "
            f"{self.metric.value}={self.best_error:.4g})"
        )
