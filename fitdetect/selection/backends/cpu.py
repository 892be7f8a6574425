"""
CPU reference backend for model selection.

Runs every candidate family through fit → predict → score in registry
order and reduces the error table to the best family. All estimators are
closed-form, so a run costs O(n) per family.
"""

from typing import Any
import math
import numpy as np

from fitdetect.core.config import FitConfig
from fitdetect.core.result import Result
from fitdetect.core.compute.timing import Timer
from fitdetect.metrics.errors import evaluate
from fitdetect.preprocessing.transforms import preprocess
from fitdetect.selection._common import select_best
from fitdetect.selection._ols import pearson_correlation
from fitdetect.selection.design import SampleDesign
from fitdetect.selection.families import Family, FittedModel, FAMILIES
from fitdetect.selection.solution import SelectionParams


class CPUSelectionBackend:
    """
    CPU backend using closed-form and heuristic estimators.

    Stateless: configuration arrives with each solve() call, so one
    instance can serve any number of designs.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(
        self,
        design: SampleDesign,
        config: FitConfig,
        families: tuple[Family, ...] = FAMILIES,
    ) -> Result[SelectionParams]:
        """
        Score each family and select the best.

        Algorithm:
            1. Apply the preprocessing stages enabled in config
            2. For each family: check domain, fit, predict, score
            3. Reduce the error table (NaN never wins, ties keep order)

        Args:
            design: Validated sample design
            config: Selection configuration
            families: Candidate families, already in registry order

        Returns:
            Result containing SelectionParams

        Raises:
            DegenerateRangeError: If normalization is enabled and x or y is constant
            NoValidFitError: If no family yields a valid error
        """
        timer = Timer()
        timer.start()
        notes: list[str] = []

        # === Preprocessing ===
        with timer.section('preprocess'):
            x, y, stages = preprocess(design.x, design.y, config)

        # === Per-family fit / predict / score ===
        errors: dict[str, float] = {}
        models: dict[str, FittedModel] = {}
        for family in families:
            with timer.section(family.name):
                error, model, note = self._score(family, x, y, config)
            errors[family.name] = error
            models[family.name] = model
            if note is not None:
                notes.append(f"{family.name}: {note}")

        # === Selection ===
        with timer.section('selection'):
            best = select_best(errors)
            correlation = pearson_correlation(x, y)

        if models[best].heuristic:
            notes.append(
                f"{best}: selected with heuristic parameters (not a least-squares fit)"
            )

        timer.stop()

        params = SelectionParams(
            errors=errors,
            models=models,
            best_fit=best,
            metric=config.error_metric,
            correlation=correlation,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'metric': config.error_metric.value,
            'preprocessing': stages,
            'families': tuple(errors),
            'n_valid': sum(1 for e in errors.values() if not math.isnan(e)),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(notes),
        )

    @staticmethod
    def _score(
        family: Family,
        x: np.ndarray,
        y: np.ndarray,
        config: FitConfig,
    ) -> tuple[float, FittedModel, str | None]:
        """Fit, predict and score one family. Numeric faults become NaN."""
        violation = family.domain_violation(x, y)
        if violation is not None:
            nan_params = {k: float('nan') for k in family.parameter_names}
            return float('nan'), FittedModel(family.name, nan_params), violation

        model = FittedModel(family.name, family.fit(x, y))
        error = evaluate(y, family.predict(model.params, x), config.error_metric)

        if not math.isfinite(error):
            if not model.is_finite:
                note = "parameter estimation failed (non-finite parameters)"
            else:
                note = "predictions are not finite"
            return float('nan'), model, note

        return error, model, None
