"""
Generic result container for fitdetect computations.

The Result class provides a standardized envelope for backend output.
Timing, diagnostics and non-fatal notes travel here so that the
parameter payload itself stays purely numerical.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (metric, preprocessing, family order)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for model-selection computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (fitted models, error table)
        info: Structured metadata (method, metric, preprocessing)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SelectionParams(...),
        ...     info={'method': 'closed_form', 'metric': 'MSE'},
        ...     timing={'total_seconds': 0.001, 'linear': 0.0001},
        ...     backend_name='cpu_closed_form',
        ...     warnings=('logarithmic: requires x > 0 (1 non-positive value)',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
