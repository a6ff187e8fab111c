"""
Generic result container for pylinalg computations.

The Result class provides a standardized envelope that solver entry points
return. This enables shared tooling for timing and diagnostics while
allowing each solver to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (form, rank, decimals)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result, for reproducibility."""
    from pylinalg import __version__
    return {
        'pylinalg_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The solver-specific parameter payload type
        
    Attributes:
        params: Solver-specific payload (reduced matrix, pivots, etc.)
        info: Structured metadata (form, rank, decimals)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions (filled automatically if omitted)
    
    Examples:
        >>> Result(
        ...     params=EliminationParams(matrix=m, pivot_columns=(1, 2),
        ...                              pivots=(3.0, 4.33333), rank=2),
        ...     info={'form': 'reduced', 'rank': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_rows'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
