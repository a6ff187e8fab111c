"""
Precision policy for elimination and numerical comparison.

Elimination is carried out in IEEE-754 double precision. Three constants
govern its results:
- PIVOT_EPSILON: magnitudes below this are treated as zero when choosing
  pivots and leading entries.
- ROUNDOFF_DECIMALS: every elimination result is rounded to this many
  decimal digits to suppress round-off noise.
- ILL_CONDITIONED_PIVOT_RATIO: inverse() warns when the pivots spread
  further apart than this.

ROUNDOFF describes how closely a rounded result, recombined with other
values (e.g. ``A @ A.inverse()``), can be expected to match the exact
answer.
"""

from dataclasses import dataclass

import numpy as np


# Near-zero threshold for pivot significance (machine epsilon of float64)
PIVOT_EPSILON: float = float(np.finfo(np.float64).eps)

# Decimal digits kept after elimination
ROUNDOFF_DECIMALS: int = 5


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results rounded to ROUNDOFF_DECIMALS, then recombined (e.g. A @ inv(A))
ROUNDOFF = ToleranceTier(
    rtol=0.0,
    atol=1e-4,
    name='roundoff',
    description=f'Within the {ROUNDOFF_DECIMALS}-decimal truncation of elimination results',
)


# inverse() warns when the smallest echelon pivot is this many times
# smaller than the largest. A crude conditioning indicator: results then
# carry far more than ROUNDOFF_DECIMALS worth of error.
ILL_CONDITIONED_PIVOT_RATIO: float = 1e-4
