"""
Shared compute infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot threshold, round-off policy and comparison tier
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    PIVOT_EPSILON,
    ROUNDOFF_DECIMALS,
    ROUNDOFF,
    ToleranceTier,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Precision policy
    "PIVOT_EPSILON",
    "ROUNDOFF_DECIMALS",
    "ROUNDOFF",
    "ToleranceTier",
]
