"""
Core infrastructure for pylinalg.

This module provides shared abstractions and utilities used by the matrix
engine and the geometry types.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and precision policy
"""

from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    SingularMatrixError,
    MatrixBorrowedError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    "MatrixBorrowedError",
]
