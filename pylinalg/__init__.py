"""
pylinalg: dense matrix engine with Gaussian elimination.

Row-major float64 matrices with 1-based access, materialized and virtual
sub-regions, row-echelon and reduced row-echelon forms, and inversion by
[A | I] elimination. Also provides small 2D vector and point types.

Submodules:
    matrix: Matrix, MatrixView, elimination
    geometry: Vector2, Point2
    core: Exceptions, validation, result envelope, precision policy
"""

__version__ = "0.1.0"

from pylinalg.matrix import Matrix, MatrixView, to_f64, eliminate
from pylinalg.geometry import Vector2, Point2
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
    "__version__",
    "Matrix",
    "MatrixView",
    "to_f64",
    "eliminate",
    "Vector2",
    "Point2",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    "MatrixBorrowedError",
]
