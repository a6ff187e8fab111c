"""
Dense matrix engine.

Public API:
    Matrix          - row-major float64 matrix with 1-based access
    MatrixView      - zero-copy window into a Matrix
    to_f64(...)     - coerce numeric literals for matrix construction
    eliminate(m)    - row reduction with pivot/rank reporting
"""

from pylinalg.matrix.matrix import Matrix, Span, to_f64
from pylinalg.matrix.view import MatrixView
from pylinalg.matrix.row import Row
from pylinalg.matrix.solution import EliminationParams, EliminationSolution
from pylinalg.matrix.solvers import eliminate

__all__ = [
    "Matrix",
    "MatrixView",
    "Row",
    "Span",
    "to_f64",
    "eliminate",
    "EliminationParams",
    "EliminationSolution",
]
