"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when a data buffer does not match the declared shape, when an
    operation requires a square matrix, or when two operands have
    incompatible shapes.
    
    Attributes:
        expected: Expected size or shape, if known
        actual: Actual size or shape, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    A 1-based index falls outside the matrix.
    
    Also an IndexError so that generic index handling keeps working.
    
    Attributes:
        row: Requested 1-based row
        col: Requested 1-based column
        shape: (rows, cols) of the matrix that was indexed
    """
    
    def __init__(self, row: int, col: int, shape: tuple[int, int]):
        super().__init__(
            f"index out of bounds: requested ({row}, {col}), "
            f"matrix is {shape[0]}×{shape[1]}"
        )
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when a matrix operation requires invertibility but forward
    elimination finds fewer pivots than rows.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots found
        expected_rank: Number of pivots required (the matrix order)
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class MatrixBorrowedError(PyLinalgError):
    """
    Matrix cannot be mutated while views over it are alive.
    
    Attributes:
        n_views: Number of live views holding the matrix
    """
    
    def __init__(self, message: str, n_views: int):
        super().__init__(message)
        self.n_views = n_views
