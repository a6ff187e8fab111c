"""
Matrix: dense, row-major matrix of float64 values.

Entries are addressed with 1-based (row, col) indices so that indices
line up with the usual mathematical notation. Sub-regions are selected
with 1-based inclusive spans, given either as a ``(start, end)`` tuple or
as a ``range`` whose elements are the 1-based indices to keep::

    m.submatrix((1, 2), (2, 3))           # rows 1..=2, cols 2..=3
    m.submatrix(range(1, 3), range(2, 4))  # same selection

Apart from insert(), every operation returns a new Matrix.
"""

from __future__ import annotations

import weakref
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import ROUNDOFF_DECIMALS
from pylinalg.core.exceptions import (
    DimensionError,
    MatrixBorrowedError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_index,
    check_length,
    check_ndim,
    check_non_negative_int,
    check_positive_int,
    normalize_span,
)
from pylinalg.matrix import elimination
from pylinalg.matrix.row import Row
from pylinalg.matrix.view import MatrixView


Span = tuple[int, int] | range

# Largest d for which 10.0**d is finite
_MAX_DECIMALS = 308

# Float64 values at or above this magnitude have no fractional part
_INTEGRAL_MAGNITUDE = 2.0 ** 52


def to_f64(*values: Any) -> list[float]:
    """
    Coerce numeric literals to floats, for readable matrix literals.

    >>> Matrix.new(2, 2, to_f64(1, 0,
    ...                         0, 1))
    """
    array = check_array(list(values), 'values')
    check_1d(array, 'values')
    return array.tolist()


def _format_value(value: float) -> str:
    return np.format_float_positional(value, trim='-')


class Matrix:
    """
    Dense matrix stored as a flat row-major float64 buffer.

    Construction:
        Matrix.new(rows, cols, data)    # validated flat row-major data
        Matrix.empty(rows, cols)        # reserved, populated later by insert()
        Matrix.identity(n)
        Matrix.from_numpy(array)        # any 2D array-like

    Equality is exact structural equality on (rows, cols, data). Use
    row_eq() for row equivalence.

    Examples:
        >>> m = Matrix.new(2, 4, to_f64(3, -2, -3, 3,
        ...                             2, 3, 3, 2))
        >>> m.get(1, 1), m.get(2, 4)
        (3.0, 2.0)
        >>> m.echelon()
    """

    __slots__ = ('_data', '_rows', '_cols', '_views', '__weakref__')

    def __init__(self, rows: int, cols: int, data: ArrayLike | None = None):
        self._rows = check_positive_int(rows, 'rows')
        self._cols = check_positive_int(cols, 'cols')
        self._data: NDArray[np.float64] = np.empty(0, dtype=np.float64)
        self._views: weakref.WeakSet = weakref.WeakSet()
        if data is not None:
            self.insert(data)

    # --- Construction ---

    @classmethod
    def empty(cls, rows: int, cols: int) -> Matrix:
        """Matrix with capacity rows*cols and no populated entries."""
        return cls(rows, cols)

    @classmethod
    def new(cls, rows: int, cols: int, data: ArrayLike) -> Matrix:
        """
        Matrix filled from a flat row-major sequence.

        Raises:
            DimensionError: If len(data) != rows * cols
        """
        return cls(rows, cols, data)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_positive_int(n, 'n')
        return cls(n, n, np.eye(n).ravel())

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """Matrix from a 2D array-like of shape (rows, cols)."""
        array = check_array(array, 'array')
        check_ndim(array, 2, 'array')
        rows, cols = array.shape
        return cls(rows, cols, array.ravel())

    @classmethod
    def from_rows(cls, rows: list[Row]) -> Matrix:
        """Reassemble a matrix from Row objects (copied)."""
        if not rows:
            raise ValidationError("rows: need at least one row")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise DimensionError(
                    f"rows: row {i + 1} has {len(row)} values, expected {width}",
                    expected=width,
                    actual=len(row),
                )
        return cls(len(rows), width, np.concatenate([row.values for row in rows]))

    def insert(self, data: ArrayLike) -> None:
        """
        Overwrite the backing buffer with a flat row-major sequence.

        Raises:
            DimensionError: If len(data) != rows * cols
            ValidationError: If data holds NaN or Inf
            MatrixBorrowedError: If views over this matrix are still alive
        """
        n_views = len(self._views)
        if n_views:
            raise MatrixBorrowedError(
                f"Cannot insert into a matrix with {n_views} live view(s); "
                f"release them first",
                n_views=n_views,
            )
        array = check_array(data, 'data')
        check_1d(array, 'data')
        check_finite(array, 'data')
        check_length(array, self._rows * self._cols, 'data')
        self._data = array

    # --- Shape and access ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def capacity(self) -> int:
        """Reserved storage: rows * cols, whether populated or not."""
        return self._rows * self._cols

    def __len__(self) -> int:
        """Number of populated scalars (0 until insert() on an empty matrix)."""
        return self._data.shape[0]

    def is_empty(self) -> bool:
        """True while no data has been inserted (not the same as all-zero)."""
        return len(self) == 0

    def _require_data(self) -> None:
        if self.is_empty():
            raise ValidationError(
                f"matrix {self._rows}×{self._cols} has no data; call insert() first"
            )

    def get(self, row: int, col: int) -> float:
        """
        Entry at 1-based (row, col).

        Raises:
            IndexOutOfBoundsError: If row or col is outside the matrix (0 included)
        """
        check_index(row, col, self.shape)
        self._require_data()
        return float(self._data[(row - 1) * self._cols + (col - 1)])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the entries as a (rows, cols) array."""
        self._require_data()
        return self._data.reshape(self._rows, self._cols).copy()

    def to_rows(self) -> list[Row]:
        """Decompose into independent Row copies, top to bottom."""
        self._require_data()
        return [Row(line) for line in self._data.reshape(self._rows, self._cols)]

    # --- Sub-regions ---

    def submatrix(self, row_range: Span, col_range: Span) -> Matrix:
        """
        Copy of the entries in the given 1-based inclusive spans.

        For the 4×4 matrix

            1 1 1 1
            4 2 2 6
            3 3 3 3
            4 4 4 4

        ``submatrix((1, 2), (2, 3))`` is the 2×2 matrix ``1 1 / 2 2``.

        Raises:
            ValidationError: If a span is malformed or empty
            IndexOutOfBoundsError: If a span reaches outside the matrix
        """
        rows = normalize_span(row_range, 'row_range')
        cols = normalize_span(col_range, 'col_range')
        check_index(rows[0], cols[0], self.shape)
        check_index(rows[-1], cols[-1], self.shape)
        self._require_data()

        grid = self._data.reshape(self._rows, self._cols)
        block = grid[rows[0] - 1:rows[-1], cols[0] - 1:cols[-1]]
        return type(self)(len(rows), len(cols), block.ravel())

    def view(self, row_range: Span, col_range: Span) -> MatrixView:
        """
        Zero-copy window over the given 1-based inclusive spans.

        The matrix cannot be insert()-ed into while the view is alive.
        """
        return MatrixView(self, row_range, col_range)

    # --- Value operations ---

    def truncate(self, decimals: int) -> Matrix:
        """
        Round every entry to `decimals` decimal digits.

        Uses round-half-away-from-zero on ``x * 10**decimals``. Entries
        whose scaled magnitude reaches 2**52 are already integral at that
        resolution and are kept as they are; so is every entry once
        ``10**decimals`` overflows float64. Negative zeros produced by
        rounding are normalized to 0.0.
        """
        decimals = check_non_negative_int(decimals, 'decimals')
        self._require_data()
        if decimals > _MAX_DECIMALS:
            return self.copy()

        factor = 10.0 ** decimals
        with np.errstate(over='ignore', invalid='ignore'):
            scaled = self._data * factor
            whole = np.trunc(scaled)
            # exact for |scaled| < 2**52
            carry = np.abs(scaled - whole) >= 0.5
            rounded = (whole + np.where(carry, np.sign(scaled), 0.0)) / factor
        integral = ~(np.abs(scaled) < _INTEGRAL_MAGNITUDE)
        result = np.where(integral, self._data, rounded)
        return type(self)(self._rows, self._cols, result + 0.0)

    def copy(self) -> Matrix:
        """Independent copy of the matrix (views are not carried over)."""
        clone = type(self)(self._rows, self._cols)
        clone._data = self._data.copy()
        return clone

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise DimensionError(
                f"Cannot multiply {self._rows}×{self._cols} by "
                f"{other._rows}×{other._cols}",
                expected=self._cols,
                actual=other._rows,
            )
        product = self.to_numpy() @ other.to_numpy()
        return type(self)(self._rows, other._cols, product.ravel())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None  # mutable through insert()

    def __str__(self) -> str:
        lines = ["Matrix"]
        if not self.is_empty():
            for line in self._data.reshape(self._rows, self._cols):
                lines.append(" ".join(_format_value(v) for v in line))
        return "\n".join(lines) + "\n"

    __repr__ = __str__

    # --- Elimination ---

    def echelon(self, *, decimals: int | None = ROUNDOFF_DECIMALS) -> Matrix:
        """Row-echelon form (no augmented columns). See echelon_aug()."""
        return self.echelon_aug(0, decimals=decimals)

    def echelon_aug(
        self,
        augmented_size: int,
        *,
        decimals: int | None = ROUNDOFF_DECIMALS,
    ) -> Matrix:
        """
        Row-echelon form by forward elimination with partial pivoting.

        Args:
            augmented_size: Number of trailing augmented columns. They are
                never used as pivots but take part in every row operation.
            decimals: Digits kept to suppress round-off, or None
        """
        return elimination.row_reduce(
            self, augmented_size, reduced=False, decimals=decimals,
        ).matrix

    def reduced_echelon(
        self,
        augmented_size: int = 0,
        *,
        decimals: int | None = ROUNDOFF_DECIMALS,
    ) -> Matrix:
        """
        Reduced row-echelon form by Gauss-Jordan elimination.

        Every leading entry becomes 1 and is the only non-zero entry in
        its column.
        """
        return elimination.row_reduce(
            self, augmented_size, reduced=True, decimals=decimals,
        ).matrix

    def inverse(self, *, decimals: int | None = ROUNDOFF_DECIMALS) -> Matrix:
        """
        Inverse via reduction of the augmented matrix [A | I].

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        return elimination.invert(self, decimals=decimals)

    def rank(self, *, decimals: int | None = ROUNDOFF_DECIMALS) -> int:
        """
        Number of pivots in the row-echelon form.

        Entries that round to zero at `decimals` digits do not count as
        pivots.
        """
        return elimination.row_reduce(
            self, 0, reduced=False, decimals=decimals,
        ).rank

    def row_eq(self, other: Matrix) -> bool:
        """True if both matrices have the same reduced row-echelon form."""
        return self.reduced_echelon() == other.reduced_echelon()
