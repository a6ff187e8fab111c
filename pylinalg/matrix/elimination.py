"""
Gaussian and Gauss-Jordan elimination.

The kernels here operate on a list of Row copies:
    forward_eliminate: row-echelon form with partial pivoting
    back_substitute:   normalize pivots to 1 and clear their columns

row_reduce() and invert() wrap the kernels with matrix decomposition,
reassembly and round-off truncation. They never mutate their input
matrix; every call works on freshly extracted rows.

Augmented columns (the rightmost `augmented_size` columns) are excluded
from the pivot search but still receive every row operation, which is
what lets [A | I] elimination produce an inverse.
"""

from __future__ import annotations

import warnings
from contextlib import nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ILL_CONDITIONED_PIVOT_RATIO,
    PIVOT_EPSILON,
)
from pylinalg.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pylinalg.core.validation import check_non_negative_int
from pylinalg.matrix.row import Row

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


def forward_eliminate(
    rows: list[Row],
    augmented_size: int = 0,
    epsilon: float = PIVOT_EPSILON,
) -> list[int]:
    """
    Reduce `rows` to row-echelon form in place.

    For each pivot column, the remaining row with the largest magnitude in
    that column is swapped up (first occurrence wins on ties). A pivot
    smaller than `epsilon` marks the column as rank-deficient: it is
    skipped and the same row position is reused for the next column.

    Args:
        rows: Rows of the matrix; reordered and replaced in place
        augmented_size: Trailing columns excluded from the pivot search
        epsilon: Near-zero threshold for pivot significance

    Returns:
        0-based pivot columns, in row order. Its length is the rank of the
        non-augmented block.
    """
    n_rows = len(rows)
    n_cols = len(rows[0]) if rows else 0
    pivot_columns: list[int] = []
    completed = 0

    for col in range(n_cols - augmented_size):
        if completed == n_rows:
            break

        magnitudes = [abs(rows[i][col]) for i in range(completed, n_rows)]
        best = completed + int(np.argmax(magnitudes))
        rows[completed], rows[best] = rows[best], rows[completed]

        pivot_row = rows[completed]
        pivot = pivot_row[col]
        if abs(pivot) < epsilon:
            continue

        for i in range(completed + 1, n_rows):
            factor = rows[i][col] / pivot
            rows[i] = rows[i] - factor * pivot_row

        pivot_columns.append(col)
        completed += 1

    return pivot_columns


def back_substitute(rows: list[Row], epsilon: float = PIVOT_EPSILON) -> None:
    """
    Turn row-echelon rows into reduced row-echelon rows in place.

    Every row is first scaled so its leading entry is 1 (all-zero rows
    are left alone). Then each leading entry is cleared from every other
    row, above and below.
    """
    for row in rows:
        lead = row.leading_index(epsilon)
        if lead is not None:
            row.scale(1.0 / row[lead])

    for p, pivot_row in enumerate(rows):
        pivot_col = pivot_row.leading_index(epsilon)
        if pivot_col is None:
            continue
        for t, target in enumerate(rows):
            if t == p:
                continue
            rows[t] = target - target[pivot_col] * pivot_row


@dataclass(frozen=True)
class Reduction:
    """
    Outcome of row_reduce().

    Attributes:
        matrix: The (reduced) row-echelon form
        pivot_columns: 0-based column of each pivot, in row order
        pivots: Pivot values of the rounded echelon stage
    """
    matrix: 'Matrix'
    pivot_columns: tuple[int, ...]
    pivots: tuple[float, ...]

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)

    @property
    def pivot_ratio(self) -> float:
        """Smallest over largest pivot magnitude (0.0 without pivots)."""
        if not self.pivots:
            return 0.0
        magnitudes = [abs(p) for p in self.pivots]
        return min(magnitudes) / max(magnitudes)


def _check_augmented_size(augmented_size: int, n_cols: int) -> int:
    augmented_size = check_non_negative_int(augmented_size, 'augmented_size')
    if augmented_size > n_cols:
        raise ValidationError(
            f"augmented_size: {augmented_size} exceeds the column count {n_cols}"
        )
    return augmented_size


def _round(matrix: Matrix, decimals: int | None) -> Matrix:
    if decimals is None:
        return matrix
    return matrix.truncate(decimals)


def row_reduce(
    matrix: Matrix,
    augmented_size: int = 0,
    *,
    reduced: bool,
    decimals: int | None,
    timer: Timer | None = None,
) -> Reduction:
    """
    Bring `matrix` to (reduced) row-echelon form.

    The echelon stage is rounded to `decimals` before back substitution,
    and the final result is rounded again. Pivots are read off the rounded
    echelon stage, so a pivot that is pure round-off (smaller than the
    rounding resolution) does not count towards the rank.

    Args:
        matrix: Input matrix (not modified)
        augmented_size: Trailing columns excluded from the pivot search
        reduced: If True, continue to reduced row-echelon form
        decimals: Digits kept after each stage, or None to keep raw values
        timer: Optional timer receiving 'forward' and 'back_substitution'
               sections
    """
    augmented_size = _check_augmented_size(augmented_size, matrix.cols)
    width = matrix.cols - augmented_size

    with timer.section('forward') if timer else nullcontext():
        rows = matrix.to_rows()
        forward_eliminate(rows, augmented_size)
        echelon = _round(type(matrix).from_rows(rows), decimals)

        rows = echelon.to_rows()
        pivot_columns: list[int] = []
        pivots: list[float] = []
        for row in rows:
            lead = row.leading_index(stop=width)
            if lead is not None:
                pivot_columns.append(lead)
                pivots.append(row[lead])

    if not reduced:
        return Reduction(echelon, tuple(pivot_columns), tuple(pivots))

    with timer.section('back_substitution') if timer else nullcontext():
        back_substitute(rows)
        result = _round(type(matrix).from_rows(rows), decimals)

    return Reduction(result, tuple(pivot_columns), tuple(pivots))


def invert(
    matrix: Matrix,
    *,
    decimals: int | None,
    timer: Timer | None = None,
) -> Matrix:
    """
    Invert a square matrix by Gauss-Jordan elimination of [A | I].

    Raises:
        DimensionError: If the matrix is not square
        SingularMatrixError: If the echelon stage has fewer than n pivots

    Warns:
        RuntimeWarning: If the pivots span more than a factor of
            1/ILL_CONDITIONED_PIVOT_RATIO, which indicates an
            ill-conditioned input.
    """
    n = matrix.rows
    if matrix.cols != n:
        raise DimensionError(
            f"inverse requires a square matrix, got {matrix.rows}×{matrix.cols}",
            expected=(n, n),
            actual=matrix.shape,
        )

    augmented_data = np.hstack([matrix.to_numpy(), np.eye(n)]).ravel()
    augmented = type(matrix).new(n, 2 * n, augmented_data)

    reduction = row_reduce(
        augmented, n, reduced=True, decimals=decimals, timer=timer,
    )

    if reduction.rank < n:
        raise SingularMatrixError(
            f"Matrix is singular: rank={reduction.rank}, expected={n}. "
            f"It has no inverse.",
            matrix_name='A',
            rank=reduction.rank,
            expected_rank=n,
        )

    if reduction.pivot_ratio < ILL_CONDITIONED_PIVOT_RATIO:
        warnings.warn(
            f"Inverse may be inaccurate: smallest to largest pivot magnitude "
            f"ratio is {reduction.pivot_ratio:.3g}. The matrix is likely "
            f"ill-conditioned.",
            RuntimeWarning,
            stacklevel=3,
        )

    return _round(reduction.matrix.submatrix((1, n), (n + 1, 2 * n)), decimals)
