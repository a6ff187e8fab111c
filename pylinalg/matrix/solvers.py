"""
Solver entry point for row reduction.

eliminate() runs the same kernels as Matrix.echelon_aug() and
Matrix.reduced_echelon(), and additionally reports pivots, rank and
timing in a Result envelope.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.compute.timing import timed
from pylinalg.core.compute.tolerances import ROUNDOFF_DECIMALS
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.result import Result
from pylinalg.matrix.elimination import row_reduce
from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solution import EliminationParams, EliminationSolution
from pylinalg.matrix.view import MatrixView


Form = Literal['echelon', 'reduced']


def _ensure_matrix(data: Matrix | MatrixView | ArrayLike) -> Matrix:
    """Convert a view or a 2D array-like to a Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    if isinstance(data, MatrixView):
        return data.to_matrix()
    return Matrix.from_numpy(data)


def eliminate(
    data: Matrix | MatrixView | ArrayLike,
    *,
    form: Form = 'echelon',
    augmented_size: int = 0,
    decimals: int | None = ROUNDOFF_DECIMALS,
) -> EliminationSolution:
    """
    Reduce a matrix to row-echelon or reduced row-echelon form.

    Parameters
    ----------
    data : Matrix, MatrixView or 2D array-like
        The matrix to reduce. It is not modified.
    form : str
        'echelon' (forward elimination) or 'reduced' (Gauss-Jordan).
    augmented_size : int
        Number of trailing augmented columns, excluded from the pivot search.
    decimals : int or None
        Decimal digits kept after elimination. None keeps raw values.

    Returns
    -------
    EliminationSolution with the reduced matrix, pivot columns and rank.
    A rank-deficient input is not an error; it is reported in warnings.
    """
    if form not in ('echelon', 'reduced'):
        raise ValidationError(
            f"form: expected 'echelon' or 'reduced', got {form!r}"
        )

    matrix = _ensure_matrix(data)

    with timed() as timer:
        reduction = row_reduce(
            matrix,
            augmented_size,
            reduced=(form == 'reduced'),
            decimals=decimals,
            timer=timer,
        )

    rank = reduction.rank
    max_rank = min(matrix.rows, matrix.cols - augmented_size)

    warnings_list: list[str] = []
    if rank < max_rank:
        warnings_list.append(
            f"Matrix is rank-deficient: rank={rank}, expected={max_rank}"
        )

    result = Result(
        params=EliminationParams(
            matrix=reduction.matrix,
            pivot_columns=tuple(c + 1 for c in reduction.pivot_columns),
            pivots=reduction.pivots,
            rank=rank,
        ),
        info={
            'form': form,
            'rows': matrix.rows,
            'cols': matrix.cols,
            'augmented_size': augmented_size,
            'decimals': decimals,
            'rank': rank,
            'max_rank': max_rank,
            'pivot_ratio': reduction.pivot_ratio,
        },
        timing=timer.result(),
        backend_name='cpu_rows',
        warnings=tuple(warnings_list),
    )
    return EliminationSolution(_result=result)
