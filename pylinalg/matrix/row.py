"""
Row: one matrix row, copied out of the parent buffer for elimination.

Rows are transient. A Matrix is decomposed into Rows, the elimination
algorithms combine them with scaling and subtraction, and the result is
reassembled into a new Matrix. A Row owns its values and never aliases
the matrix it came from.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import PIVOT_EPSILON
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_1d, check_array


class Row:
    """
    Resizable sequence of float64 values representing one matrix row.

    Supports ``row * k``, ``k * row``, ``row - other`` and 0-based indexed
    access. Arithmetic returns new rows; only item assignment and
    ``scale()`` mutate in place.
    """

    __slots__ = ('_values',)

    def __init__(self, values: ArrayLike):
        values = check_array(values, 'values')
        check_1d(values, 'values')
        self._values: NDArray[np.float64] = values

    @property
    def values(self) -> NDArray[np.float64]:
        """The row's own buffer (not a copy)."""
        return self._values

    def __len__(self) -> int:
        return self._values.shape[0]

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = value

    def __mul__(self, factor: Any) -> Row:
        if isinstance(factor, Row):
            return NotImplemented
        return Row(self._values * float(factor))

    __rmul__ = __mul__

    def __sub__(self, other: Any) -> Row:
        if not isinstance(other, Row):
            return NotImplemented
        if len(other) != len(self):
            raise DimensionError(
                f"Row length mismatch: {len(self)} vs {len(other)}",
                expected=len(self),
                actual=len(other),
            )
        return Row(self._values - other._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Row({self._values.tolist()})"

    def scale(self, factor: float) -> None:
        """Multiply every value by `factor` in place."""
        self._values *= factor

    def leading_index(
        self,
        epsilon: float = PIVOT_EPSILON,
        stop: int | None = None,
    ) -> int | None:
        """
        0-based index of the first value whose magnitude exceeds `epsilon`.

        Only indices below `stop` are searched when it is given. Returns
        None for a row that is zero within `epsilon` over that stretch.
        """
        significant = np.flatnonzero(np.abs(self._values[:stop]) > epsilon)
        if significant.size == 0:
            return None
        return int(significant[0])

    def copy(self) -> Row:
        return Row(self._values)
