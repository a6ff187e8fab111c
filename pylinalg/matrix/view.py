"""
MatrixView: lazily evaluated window into a parent Matrix.

A view stores only its parent and two 1-based inclusive spans. Nothing is
copied until to_matrix() is called, which may happen any number of times.
While a view is alive it holds a read lock on its parent: the parent's
insert() raises MatrixBorrowedError until the view is released (or
garbage collected).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_index, normalize_span

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix, Span


class MatrixView:
    """
    Non-owning window over rows `row_range` and columns `col_range` of a
    parent matrix.

    Usage:
        with m.view((1, 2), (2, 3)) as v:
            sub = v.to_matrix()
        # m can be mutated again here

    Spans are validated against the parent on creation, so a view never
    describes a region outside its parent.
    """

    __slots__ = ('_parent', '_row_range', '_col_range', '__weakref__')

    def __init__(self, parent: Matrix, row_range: Span, col_range: Span):
        rows = normalize_span(row_range, 'row_range')
        cols = normalize_span(col_range, 'col_range')
        check_index(rows[0], cols[0], parent.shape)
        check_index(rows[-1], cols[-1], parent.shape)

        self._parent: Matrix | None = parent
        self._row_range = rows
        self._col_range = cols
        parent._views.add(self)

    @property
    def parent(self) -> Matrix:
        if self._parent is None:
            raise ValidationError("view has been released")
        return self._parent

    @property
    def row_range(self) -> tuple[int, int]:
        """1-based inclusive (first, last) rows."""
        return (self._row_range[0], self._row_range[-1])

    @property
    def col_range(self) -> tuple[int, int]:
        """1-based inclusive (first, last) columns."""
        return (self._col_range[0], self._col_range[-1])

    @property
    def rows(self) -> int:
        return len(self._row_range)

    @property
    def cols(self) -> int:
        return len(self._col_range)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def released(self) -> bool:
        return self._parent is None

    def get(self, row: int, col: int) -> float:
        """Entry at 1-based (row, col) relative to the view, read from the parent."""
        check_index(row, col, self.shape)
        return self.parent.get(self._row_range[row - 1], self._col_range[col - 1])

    def to_matrix(self) -> Matrix:
        """Materialize the window as an owned Matrix (same as parent.submatrix)."""
        return self.parent.submatrix(self.row_range, self.col_range)

    def release(self) -> None:
        """Drop the read lock on the parent. Idempotent."""
        if self._parent is not None:
            self._parent._views.discard(self)
            self._parent = None

    def __enter__(self) -> MatrixView:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return (
            f"MatrixView(rows={self.row_range[0]}..={self.row_range[1]}, "
            f"cols={self.col_range[0]}..={self.col_range[1]}, {state})"
        )
