"""
Elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for an elimination.

    Attributes:
        matrix: The (reduced) row-echelon form
        pivot_columns: 1-based pivot columns of the row-echelon form
        pivots: Pivot values of the row-echelon form
        rank: Number of pivots
    """
    matrix: 'Matrix'
    pivot_columns: tuple[int, ...]
    pivots: tuple[float, ...]
    rank: int


@dataclass
class EliminationSolution:
    """
    User-facing elimination results.

    Wraps Result[EliminationParams] and provides convenient accessors.
    """
    _result: Result[EliminationParams]

    @property
    def matrix(self) -> 'Matrix':
        """The eliminated matrix."""
        return self._result.params.matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        """1-based pivot columns, in row order."""
        return self._result.params.pivot_columns

    @property
    def pivots(self) -> tuple[float, ...]:
        """Pivot values (before normalization to 1), in row order."""
        return self._result.params.pivots

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def form(self) -> str:
        return self._result.info['form']

    @property
    def is_full_rank(self) -> bool:
        """True when every row, or every non-augmented column, has a pivot."""
        return self.rank == self._result.info['max_rank']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable elimination report."""
        info = self._result.info
        lines = [
            f"Elimination ({info['form']} form)",
            "=" * 40,
            f"Shape: {info['rows']}×{info['cols']} "
            f"(augmented columns: {info['augmented_size']})",
            f"Rank: {self.rank} of {info['max_rank']}",
            f"Pivot columns: {', '.join(str(c) for c in self.pivot_columns) or 'none'}",
            f"Decimals kept: {info['decimals']}",
            "",
            str(self.matrix).rstrip("\n"),
        ]
        if self.warnings:
            lines.append("")
            lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EliminationSolution(form={self.form!r}, "
            f"rank={self.rank}, shape={self.matrix.shape})"
        )
