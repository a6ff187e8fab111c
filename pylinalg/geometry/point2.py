"""
Point2: a position in 2D space, moved by Vector2 offsets.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any, Iterator

from pylinalg.geometry.vector2 import Number, Vector2


@dataclass(order=True)
class Point2:
    """Point with coordinates `x` and `y`."""
    x: Number
    y: Number

    @classmethod
    def from_tuple(cls, pair: tuple[Number, Number]) -> Point2:
        x, y = pair
        return cls(x, y)

    def astuple(self) -> tuple[Number, Number]:
        return astuple(self)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __add__(self, offset: Any) -> Point2:
        if not isinstance(offset, Vector2):
            return NotImplemented
        return Point2(self.x + offset.x, self.y + offset.y)

    def __iadd__(self, offset: Any) -> Point2:
        if not isinstance(offset, Vector2):
            return NotImplemented
        self.x += offset.x
        self.y += offset.y
        return self

    def __sub__(self, offset: Any) -> Point2:
        if not isinstance(offset, Vector2):
            return NotImplemented
        return Point2(self.x - offset.x, self.y - offset.y)

    def __isub__(self, offset: Any) -> Point2:
        if not isinstance(offset, Vector2):
            return NotImplemented
        self.x -= offset.x
        self.y -= offset.y
        return self

    def checked_sub(self, offset: Vector2) -> Point2 | None:
        """
        Move back by `offset`, keeping coordinates non-negative.

        Returns None if either coordinate would drop below zero.
        """
        x, y = self.x - offset.x, self.y - offset.y
        if x < 0 or y < 0:
            return None
        return Point2(x, y)
