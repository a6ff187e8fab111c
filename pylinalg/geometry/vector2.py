"""
Vector2: two-component vector over ints or floats.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import astuple, dataclass
from typing import Any, Iterator

Number = int | float


@dataclass(order=True)
class Vector2:
    """
    Vector with components `x` and `y`.

    Supports ``+``, ``-``, ``* scalar`` and their in-place forms.
    Comparison is lexicographic on (x, y).
    """
    x: Number
    y: Number

    @classmethod
    def from_tuple(cls, pair: tuple[Number, Number]) -> Vector2:
        x, y = pair
        return cls(x, y)

    def astuple(self) -> tuple[Number, Number]:
        return astuple(self)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"

    def __add__(self, other: Any) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Any) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Any) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Any) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: Any) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __imul__(self, scalar: Any) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def checked_sub(self, other: Vector2) -> Vector2 | None:
        """
        Subtraction for non-negative coordinates.

        Returns None if either component would drop below zero.
        """
        x, y = self.x - other.x, self.y - other.y
        if x < 0 or y < 0:
            return None
        return Vector2(x, y)

    def mag(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def angle(self, other: Vector2) -> float:
        """Angle to `other` in radians; NaN if either vector has zero length."""
        magnitudes = self.mag() * other.mag()
        if magnitudes == 0.0:
            return math.nan
        cosine = self.dot(other) / magnitudes
        # clamp round-off outside acos' domain
        return math.acos(max(-1.0, min(1.0, cosine)))

    @staticmethod
    def dot_mag(u: float, v: float, angle: float) -> float:
        """u * v * sin(angle), for magnitudes u and v."""
        return u * v * math.sin(angle)
