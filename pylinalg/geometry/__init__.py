"""
2D geometry value types.

    Vector2 - displacement with arithmetic, magnitude, dot product and angle
    Point2  - position, offset by Vector2
"""

from pylinalg.geometry.vector2 import Vector2
from pylinalg.geometry.point2 import Point2

__all__ = [
    "Vector2",
    "Point2",
]
