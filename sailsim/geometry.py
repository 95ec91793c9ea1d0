"""
Geometry Module
===============

2D vector arithmetic and angle helpers shared by the physics model.

Angles are in radians. Headings, trim angles and wind angles are kept in
[-pi, pi) with bound_angle().
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector (or point)."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zeros(cls) -> 'Vector2':
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> 'Vector2':
        """Point on the unit circle for an angle in radians."""
        return cls(math.cos(angle), math.sin(angle))

    def to_angle(self) -> float:
        """Angle of the vector relative to the x axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_between(self, other: 'Vector2') -> float:
        """Angle of the line from other to self, relative to the x axis."""
        return (self - other).to_angle()

    def dist(self, other: 'Vector2') -> float:
        return (self - other).magnitude()

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def unit(self) -> 'Vector2':
        """
        Unit vector in the same direction.

        Raises:
            ZeroDivisionError: for the zero vector, which has no direction
        """
        hypo = self.magnitude()
        return Vector2(self.x / hypo, self.y / hypo)

    def scale(self, mult: float) -> 'Vector2':
        return Vector2(self.x * mult, self.y * mult)

    def swap(self) -> 'Vector2':
        return Vector2(self.y, self.x)

    def rotate(self, angle: float) -> 'Vector2':
        """Rotate counter-clockwise by angle (radians)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2(
            cos * self.x - sin * self.y,
            sin * self.x + cos * self.y
        )

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: 'Vector2') -> 'Vector2':
        # Componentwise, use scale() for scalars
        return Vector2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x / other.x, self.y / other.y)

    def __neg__(self) -> 'Vector2':
        return Vector2(-self.x, -self.y)


def bound(value: float, lower: float, upper: float) -> float:
    """
    Wrap a value periodically into [lower, upper).

    Args:
        value: Value to wrap
        lower: Inclusive lower limit
        upper: Exclusive upper limit (period is upper - lower)

    Returns:
        Equivalent value inside [lower, upper)
    """
    span = upper - lower
    wrapped = lower + (value - lower) % span
    # Float modulo can round up to exactly the span
    if wrapped >= upper:
        wrapped = lower
    return wrapped


def bound_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return bound(angle, -math.pi, math.pi)


def invert_angle(angle: float) -> float:
    """The opposite direction of an angle, wrapped into [-pi, pi)."""
    return bound_angle(angle + math.pi)


def find_angle(a: float, b: float, c: float) -> float:
    """
    Angle opposite side c of a triangle with sides a, b, c (law of cosines).

    Side lengths that cannot close a triangle are clamped to the nearest
    degenerate triangle (0 or pi).
    """
    cos_c = (a * a + b * b - c * c) / (2.0 * a * b)
    return math.acos(max(-1.0, min(1.0, cos_c)))
