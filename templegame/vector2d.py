"""Two-dimensional vector with the arithmetic used throughout the game."""

from __future__ import annotations

import math
from collections.abc import Iterator

_EPSILON = 1.0e-6


class Vector2D:
    """A mutable 2D vector.

    ``Vector2D(s)`` sets both components to ``s``; ``Vector2D(x, y)`` sets them
    separately. Division by a (near) zero scalar or component yields the zero
    vector instead of raising.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def copy(self) -> Vector2D:
        """Return an independent copy."""
        return Vector2D(self.x, self.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, other: Vector2D | float) -> Vector2D:
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        return Vector2D(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> Vector2D:
        return Vector2D(self.x * other, self.y * other)

    def __imul__(self, other: Vector2D | float) -> Vector2D:
        if isinstance(other, Vector2D):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self

    def __truediv__(self, other: Vector2D | float) -> Vector2D:
        if isinstance(other, Vector2D):
            if abs(other.x) < _EPSILON or abs(other.y) < _EPSILON:
                return Vector2D(0.0)
            return Vector2D(self.x / other.x, self.y / other.y)
        if abs(other) < _EPSILON:
            return Vector2D(0.0)
        return Vector2D(self.x / other, self.y / other)

    def __itruediv__(self, other: Vector2D | float) -> Vector2D:
        result = self / other
        self.x, self.y = result.x, result.y
        return self

    def sqr_length(self) -> float:
        """Squared length."""
        return Vector2D.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction, or the zero vector."""
        return self / self.length()

    @staticmethod
    def dot(a: Vector2D, b: Vector2D | None = None) -> float:
        """Dot product of ``a`` and ``b``; with ``b`` omitted, ``a`` with itself."""
        if b is None:
            b = a
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: Vector2D, b: Vector2D) -> float:
        """Z component of the cross product."""
        return a.x * b.y - a.y * b.x

    @staticmethod
    def lerp(a: Vector2D, b: Vector2D, t: float) -> Vector2D:
        """Linear interpolation between ``a`` and ``b``."""
        return a + (b - a) * t

    @staticmethod
    def distance(a: Vector2D, b: Vector2D) -> float:
        """Squared distance between ``a`` and ``b``."""
        return (a - b).sqr_length()

    @staticmethod
    def clamp(x: float, min_val: float, max_val: float) -> float:
        """Clamp ``x`` into ``[min_val, max_val]``."""
        return max(min_val, min(max_val, x))