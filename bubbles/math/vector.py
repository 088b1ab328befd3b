"""Immutable 2D vector used by the lattice and flight simulation."""
from __future__ import annotations

from dataclasses import dataclass
from math import cos, hypot, sin

Matrix2 = tuple[tuple[float, float], tuple[float, float]]


def rotation_matrix(angle: float) -> Matrix2:
    """Return the row-major matrix rotating counter-clockwise by ``angle`` radians."""

    c = cos(angle)
    s = sin(angle)
    return ((c, -s), (s, c))


@dataclass(frozen=True)
class Vector2D:
    """Plain 2D vector in lattice units.

    Rendering code converts to ``pygame.math.Vector2`` at the surface boundary;
    the simulation keeps this immutable type so positions can be shared safely.
    """

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2D":
        if scalar == 0:
            raise ValueError("Cannot divide a vector by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def add(self, other: "Vector2D") -> "Vector2D":
        return self + other

    def sub(self, other: "Vector2D") -> "Vector2D":
        return self - other

    def scale(self, scalar: float) -> "Vector2D":
        return self * scalar

    def div(self, scalar: float) -> "Vector2D":
        return self / scalar

    def length(self) -> float:
        return hypot(self.x, self.y)

    def distance_to(self, other: "Vector2D") -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def normalized(self) -> "Vector2D":
        magnitude = self.length()
        if magnitude == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return self / magnitude

    def rotate(self, matrix: Matrix2) -> "Vector2D":
        (a, b), (c, d) = matrix
        return Vector2D(a * self.x + b * self.y, c * self.x + d * self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ZERO = Vector2D(0.0, 0.0)


__all__ = ["Vector2D", "Matrix2", "rotation_matrix", "ZERO"]
