"""Conversion between lattice units and surface pixels."""
from __future__ import annotations

from dataclasses import dataclass

from bubbles.math.vector import Vector2D
from bubbles.world.rules import GRID_HEIGHT, GRID_WIDTH

SCALE = 10
RADIUS = 1
GUN_LENGTH = 5


@dataclass(frozen=True)
class BoardTransform:
    """Affine map with the lattice origin at the bottom centre and y pointing up."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    radius: float = RADIUS
    scale: float = SCALE

    @property
    def unit(self) -> float:
        """Pixels per lattice unit (one bubble diameter)."""

        return 2 * self.radius * self.scale

    @property
    def bubble_radius(self) -> float:
        return self.radius * self.scale

    def canvas_size(self) -> tuple[int, int]:
        return (
            int((self.width + 0.5) * self.unit),
            int(self.height * self.unit),
        )

    def math_to_canvas(self, vector: Vector2D) -> Vector2D:
        return Vector2D(
            self.unit * (vector.x + self.width / 2),
            self.unit * (-vector.y + self.height),
        )

    def canvas_to_math(self, point: Vector2D) -> Vector2D:
        return Vector2D(
            point.x / self.unit - self.width / 2,
            -point.y / self.unit + self.height,
        )


__all__ = ["BoardTransform", "SCALE", "RADIUS", "GUN_LENGTH"]
