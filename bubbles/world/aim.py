"""Gun aim state."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from bubbles.engine.logger import ChannelLogger
from bubbles.math.vector import Matrix2, Vector2D, rotation_matrix
from bubbles.world.rules import AIM_STEP_ANGLE

DEFAULT_AIM = Vector2D(0.0, 1.0)


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


class AimController:
    """Holds the gun direction.

    The stored vector is whatever the last input produced (a pointer position or
    a rotated copy of it); consumers call :meth:`direction` for a unit vector.
    """

    def __init__(
        self,
        aim: Vector2D = DEFAULT_AIM,
        step: float = AIM_STEP_ANGLE,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        if aim.length() == 0:
            raise ValueError("Aim vector must be non-zero")
        self.aim = aim
        self.logger = logger
        self._matrices: dict[Direction, Matrix2] = {
            Direction.LEFT: rotation_matrix(step),
            Direction.RIGHT: rotation_matrix(-step),
        }

    def rotate(self, direction: Direction) -> Vector2D:
        self.aim = self.aim.rotate(self._matrices[direction])
        return self.aim

    def point_at(self, target: Vector2D, origin: Vector2D = Vector2D(0.0, 0.0)) -> bool:
        """Aim from ``origin`` towards ``target``; a target on the muzzle is ignored."""

        aim = target - origin
        if aim.length() == 0:
            if self.logger:
                self.logger.debug("Ignoring aim target on the muzzle")
            return False
        self.aim = aim
        return True

    def direction(self) -> Vector2D:
        return self.aim.normalized()


__all__ = ["AimController", "Direction", "DEFAULT_AIM"]
