"""Gameplay constants for the bubble board."""
from __future__ import annotations

from dataclasses import dataclass
from math import pi

GRID_WIDTH = 40
GRID_HEIGHT = 30
SEEDED_ROWS = 5

COLLISION_DISTANCE = 1.12
FLIGHT_STEP = 0.75
TICK_DELAY = 0.010  # seconds between flight ticks

SCORE_AWARD = 10
SCORE_PENALTY = 10
MIN_CLUSTER = 2

AIM_STEP_ANGLE = pi / 360


@dataclass(frozen=True)
class GameRules:
    """Bundle of the board constants handed to the round controller."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    seeded_rows: int = SEEDED_ROWS
    collision_distance: float = COLLISION_DISTANCE
    flight_step: float = FLIGHT_STEP
    award: int = SCORE_AWARD
    penalty: int = SCORE_PENALTY
    min_cluster: int = MIN_CLUSTER
    aim_step: float = AIM_STEP_ANGLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board must have positive size, got {self.width}x{self.height}")
        if self.flight_step <= 0.0:
            raise ValueError("flight_step must be positive")

    @property
    def half_width(self) -> float:
        return self.width / 2

    def in_play_area(self, x: float, y: float) -> bool:
        """True while a projectile at (x, y) is still inside the playable band."""

        limit = self.half_width + 1
        return -limit <= x <= limit and 0 <= y <= self.height


DEFAULT_RULES = GameRules()


__all__ = [
    "GameRules",
    "DEFAULT_RULES",
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "SEEDED_ROWS",
    "COLLISION_DISTANCE",
    "FLIGHT_STEP",
    "TICK_DELAY",
    "SCORE_AWARD",
    "SCORE_PENALTY",
    "MIN_CLUSTER",
    "AIM_STEP_ANGLE",
]
