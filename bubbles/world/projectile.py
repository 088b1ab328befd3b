"""Straight-line projectile flight over the bubble grid."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bubbles.engine.logger import ChannelLogger
from bubbles.math.vector import ZERO, Vector2D
from bubbles.world.grid import BubbleColor, HexCoord, HexGrid
from bubbles.world.rules import DEFAULT_RULES, GameRules


class FlightState(Enum):
    FLYING = "flying"
    LANDED = "landed"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass
class Projectile:
    """The bubble currently loaded in (or fired from) the gun."""

    color: BubbleColor
    position: Vector2D = ZERO
    origin: Vector2D = ZERO


def find_collision(
    grid: HexGrid, position: Vector2D, threshold: float
) -> Optional[HexCoord]:
    """Return the first coloured cell in reading order closer than ``threshold``."""

    for coord in grid.occupied():
        if coord.to_vector().distance_to(position) < threshold:
            return coord
    return None


class ProjectileSimulator:
    """Advances one fired projectile along its frozen ray.

    Each :meth:`tick` inspects the current position before moving: a nearby
    coloured cell ends the flight as ``LANDED``; leaving the play band ends it as
    ``OUT_OF_BOUNDS``. Otherwise the projectile is placed at
    ``origin + direction * t`` and ``t`` advances by the flight step.
    """

    def __init__(
        self,
        grid: HexGrid,
        projectile: Projectile,
        direction: Vector2D,
        rules: GameRules = DEFAULT_RULES,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.grid = grid
        self.projectile = projectile
        self.direction = direction.normalized()
        self.rules = rules
        self.logger = logger
        self.time = 0.0
        self.ticks = 0
        self.state = FlightState.FLYING
        self.wanted_landing: Optional[HexCoord] = None

    @property
    def active(self) -> bool:
        return self.state is FlightState.FLYING

    def tick(self) -> FlightState:
        if self.state is not FlightState.FLYING:
            return self.state
        position = self.projectile.position

        hit = find_collision(self.grid, position, self.rules.collision_distance)
        if hit is not None:
            self.wanted_landing = hit
            self.state = FlightState.LANDED
            if self.logger:
                self.logger.debug(
                    "Projectile at (%.2f, %.2f) touched %r after %d ticks",
                    position.x,
                    position.y,
                    hit,
                    self.ticks,
                )
            return self.state

        if not self.rules.in_play_area(position.x, position.y):
            self.state = FlightState.OUT_OF_BOUNDS
            if self.logger:
                self.logger.debug(
                    "Projectile left the play area at (%.2f, %.2f)", position.x, position.y
                )
            return self.state

        self.projectile.position = self.projectile.origin + self.direction * self.time
        self.time += self.rules.flight_step
        self.ticks += 1
        return self.state

    def run(self, max_ticks: int = 10_000) -> FlightState:
        """Tick until the flight ends. Used by tests and headless play."""

        for _ in range(max_ticks):
            if self.tick() is not FlightState.FLYING:
                return self.state
        raise RuntimeError(f"Flight did not finish within {max_ticks} ticks")


__all__ = ["FlightState", "Projectile", "ProjectileSimulator", "find_collision"]
