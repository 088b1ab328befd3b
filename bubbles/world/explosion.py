"""Removal of same-coloured bubble clusters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from bubbles.engine.logger import ChannelLogger
from bubbles.world.grid import HexCoord, HexGrid, reading_order
from bubbles.world.rules import MIN_CLUSTER, SCORE_AWARD


@dataclass
class ExplosionResult:
    removed: list[HexCoord] = field(default_factory=list)
    score: int = 0

    @property
    def count(self) -> int:
        return len(self.removed)


def connected_component(grid: HexGrid, origin: HexCoord) -> list[HexCoord]:
    """Cells reachable from ``origin`` through neighbours of the same colour.

    Depth-first with an explicit stack; neighbours are pushed in reverse
    reading order so the traversal itself follows reading order.
    """

    color = grid[origin]
    if color is None:
        return []
    visited = {origin}
    order: list[HexCoord] = []
    stack = [origin]
    while stack:
        coord = stack.pop()
        order.append(coord)
        matches = grid.filter_by_state(grid.neighbors(coord), color) - visited
        for neighbor in reversed(reading_order(matches)):
            visited.add(neighbor)
            stack.append(neighbor)
    return order


class ExplosionEngine:
    """Clears the monochrome component around a freshly landed bubble."""

    def __init__(
        self,
        grid: HexGrid,
        award: int = SCORE_AWARD,
        min_cluster: int = MIN_CLUSTER,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.grid = grid
        self.award = award
        self.min_cluster = min_cluster
        self.logger = logger

    def explode(self, origin: HexCoord) -> ExplosionResult:
        component = connected_component(self.grid, origin)
        result = ExplosionResult()
        if len(component) < max(self.min_cluster, 1):
            return result
        for coord in component:
            self.grid[coord] = None
            result.removed.append(coord)
            result.score += self.award
        if self.logger:
            self.logger.info(
                "Explosion at %r removed %d bubbles (+%d)", origin, result.count, result.score
            )
        return result


__all__ = ["ExplosionEngine", "ExplosionResult", "connected_component"]
