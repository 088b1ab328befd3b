"""Landing cell resolution."""
from __future__ import annotations

from typing import Optional

from bubbles.engine.logger import ChannelLogger
from bubbles.world.grid import BubbleColor, HexCoord, HexGrid


class LandingError(RuntimeError):
    """No empty neighbour exists around the impact cell."""

    def __init__(self, impact: HexCoord) -> None:
        super().__init__(f"Grid is full around impact cell {impact!r}")
        self.impact = impact


def landing_candidates(grid: HexGrid, wanted: HexCoord) -> list[HexCoord]:
    """Empty neighbours of ``wanted`` ordered by distance, then reading order."""

    empty = grid.filter_by_state(grid.neighbors(wanted))
    return sorted(empty, key=lambda coord: (coord.distance_to(wanted), coord.reading_key()))


def resolve_landing(
    grid: HexGrid,
    wanted: HexCoord,
    color: BubbleColor,
    logger: Optional[ChannelLogger] = None,
) -> HexCoord:
    """Place ``color`` in the empty cell nearest ``wanted`` and return it.

    Raises :class:`LandingError` without touching the grid when every
    neighbour is occupied or outside the footprint.
    """

    candidates = landing_candidates(grid, wanted)
    if not candidates:
        raise LandingError(wanted)
    landing = candidates[0]
    grid[landing] = color
    if logger:
        logger.info("Landed %s at %r (impact %r)", color.name.lower(), landing, wanted)
    return landing


__all__ = ["LandingError", "landing_candidates", "resolve_landing"]
