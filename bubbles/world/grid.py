"""Hex-offset bubble lattice."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, Optional

from bubbles.math.vector import Vector2D


class BubbleColor(Enum):
    ORANGE = "#ff8800"
    WHITE = "#ffffff"
    BLUE = "#36c1d4"


PALETTE: tuple[BubbleColor, ...] = tuple(BubbleColor)

CellState = Optional[BubbleColor]

# Neighbour offsets in half-steps: up-left, up-right, left, right, down-left, down-right.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 2),
    (1, 2),
    (-2, 0),
    (2, 0),
    (-1, -2),
    (1, -2),
)


@dataclass(frozen=True)
class HexCoord:
    """Lattice coordinate stored as integer half-steps so equality is exact."""

    x2: int
    y2: int

    @classmethod
    def from_xy(cls, x: float, y: float) -> "HexCoord":
        x2 = round(x * 2)
        y2 = round(y * 2)
        if x2 != x * 2 or y2 != y * 2:
            raise ValueError(f"({x}, {y}) is not on the half-step lattice")
        return cls(x2, y2)

    @property
    def x(self) -> float:
        return self.x2 / 2

    @property
    def y(self) -> float:
        return self.y2 / 2

    def offset(self, dx2: int, dy2: int) -> "HexCoord":
        return HexCoord(self.x2 + dx2, self.y2 + dy2)

    def to_vector(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def distance_to(self, other: "HexCoord") -> float:
        return self.to_vector().distance_to(other.to_vector())

    def reading_key(self) -> tuple[int, int]:
        """Top row first, then left to right. Matches the seeding order."""

        return (-self.y2, self.x2)

    def __repr__(self) -> str:
        return f"HexCoord({self.x:g}, {self.y:g})"


def reading_order(coords: Iterable[HexCoord]) -> list[HexCoord]:
    return sorted(coords, key=HexCoord.reading_key)


class HexGrid:
    """Dense mapping from lattice coordinates to a colour or ``None``.

    The footprint is fixed when the grid is created; only cell states change
    afterwards.
    """

    def __init__(self, cells: Dict[HexCoord, CellState], width: int, height: int) -> None:
        self._cells: Dict[HexCoord, CellState] = dict(cells)
        self.width = width
        self.height = height

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        palette_sample: Callable[[], BubbleColor],
        seeded_rows: int = 5,
    ) -> "HexGrid":
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must have positive size, got {width}x{height}")
        cells: Dict[HexCoord, CellState] = {}
        for row in range(height):
            shift = 1 if row % 2 else 0
            for col in range(width):
                coord = HexCoord(2 * col + shift - width, 2 * (height - row))
                cells[coord] = palette_sample() if row < seeded_rows else None
        return cls(cells, width, height)

    def __getitem__(self, coord: HexCoord) -> CellState:
        return self._cells[coord]

    def __setitem__(self, coord: HexCoord, state: CellState) -> None:
        if coord not in self._cells:
            raise KeyError(f"{coord!r} is outside the grid footprint")
        self._cells[coord] = state

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(self._cells)

    def cells(self) -> Iterable[tuple[HexCoord, CellState]]:
        return self._cells.items()

    def footprint(self) -> frozenset[HexCoord]:
        return frozenset(self._cells)

    def occupied(self) -> list[HexCoord]:
        """Coloured cells in reading order."""

        return reading_order(coord for coord, state in self._cells.items() if state is not None)

    def count(self, color: CellState) -> int:
        return sum(1 for state in self._cells.values() if state == color)

    def is_empty(self) -> bool:
        return all(state is None for state in self._cells.values())

    def neighbors(self, coord: HexCoord) -> set[HexCoord]:
        candidates = (coord.offset(dx2, dy2) for dx2, dy2 in NEIGHBOR_OFFSETS)
        return {candidate for candidate in candidates if candidate in self._cells}

    def filter_by_state(
        self, coords: Iterable[HexCoord], wanted_color: CellState = None
    ) -> set[HexCoord]:
        """Keep empty cells, or only cells of ``wanted_color`` when one is given."""

        return {coord for coord in coords if self._cells.get(coord, False) == wanted_color}

    def snapshot(self) -> Dict[HexCoord, CellState]:
        return dict(self._cells)


__all__ = [
    "BubbleColor",
    "PALETTE",
    "CellState",
    "HexCoord",
    "HexGrid",
    "NEIGHBOR_OFFSETS",
    "reading_order",
]
