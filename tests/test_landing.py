import pytest

from bubbles.world.grid import BubbleColor, HexCoord, HexGrid
from bubbles.world.landing import LandingError, landing_candidates, resolve_landing


def c(x: float, y: float) -> HexCoord:
    return HexCoord.from_xy(x, y)


def _grid(width: int = 4, height: int = 3) -> HexGrid:
    return HexGrid.create(width, height, lambda: BubbleColor.BLUE, seeded_rows=0)


def test_nearest_empty_neighbor_wins() -> None:
    grid = _grid()
    grid[c(0, 1)] = BubbleColor.WHITE
    landing = resolve_landing(grid, c(0, 1), BubbleColor.BLUE)
    # Horizontal neighbours are one unit away, diagonal ones slightly more.
    assert landing == c(-1, 1)
    assert grid[landing] is BubbleColor.BLUE


def test_occupied_neighbors_are_skipped() -> None:
    grid = _grid()
    grid[c(0, 1)] = BubbleColor.WHITE
    grid[c(-1, 1)] = BubbleColor.WHITE
    assert resolve_landing(grid, c(0, 1), BubbleColor.ORANGE) == c(1, 1)

    assert resolve_landing(grid, c(0, 1), BubbleColor.ORANGE) == c(-0.5, 2)


def test_candidates_never_include_colored_cells() -> None:
    grid = _grid()
    grid[c(-0.5, 2)] = BubbleColor.WHITE
    grid[c(0, 3)] = BubbleColor.ORANGE
    candidates = landing_candidates(grid, c(-0.5, 2))
    assert c(0, 3) not in candidates
    assert all(grid[coord] is None for coord in candidates)
    assert candidates[:2] == [c(-1.5, 2), c(0.5, 2)]


def test_full_neighborhood_raises_without_mutation() -> None:
    grid = HexGrid.create(2, 1, lambda: BubbleColor.WHITE, seeded_rows=1)
    before = grid.snapshot()
    with pytest.raises(LandingError) as excinfo:
        resolve_landing(grid, c(0, 1), BubbleColor.BLUE)
    assert excinfo.value.impact == c(0, 1)
    assert grid.snapshot() == before
