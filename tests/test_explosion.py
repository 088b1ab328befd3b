from bubbles.world.explosion import ExplosionEngine, connected_component
from bubbles.world.grid import BubbleColor, HexCoord, HexGrid


def c(x: float, y: float) -> HexCoord:
    return HexCoord.from_xy(x, y)


def _grid(width: int = 4, height: int = 3) -> HexGrid:
    return HexGrid.create(width, height, lambda: BubbleColor.BLUE, seeded_rows=0)


def _paint(grid: HexGrid, color: BubbleColor, *coords: HexCoord) -> None:
    for coord in coords:
        grid[coord] = color


def test_lone_bubble_stays() -> None:
    grid = _grid()
    _paint(grid, BubbleColor.BLUE, c(0, 1))
    result = ExplosionEngine(grid).explode(c(0, 1))
    assert result.count == 0
    assert result.score == 0
    assert grid[c(0, 1)] is BubbleColor.BLUE


def test_pair_is_removed_with_award_per_cell() -> None:
    grid = _grid()
    _paint(grid, BubbleColor.BLUE, c(0, 1), c(-1, 1))
    result = ExplosionEngine(grid, award=10).explode(c(-1, 1))
    assert set(result.removed) == {c(0, 1), c(-1, 1)}
    assert result.score == 20
    assert grid.is_empty()


def test_only_matching_component_is_cleared() -> None:
    grid = _grid()
    blue = (c(-2, 1), c(-1, 1), c(-1.5, 2), c(-1, 3))
    _paint(grid, BubbleColor.BLUE, *blue)
    _paint(grid, BubbleColor.WHITE, c(0, 1), c(-0.5, 2))
    # Same colour but cut off from the landing cell by the white bubbles.
    _paint(grid, BubbleColor.BLUE, c(1, 1), c(0.5, 2))

    result = ExplosionEngine(grid, award=10).explode(c(-2, 1))

    assert set(result.removed) == set(blue)
    assert result.score == 40
    assert grid[c(0, 1)] is BubbleColor.WHITE
    assert grid[c(-0.5, 2)] is BubbleColor.WHITE
    assert grid[c(1, 1)] is BubbleColor.BLUE
    assert grid[c(0.5, 2)] is BubbleColor.BLUE


def test_no_same_colored_neighbors_remain_after_explosion() -> None:
    grid = HexGrid.create(6, 5, lambda: BubbleColor.ORANGE, seeded_rows=5)
    grid[c(0, 3)] = BubbleColor.WHITE
    origin = c(-3, 5)
    component = set(connected_component(grid, origin))
    ExplosionEngine(grid).explode(origin)
    assert all(grid[coord] is None for coord in component)
    assert grid.count(BubbleColor.WHITE) == 1
    for coord in component:
        assert grid.filter_by_state(grid.neighbors(coord), BubbleColor.ORANGE) == set()


def test_minimum_cluster_size_is_respected() -> None:
    grid = _grid()
    _paint(grid, BubbleColor.BLUE, c(0, 1), c(-1, 1))
    result = ExplosionEngine(grid, min_cluster=3).explode(c(0, 1))
    assert result.count == 0
    assert grid.count(BubbleColor.BLUE) == 2


def test_traversal_order_is_deterministic() -> None:
    grid = _grid()
    _paint(grid, BubbleColor.BLUE, c(0, 1), c(1, 1), c(0.5, 2), c(-1, 1))
    assert connected_component(grid, c(-1, 1)) == [c(-1, 1), c(0, 1), c(0.5, 2), c(1, 1)]


def test_empty_origin_has_no_component() -> None:
    grid = _grid()
    assert connected_component(grid, c(0, 1)) == []
