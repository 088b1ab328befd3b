import pytest

from bubbles.math.vector import Vector2D
from bubbles.world.grid import BubbleColor, HexCoord, HexGrid
from bubbles.world.projectile import FlightState, Projectile, ProjectileSimulator, find_collision
from bubbles.world.rules import GameRules


def c(x: float, y: float) -> HexCoord:
    return HexCoord.from_xy(x, y)


def _setup(width: int = 4, height: int = 3) -> tuple[HexGrid, GameRules]:
    rules = GameRules(width=width, height=height, seeded_rows=0)
    grid = HexGrid.create(width, height, lambda: BubbleColor.BLUE, seeded_rows=0)
    return grid, rules


def _simulator(grid: HexGrid, rules: GameRules, direction: Vector2D) -> ProjectileSimulator:
    return ProjectileSimulator(grid, Projectile(BubbleColor.BLUE), direction, rules=rules)


def test_shot_through_empty_board_leaves_play_area() -> None:
    grid, rules = _setup(width=2, height=2)
    sim = _simulator(grid, rules, Vector2D(0.0, 1.0))
    assert sim.run() is FlightState.OUT_OF_BOUNDS
    assert sim.ticks == 4
    assert sim.projectile.position.y == pytest.approx(2.25)
    assert sim.wanted_landing is None


def test_bounds_are_checked_before_moving() -> None:
    grid, rules = _setup(width=2, height=2)
    projectile = Projectile(BubbleColor.BLUE, position=Vector2D(0.0, -0.5))
    sim = ProjectileSimulator(grid, projectile, Vector2D(0.0, 1.0), rules=rules)
    assert sim.tick() is FlightState.OUT_OF_BOUNDS
    assert projectile.position == Vector2D(0.0, -0.5)


def test_collision_is_detected_at_the_muzzle() -> None:
    grid, rules = _setup()
    grid[c(0, 1)] = BubbleColor.WHITE
    sim = _simulator(grid, rules, Vector2D(0.0, 1.0))
    assert sim.tick() is FlightState.LANDED
    assert sim.wanted_landing == c(0, 1)
    assert sim.ticks == 0


def test_collision_after_travel() -> None:
    grid, rules = _setup()
    grid[c(0, 3)] = BubbleColor.WHITE
    sim = _simulator(grid, rules, Vector2D(0.0, 1.0))
    assert sim.run() is FlightState.LANDED
    assert sim.wanted_landing == c(0, 3)
    assert sim.ticks == 4
    assert sim.projectile.position.y == pytest.approx(2.25)


def test_direction_is_normalized_when_fired() -> None:
    grid, rules = _setup()
    sim = _simulator(grid, rules, Vector2D(0.0, 7.0))
    sim.tick()
    sim.tick()
    assert sim.projectile.position == Vector2D(0.0, 0.75)


def test_finished_flight_does_not_move() -> None:
    grid, rules = _setup(width=2, height=2)
    sim = _simulator(grid, rules, Vector2D(0.0, 1.0))
    sim.run()
    position = sim.projectile.position
    assert sim.tick() is FlightState.OUT_OF_BOUNDS
    assert sim.projectile.position == position
    assert not sim.active


def test_collision_tie_break_uses_reading_order() -> None:
    grid, _ = _setup()
    grid[c(0, 1)] = BubbleColor.WHITE
    grid[c(1, 1)] = BubbleColor.WHITE
    position = Vector2D(0.5, 1.0)
    assert find_collision(grid, position, 1.12) == c(0, 1)

    grid[c(0.5, 2)] = BubbleColor.ORANGE
    assert find_collision(grid, position, 1.12) == c(0.5, 2)


def test_threshold_is_strict() -> None:
    grid, _ = _setup()
    grid[c(0, 1)] = BubbleColor.WHITE
    assert find_collision(grid, Vector2D(0.0, 0.0), 1.0) is None
    assert find_collision(grid, Vector2D(0.0, 0.0), 1.0001) == c(0, 1)


def test_sideways_shots_leave_through_the_side_bands() -> None:
    for sign in (1.0, -1.0):
        grid, rules = _setup(width=2, height=2)
        sim = _simulator(grid, rules, Vector2D(sign, 0.0))
        assert sim.run() is FlightState.OUT_OF_BOUNDS
        assert sim.ticks == 4
        assert sim.projectile.position.x == pytest.approx(sign * 2.25)


def test_play_area_edges_are_inclusive() -> None:
    rules = GameRules(width=2, height=2, seeded_rows=0)
    assert rules.in_play_area(2.0, 0.0)
    assert rules.in_play_area(-2.0, 0.0)
    assert rules.in_play_area(0.0, 2.0)
    assert not rules.in_play_area(2.0001, 0.0)
    assert not rules.in_play_area(-2.0001, 0.0)
    assert not rules.in_play_area(0.0, 2.0001)
    assert not rules.in_play_area(0.0, -0.0001)
