"""Round orchestration: firing, flight resolution, scoring and the win check."""
from __future__ import annotations

import random
from typing import Callable, Optional

from bubbles.engine.logger import ChannelLogger, GameLogger
from bubbles.engine.telemetry import ShotTelemetry
from bubbles.world.aim import AimController
from bubbles.world.explosion import ExplosionEngine, ExplosionResult
from bubbles.world.grid import PALETTE, BubbleColor, HexCoord, HexGrid
from bubbles.world.landing import LandingError, resolve_landing
from bubbles.world.projectile import FlightState, Projectile, ProjectileSimulator
from bubbles.world.rules import DEFAULT_RULES, GameRules

ScoreListener = Callable[[int, int], None]


class RoundController:
    """Owns the board and runs one shot at a time.

    A shot is started with :meth:`fire` and advanced with :meth:`tick` (one
    flight step per fixed update). While a flight is active further shots are
    refused. After every shot a new round begins with a fresh projectile and the
    board is checked for the win condition.
    """

    def __init__(
        self,
        rules: GameRules = DEFAULT_RULES,
        grid: Optional[HexGrid] = None,
        palette_sample: Optional[Callable[[], BubbleColor]] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[GameLogger] = None,
        on_redraw: Optional[Callable[[], None]] = None,
        on_score: Optional[ScoreListener] = None,
    ) -> None:
        self.rules = rules
        self.rng = rng or random.Random()
        self.palette_sample = palette_sample or self._random_color
        if grid is None:
            grid = HexGrid.create(rules.width, rules.height, self.palette_sample, rules.seeded_rows)
        self.grid = grid
        self._flight_log = self._channel(logger, "flight")
        self._landing_log = self._channel(logger, "landing")
        self._round_log = self._channel(logger, "round")
        self.aim = AimController(step=rules.aim_step, logger=self._channel(logger, "input"))
        self.explosions = ExplosionEngine(
            self.grid,
            award=rules.award,
            min_cluster=rules.min_cluster,
            logger=self._channel(logger, "explosion"),
        )
        self.telemetry = ShotTelemetry()
        self.on_redraw = on_redraw
        self.on_score = on_score
        self.score = 0
        self.won = False
        self.round_number = 1
        self.projectile = Projectile(color=self.palette_sample())
        self.flight: Optional[ProjectileSimulator] = None
        self.last_landing: Optional[HexCoord] = None
        self.last_explosion: Optional[ExplosionResult] = None

    @staticmethod
    def _channel(logger: Optional[GameLogger], name: str) -> Optional[ChannelLogger]:
        return logger.channel(name) if logger else None

    def _random_color(self) -> BubbleColor:
        return self.rng.choice(PALETTE)

    @property
    def busy(self) -> bool:
        return self.flight is not None

    def fire(self) -> bool:
        """Launch the loaded projectile along the current aim. False if refused."""

        if self.won or self.busy:
            return False
        self.flight = ProjectileSimulator(
            self.grid,
            self.projectile,
            self.aim.direction(),
            rules=self.rules,
            logger=self._flight_log,
        )
        self.telemetry.record_fired()
        if self._round_log:
            self._round_log.debug(
                "Round %d: fired %s towards (%.3f, %.3f)",
                self.round_number,
                self.projectile.color.name.lower(),
                self.flight.direction.x,
                self.flight.direction.y,
            )
        return True

    def tick(self) -> Optional[FlightState]:
        """Advance the active flight one step and settle it if it ended."""

        if self.flight is None:
            return None
        state = self.flight.tick()
        self.telemetry.record_tick()
        if state is FlightState.LANDED:
            self._land(self.flight.wanted_landing)
        elif state is FlightState.OUT_OF_BOUNDS:
            self._miss()
        return state

    def update(self, dt: float) -> None:
        self.tick()
        self.telemetry.advance_time(dt, self._round_log)

    def play_shot(self, max_ticks: int = 10_000) -> FlightState:
        """Fire and tick until the shot resolves."""

        if not self.fire():
            raise RuntimeError("Cannot fire: a shot is in flight or the game is over")
        for _ in range(max_ticks):
            state = self.tick()
            if state is not FlightState.FLYING:
                return state
        raise RuntimeError(f"Shot did not resolve within {max_ticks} ticks")

    def _land(self, wanted: HexCoord) -> None:
        try:
            landing = resolve_landing(
                self.grid, wanted, self.projectile.color, logger=self._landing_log
            )
        except LandingError as exc:
            if self._landing_log:
                self._landing_log.warning("Shot discarded: %s", exc)
            self.telemetry.record_rejected()
            self.new_round()
            return
        self.last_landing = landing
        result = self.explosions.explode(landing)
        self.last_explosion = result
        if result.score:
            self._adjust_score(result.score)
        self.telemetry.record_landed(result.count)
        self.new_round()

    def _miss(self) -> None:
        self.telemetry.record_out_of_bounds()
        self._adjust_score(-self.rules.penalty)
        if self._round_log:
            self._round_log.info("Round %d: shot left the play area", self.round_number)
        self.new_round()

    def _adjust_score(self, delta: int) -> None:
        self.score += delta
        if self.on_score:
            self.on_score(delta, self.score)

    def new_round(self) -> None:
        self.flight = None
        self.projectile = Projectile(color=self.palette_sample())
        self.round_number += 1
        if self.on_redraw:
            self.on_redraw()
        if self.grid.is_empty():
            self.won = True
            if self._round_log:
                self._round_log.info("Board cleared with score %d", self.score)


__all__ = ["RoundController", "ScoreListener"]
