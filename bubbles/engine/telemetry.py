"""Per-game shot statistics for the debug overlay."""
from __future__ import annotations

from dataclasses import dataclass

from bubbles.engine.logger import ChannelLogger


@dataclass
class ShotTelemetrySnapshot:
    fired: int
    landed: int
    out_of_bounds: int
    rejected: int
    removed: int
    largest_explosion: int
    flight_ticks: int

    @property
    def accuracy(self) -> float:
        if self.fired <= 0:
            return 0.0
        return self.landed / self.fired


@dataclass
class ShotTelemetry:
    """Counts what happened to every shot of the current game."""

    fired: int = 0
    landed: int = 0
    out_of_bounds: int = 0
    rejected: int = 0
    removed: int = 0
    largest_explosion: int = 0
    flight_ticks: int = 0
    _log_accumulator: float = 0.0

    def record_fired(self) -> None:
        self.fired += 1

    def record_landed(self, removed: int) -> None:
        self.landed += 1
        self.removed += removed
        self.largest_explosion = max(self.largest_explosion, removed)

    def record_out_of_bounds(self) -> None:
        self.out_of_bounds += 1

    def record_rejected(self) -> None:
        self.rejected += 1

    def record_tick(self) -> None:
        self.flight_ticks += 1

    def advance_time(self, dt: float, logger: ChannelLogger | None = None) -> None:
        self._log_accumulator += dt
        if self._log_accumulator >= 5.0:
            self._log_accumulator = 0.0
            if logger and logger.enabled:
                logger.debug(
                    "Shots: fired=%d landed=%d out=%d rejected=%d removed=%d",
                    self.fired,
                    self.landed,
                    self.out_of_bounds,
                    self.rejected,
                    self.removed,
                )

    def snapshot(self) -> ShotTelemetrySnapshot:
        return ShotTelemetrySnapshot(
            fired=self.fired,
            landed=self.landed,
            out_of_bounds=self.out_of_bounds,
            rejected=self.rejected,
            removed=self.removed,
            largest_explosion=self.largest_explosion,
            flight_ticks=self.flight_ticks,
        )


__all__ = ["ShotTelemetry", "ShotTelemetrySnapshot"]
