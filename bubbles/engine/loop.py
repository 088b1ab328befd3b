"""Fixed timestep game loop."""
from __future__ import annotations

import time
from typing import Callable

from bubbles.world.rules import TICK_DELAY


class FixedTimestepLoop:
    """Runs a deterministic fixed update loop with variable rendering.

    The default rate gives one projectile flight tick every ``TICK_DELAY``
    seconds; rendering runs between updates so the board stays responsive.
    """

    def __init__(
        self,
        update: Callable[[float], None],
        render: Callable[[float], None],
        process_events: Callable[[], None],
        fixed_hz: float = 1.0 / TICK_DELAY,
        max_frame_time: float = 0.25,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if fixed_hz <= 0:
            raise ValueError("fixed_hz must be positive")
        self.update = update
        self.render = render
        self.process_events = process_events
        self.fixed_dt = 1.0 / fixed_hz
        self.max_frame_time = max_frame_time
        self.clock = clock
        self._running = False
        self._accumulator = 0.0
        self._last_time = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def step(self) -> int:
        """Run one frame; return how many fixed updates it performed."""

        now = self.clock()
        frame_time = min(now - self._last_time, self.max_frame_time)
        self._last_time = now
        self._accumulator += frame_time
        self.process_events()
        updates = 0
        while self._running and self._accumulator >= self.fixed_dt:
            self.update(self.fixed_dt)
            self._accumulator -= self.fixed_dt
            updates += 1
        alpha = self._accumulator / self.fixed_dt
        self.render(alpha)
        return updates

    def run(self) -> None:
        self._running = True
        self._accumulator = 0.0
        self._last_time = self.clock()
        while self._running:
            self.step()


__all__ = ["FixedTimestepLoop"]
