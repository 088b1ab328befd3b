"""Score line and debug overlay."""
from __future__ import annotations

import pygame

from bubbles.engine.telemetry import ShotTelemetrySnapshot

TEXT_COLOR = (235, 235, 235)
WIN_COLOR = (255, 232, 150)
OVERLAY_COLOR = (150, 180, 200)


def score_text(score: int, won: bool) -> str:
    if won:
        return "YOU WON!"
    return f"SCORE: {score}"


def overlay_lines(stats: ShotTelemetrySnapshot) -> list[str]:
    return [
        f"shots {stats.fired}  landed {stats.landed}  out {stats.out_of_bounds}",
        f"removed {stats.removed}  best {stats.largest_explosion}  rejected {stats.rejected}",
        f"accuracy {stats.accuracy * 100:.0f}%  ticks {stats.flight_ticks}",
    ]


class HUD:
    def __init__(self) -> None:
        self.font = pygame.font.SysFont("consolas", 18)
        self.large_font = pygame.font.SysFont("consolas", 32)
        self.overlay_visible = False

    def toggle_overlay(self) -> None:
        self.overlay_visible = not self.overlay_visible

    def draw(
        self,
        surface: pygame.Surface,
        score: int,
        won: bool,
        stats: ShotTelemetrySnapshot | None = None,
    ) -> None:
        if won:
            text = self.large_font.render(score_text(score, won), True, WIN_COLOR)
            surface.blit(
                text,
                (
                    surface.get_width() / 2 - text.get_width() / 2,
                    surface.get_height() / 2 - text.get_height() / 2,
                ),
            )
        else:
            text = self.font.render(score_text(score, won), True, TEXT_COLOR)
            surface.blit(text, (10, surface.get_height() - text.get_height() - 10))
        if self.overlay_visible and stats is not None:
            y = 10
            for line in overlay_lines(stats):
                rendered = self.font.render(line, True, OVERLAY_COLOR)
                surface.blit(rendered, (10, y))
                y += rendered.get_height() + 2


__all__ = ["HUD", "score_text", "overlay_lines"]
