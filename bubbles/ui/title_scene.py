"""Title screen scene."""
from __future__ import annotations

import pygame

from bubbles.engine.scene import Scene
from bubbles.render.renderer import BACKGROUND


class TitleScene(Scene):
    def __init__(self, manager) -> None:
        super().__init__(manager)
        self.font = None

    def on_enter(self, **kwargs) -> None:
        self.font = pygame.font.SysFont("consolas", 32)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                self.manager.request_quit()
            else:
                self.manager.activate("board")
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.manager.activate("board")

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        surface.fill(BACKGROUND)
        title = self.font.render("BUBBLE SHOOTER", True, (54, 193, 212))
        prompt = self.font.render("Press any key to start", True, (180, 200, 220))
        surface.blit(title, (surface.get_width() / 2 - title.get_width() / 2, surface.get_height() / 2 - 100))
        surface.blit(prompt, (surface.get_width() / 2 - prompt.get_width() / 2, surface.get_height() / 2))


__all__ = ["TitleScene"]
