"""The playable board."""
from __future__ import annotations

import random

import pygame

from bubbles.engine.input import InputMapper
from bubbles.engine.logger import GameLogger
from bubbles.engine.scene import Scene
from bubbles.math.vector import Vector2D
from bubbles.render.hud import HUD
from bubbles.render.renderer import BoardRenderer
from bubbles.render.transform import BoardTransform
from bubbles.world.aim import Direction
from bubbles.world.round import RoundController
from bubbles.world.rules import DEFAULT_RULES, GameRules


class BoardScene(Scene):
    def __init__(self, manager) -> None:
        super().__init__(manager)
        self.input: InputMapper | None = None
        self.logger: GameLogger | None = None
        self.rules: GameRules = DEFAULT_RULES
        self.transform: BoardTransform | None = None
        self.game: RoundController | None = None
        self.renderer: BoardRenderer | None = None
        self.hud: HUD | None = None

    def on_enter(self, **kwargs) -> None:
        self.input = kwargs["input"]
        self.logger = kwargs.get("logger")
        self.rules = kwargs.get("rules", DEFAULT_RULES)
        self.transform = kwargs.get("transform") or BoardTransform(self.rules.width, self.rules.height)
        self.renderer = BoardRenderer(self.transform)
        self.hud = HUD()
        seed = kwargs.get("seed")
        self.game = RoundController(
            self.rules,
            rng=random.Random(seed),
            logger=self.logger,
            on_redraw=self.renderer.invalidate,
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        self.input.handle_event(event)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r and self.game.won:
            self.manager.restart()

    def aim_at_pointer(self, pointer: tuple[int, int]) -> None:
        target = self.transform.canvas_to_math(Vector2D(float(pointer[0]), float(pointer[1])))
        self.game.aim.point_at(target)

    def update(self, dt: float) -> None:
        if self.input.consume_action("quit"):
            self.manager.request_quit()
            return
        if self.input.consume_action("toggle_overlay"):
            self.hud.toggle_overlay()
        if self.input.pointer_moved and self.input.pointer is not None:
            self.aim_at_pointer(self.input.pointer)
            self.input.pointer_moved = False
        axis = self.input.aim_axis()
        if axis > 0:
            self.game.aim.rotate(Direction.LEFT)
        elif axis < 0:
            self.game.aim.rotate(Direction.RIGHT)
        if self.input.consume_action("fire"):
            self.game.fire()
        self.game.update(dt)

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        self.renderer.draw(surface, self.game)
        self.hud.draw(surface, self.game.score, self.game.won, self.game.telemetry.snapshot())


__all__ = ["BoardScene"]
