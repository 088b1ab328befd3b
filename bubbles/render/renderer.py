"""Raster drawing of the board, gun and projectile."""
from __future__ import annotations

from typing import Optional

import pygame
from pygame.math import Vector2

from bubbles.math.vector import ZERO, Vector2D
from bubbles.render.transform import GUN_LENGTH, BoardTransform
from bubbles.world.grid import BubbleColor, HexGrid
from bubbles.world.round import RoundController

BACKGROUND = pygame.Color("#0f0f23")
GUN_COLOR = pygame.Color(BubbleColor.WHITE.value)


def bubble_color(color: BubbleColor) -> pygame.Color:
    return pygame.Color(color.value)


class BoardRenderer:
    """Draws a :class:`RoundController` onto the surface it is handed.

    The settled bubbles only change between rounds, so they are drawn onto a
    cached layer that is rebuilt after :meth:`invalidate`.
    """

    def __init__(self, transform: BoardTransform) -> None:
        self.transform = transform
        self._board_layer: Optional[pygame.Surface] = None
        self.layer_builds = 0

    def invalidate(self) -> None:
        self._board_layer = None

    def _to_screen(self, vector: Vector2D) -> Vector2:
        return Vector2(self.transform.math_to_canvas(vector).to_tuple())

    def draw(self, surface: pygame.Surface, game: RoundController) -> None:
        if self._board_layer is None or self._board_layer.get_size() != surface.get_size():
            self._board_layer = pygame.Surface(surface.get_size())
            self._board_layer.fill(BACKGROUND)
            self.draw_bubbles(self._board_layer, game.grid)
            self.layer_builds += 1
        surface.blit(self._board_layer, (0, 0))
        self.draw_gun(surface, game.aim.direction())
        self.draw_projectile(surface, game)

    def draw_bubbles(self, surface: pygame.Surface, grid: HexGrid) -> None:
        radius = self.transform.bubble_radius
        for coord, state in grid.cells():
            if state is None:
                continue
            # Cells are anchored at their top-left corner on the canvas.
            center = self._to_screen(coord.to_vector()) + Vector2(radius, radius)
            pygame.draw.circle(surface, bubble_color(state), center, radius)

    def draw_gun(self, surface: pygame.Surface, direction: Vector2D) -> None:
        muzzle = self._to_screen(ZERO) - Vector2(0, self.transform.bubble_radius)
        tip = self._to_screen(direction * GUN_LENGTH)
        pygame.draw.line(surface, GUN_COLOR, muzzle, tip)

    def draw_projectile(self, surface: pygame.Surface, game: RoundController) -> None:
        radius = self.transform.bubble_radius
        center = self._to_screen(game.projectile.position) - Vector2(0, radius)
        pygame.draw.circle(surface, bubble_color(game.projectile.color), center, radius)


__all__ = ["BoardRenderer", "BACKGROUND", "bubble_color"]
