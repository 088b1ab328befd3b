"""Entry point for the bubble shooter."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pygame

from bubbles.engine.input import InputBindings, InputMapper
from bubbles.engine.logger import init_logger
from bubbles.engine.loop import FixedTimestepLoop
from bubbles.engine.scene import SceneManager
from bubbles.render.transform import BoardTransform
from bubbles.ui.board_scene import BoardScene
from bubbles.ui.title_scene import TitleScene
from bubbles.world.rules import DEFAULT_RULES, TICK_DELAY


SETTINGS_PATH = Path("settings.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "simHz": 1.0 / TICK_DELAY,
    "maxFps": 60,
    "seed": None,
}


def load_settings(path: Path = SETTINGS_PATH) -> Dict[str, Any]:
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        return settings
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return settings
    if isinstance(data, dict):
        settings.update({key: data[key] for key in DEFAULT_SETTINGS if key in data})
    return settings


def main() -> None:
    settings = load_settings()
    pygame.init()

    transform = BoardTransform(DEFAULT_RULES.width, DEFAULT_RULES.height)
    screen = pygame.display.set_mode(transform.canvas_size())
    pygame.display.set_caption("Bubble Shooter")
    clock = pygame.time.Clock()

    logger = init_logger(SETTINGS_PATH)
    input_mapper = InputMapper(InputBindings.load(SETTINGS_PATH))

    manager = SceneManager()
    manager.register("title", TitleScene)
    manager.register("board", BoardScene)
    manager.set_context(
        input=input_mapper,
        logger=logger,
        rules=DEFAULT_RULES,
        transform=transform,
        seed=settings.get("seed"),
    )
    manager.activate("title")

    def process_events() -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
                return
            manager.handle_event(event)
        if manager.quit_requested:
            loop.stop()

    def update(dt: float) -> None:
        manager.update(dt)
        if manager.quit_requested:
            loop.stop()

    def render(alpha: float) -> None:
        manager.render(screen, alpha)
        pygame.display.flip()
        clock.tick(settings.get("maxFps", 60))

    loop = FixedTimestepLoop(
        update,
        render,
        process_events,
        fixed_hz=settings.get("simHz", DEFAULT_SETTINGS["simHz"]),
    )

    try:
        loop.run()
    finally:
        pygame.quit()
        print("\nUsage: move the mouse or hold Left/Right to aim, click or Space to fire, F3 stats, R to replay after a win, Esc to quit.")


if __name__ == "__main__":
    main()
