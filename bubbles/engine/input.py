"""Input mapping and rebind support."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pygame

DEFAULT_BINDINGS = {
    "aim_left": ["K_LEFT", "K_A"],
    "aim_right": ["K_RIGHT", "K_D"],
    "fire": ["BUTTON_LEFT", "K_SPACE"],
    "toggle_overlay": ["K_F3"],
    "quit": ["K_ESCAPE"],
}

MOUSE_BUTTONS = {
    "BUTTON_LEFT": 0,
    "BUTTON_MIDDLE": 1,
    "BUTTON_RIGHT": 2,
}


@dataclass
class InputBindings:
    """Runtime structure representing current bindings."""

    actions: Dict[str, list[str]] = field(default_factory=lambda: DEFAULT_BINDINGS.copy())

    @classmethod
    def load(cls, path: Path) -> "InputBindings":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        actions = DEFAULT_BINDINGS.copy()
        actions.update({k: list(v) for k, v in data.get("bindings", {}).items()})
        return cls(actions=actions)

    def save(self, path: Path) -> None:
        path.write_text(json.dumps({"bindings": self.actions}, indent=2))


class InputMapper:
    """Tracks held actions and the last pointer position."""

    def __init__(self, bindings: Optional[InputBindings] = None) -> None:
        self.bindings = bindings or InputBindings()
        self.action_state: Dict[str, bool] = {action: False for action in self.bindings.actions}
        self.pointer: Optional[tuple[int, int]] = None
        self.pointer_moved = False

    def _set_bound(self, binding: str, pressed: bool) -> None:
        for action, keys in self.bindings.actions.items():
            if binding in keys:
                self.action_state[action] = pressed

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self.pointer = tuple(event.pos)
            self.pointer_moved = True
            return
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key_name = pygame.key.name(event.key).upper()
            self._set_bound(f"K_{key_name}", event.type == pygame.KEYDOWN)
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            for name, idx in MOUSE_BUTTONS.items():
                if idx == event.button - 1:
                    self._set_bound(name, event.type == pygame.MOUSEBUTTONDOWN)
                    break

    def action(self, name: str) -> bool:
        return self.action_state.get(name, False)

    def consume_action(self, name: str) -> bool:
        value = self.action(name)
        self.action_state[name] = False
        return value

    def aim_axis(self) -> int:
        """-1 while rotating right, +1 while rotating left, 0 otherwise."""

        return int(self.action("aim_left")) - int(self.action("aim_right"))


__all__ = ["InputMapper", "InputBindings", "DEFAULT_BINDINGS"]
