"""Scene management utilities."""
from __future__ import annotations

from typing import Dict, Optional, Type

import pygame


class Scene:
    """Base scene interface."""

    def __init__(self, manager: "SceneManager") -> None:
        self.manager = manager

    def on_enter(self, **kwargs) -> None:  # pragma: no cover - hooks
        pass

    def on_exit(self) -> None:  # pragma: no cover - hooks
        pass

    def handle_event(self, event: pygame.event.Event) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        pass


class SceneManager:
    """Registers scenes, swaps the active one and carries shared context."""

    def __init__(self) -> None:
        self._scenes: Dict[str, Type[Scene]] = {}
        self._active: Optional[Scene] = None
        self._active_name: Optional[str] = None
        self._last_kwargs: Dict[str, object] = {}
        self.context: Dict[str, object] = {}
        self.quit_requested = False

    def register(self, name: str, scene_cls: Type[Scene]) -> None:
        self._scenes[name] = scene_cls

    def activate(self, name: str, **kwargs) -> None:
        if name not in self._scenes:
            raise KeyError(f"Scene '{name}' is not registered")
        if self._active:
            self._active.on_exit()
        self._active = self._scenes[name](self)
        self._active_name = name
        self._last_kwargs = dict(kwargs)
        self._active.on_enter(**{**self.context, **kwargs})

    def restart(self) -> None:
        """Re-enter the active scene with a fresh instance."""

        if self._active_name is None:
            raise KeyError("No active scene to restart")
        self.activate(self._active_name, **self._last_kwargs)

    def request_quit(self) -> None:
        self.quit_requested = True

    def set_context(self, **kwargs) -> None:
        self.context.update(kwargs)

    def active(self) -> Optional[Scene]:
        return self._active

    @property
    def active_name(self) -> Optional[str]:
        return self._active_name

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._active:
            self._active.handle_event(event)

    def update(self, dt: float) -> None:
        if self._active:
            self._active.update(dt)

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        if self._active:
            self._active.render(surface, alpha)


__all__ = ["Scene", "SceneManager"]
