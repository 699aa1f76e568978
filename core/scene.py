"""
core/scene.py — Scene interface

A Scene is one screen of the game and stands for one ``AppState``.
``App`` keeps a stack of them and only drives the top one::

    class PauseScene(Scene):
        state = AppState.GAME

        def handle_event(self, event, app):
            if event.type == pygame.KEYDOWN:
                app.replace_scene(...)

        def update(self, dt, app):      # dt in seconds
            ...

        def draw(self, surface, app):   # virtual surface, Y down
            ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class AppState:
    """Top-level game states, one per scene class."""
    MENU = "menu"
    LEVEL_SELECT = "level_select"
    GAME = "game"
    DEATH = "death"


class Scene:
    state: str = ""

    def on_enter(self, app: App):
        """Called when this scene becomes the top of the stack."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is replaced or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
