"""scenes/death_scene.py — Shown after the bee is hit.

Enter / click retries the same level from its spawn point; Esc goes
back to level select.  The loaded ``GameWorld`` is reused because the
world model is read-only.
"""

from __future__ import annotations
import pygame
from core.scene import Scene, AppState
from core.app import App
from core.level import GameWorld


class DeathScene(Scene):
    state = AppState.DEATH

    def __init__(self, game_world: GameWorld, survived: float = 0.0):
        self.game_world = game_world
        self.survived = survived

    def on_enter(self, app: App):
        print(f"[GAME] Bee stung after {self.survived:.1f}s")

    def handle_event(self, event: pygame.event.Event, app: App):
        retry = (
            (event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE))
            or (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1)
        )
        if retry:
            from scenes.game_scene import GameScene
            app.replace_scene(GameScene(self.game_world))
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            from scenes.menu_scene import LevelSelectScene
            app.replace_scene(LevelSelectScene())

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((40, 10, 14))
        sh = surface.get_height()
        app.draw_text_centered(surface, "STUNG!", sh // 3, (255, 90, 90), app.font_lg)
        app.draw_text_centered(surface, f"You lasted {self.survived:.1f} seconds",
                               sh // 3 + 50, (220, 200, 200))
        app.draw_text_centered(surface, "Click or Enter = retry   Esc = level select",
                               sh - 40, (150, 110, 110), app.font_sm)
