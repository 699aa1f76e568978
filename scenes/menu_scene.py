"""scenes/menu_scene.py — Title menu and level select.

MenuScene:        Enter / click to pick a level, Esc to quit.
LevelSelectScene: Up/Down + Enter, number keys or click a level.
                  Esc returns to the title menu.

A level that fails to load is reported on the console and in the
scene; the player stays on the level list.
"""

from __future__ import annotations
import pygame
from core.scene import Scene, AppState
from core.app import App
from core.level import GameWorld, LEVELS, MapError

_ROW_H = 44
_LIST_TOP = 150


class MenuScene(Scene):
    state = AppState.MENU

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.running = False
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                app.replace_scene(LevelSelectScene())
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            app.replace_scene(LevelSelectScene())

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 20, 24))
        sh = surface.get_height()
        app.draw_text_centered(surface, "BEELINE", sh // 3, (250, 210, 60), app.font_lg)
        app.draw_text_centered(surface, "Steer the bee with the mouse. Don't get stung.",
                               sh // 3 + 50, (180, 180, 180))
        app.draw_text_centered(surface, "Click or press Enter to play   Esc = quit",
                               sh - 40, (100, 120, 110), app.font_sm)


class LevelSelectScene(Scene):
    state = AppState.LEVEL_SELECT

    def __init__(self):
        self.selected = 0
        self.error = ""

    def _row_at(self, pos: tuple[int, int], surface_w: int) -> int | None:
        x, y = pos
        if abs(x - surface_w // 2) > 220:
            return None
        idx = (y - _LIST_TOP + 4) // _ROW_H
        return idx if 0 <= idx < len(LEVELS) else None

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.replace_scene(MenuScene())
            elif event.key in (pygame.K_UP, pygame.K_w):
                self.selected = (self.selected - 1) % len(LEVELS)
            elif event.key in (pygame.K_DOWN, pygame.K_s):
                self.selected = (self.selected + 1) % len(LEVELS)
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self._launch(app, self.selected)
            elif pygame.K_1 <= event.key <= pygame.K_9:
                idx = event.key - pygame.K_1
                if idx < len(LEVELS):
                    self._launch(app, idx)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            idx = self._row_at(event.pos, app.size[0])
            if idx is not None:
                self._launch(app, idx)
        elif event.type == pygame.MOUSEMOTION:
            idx = self._row_at(event.pos, app.size[0])
            if idx is not None:
                self.selected = idx

    def _launch(self, app: App, level: int):
        try:
            game_world = GameWorld.load_level(level)
        except MapError as exc:
            self.error = str(exc)
            print(f"[LEVEL] {exc}")
            return
        from scenes.game_scene import GameScene
        app.replace_scene(GameScene(game_world))

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 20, 24))
        sw, sh = surface.get_size()
        app.draw_text_centered(surface, "Level Select", 60, (255, 255, 255), app.font_lg)

        y = _LIST_TOP
        for i, (name, _) in enumerate(LEVELS):
            is_sel = i == self.selected
            if is_sel:
                bg = pygame.Surface((440, _ROW_H - 6), pygame.SRCALPHA)
                bg.fill((166, 204, 112, 120))
                surface.blit(bg, (sw // 2 - 220, y - 4))
            color = (255, 255, 255) if is_sel else (170, 170, 170)
            marker = ">" if is_sel else " "
            app.draw_text(surface, f"{marker} [{i + 1}] {name}", sw // 2 - 200, y + 6, color)
            y += _ROW_H

        if self.error:
            app.draw_text_centered(surface, self.error, y + 20, (255, 90, 90), app.font_sm)
        app.draw_text_centered(surface, "Up/Down = navigate   Enter/click = play   Esc = back",
                               sh - 30, (80, 100, 90), app.font_sm)
