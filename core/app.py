"""
core/app.py — Pygame application shell

Owns the window, the frame loop and the scene stack.  Game code lives
in Scenes, which are pushed or replaced here.

    app = App(title="Beeline", width=960, height=640)
    app.push_scene(MenuScene())
    app.run()

Everything is drawn to a fixed virtual surface and scaled to the real
window, so scenes always see the configured width and height.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World

_MOUSE_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION)


class App:
    def __init__(self, title: str = "Beeline", width: int = 960, height: int = 640,
                 fps: int = 60):
        pygame.init()
        self._windowed_size = (width, height)
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = fps
        self.dt = 0.0

        # Only the top scene receives events, updates and draws
        self._scenes: list[Scene] = []

        # Rebuilt by GameScene on every level (re)start
        self.world = World()

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)
        self.font_lg = pygame.font.SysFont("monospace", 28)

    # -- Scenes --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    @property
    def size(self) -> tuple[int, int]:
        """Virtual window size in pixels."""
        return self._virtual_size

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        print(f"[APP] state -> {scene.state}")
        scene.on_enter(self)

    def replace_scene(self, scene: Scene):
        """Swap the top scene; the one below is not re-entered."""
        if self._scenes:
            self._scenes.pop().on_exit(self)
        self._scenes.append(scene)
        print(f"[APP] state -> {scene.state}")
        scene.on_enter(self)

    def reset_world(self) -> World:
        self.world = World()
        return self.world

    # -- Pointer --

    def _to_virtual(self, pos: tuple[int, int]) -> tuple[int, int]:
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        return int(pos[0] * vw / sw), int(pos[1] * vh / sh)

    def mouse_pos(self) -> tuple[int, int]:
        """Mouse position on the virtual surface (Y down)."""
        return self._to_virtual(pygame.mouse.get_pos())

    def cursor(self) -> tuple[float, float] | None:
        """Virtual cursor with Y pointing up, or None when the pointer left."""
        if not pygame.mouse.get_focused():
            return None
        mx, my = self.mouse_pos()
        return (float(mx), float(self._virtual_size[1] - my))

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        if not hasattr(event, "pos"):
            return event
        attrs = {k: v for k, v in event.dict.items() if k != "pos"}
        attrs["pos"] = self._to_virtual(event.pos)
        return pygame.event.Event(event.type, **attrs)

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    if event.type in _MOUSE_EVENTS:
                        event = self._remap_mouse_event(event)
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)
            if self.scene:
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Text --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Blit *text* at (x, y).  Returns the rect for layout chaining."""
        img = (font or self.font).render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_centered(self, surface: pygame.Surface, text: str, y: int,
                           color=(255, 255, 255), font=None):
        img = (font or self.font).render(text, True, color)
        return surface.blit(img, ((surface.get_width() - img.get_width()) // 2, y))
