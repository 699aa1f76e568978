"""
scenes/game_scene.py — The level being played

Builds a fresh ECS world from a loaded ``GameWorld``, runs the tick
pipeline every frame and follows the bee with the camera.  The bee
flies toward the mouse; when an enemy touches it the scene switches to
the Death scene.

Keys:
    Esc   back to level select
    Tab   toggle collision-shape / dev-log overlay
    F4    reload data/tuning.toml
"""

from __future__ import annotations
import pygame
from core.scene import Scene, AppState
from core.app import App
from core.constants import COLORS
from core.events import PlayerHit
from core.level import GameWorld, LEVELS, LevelWorld
from core import tuning as tuning_mod
from components import Camera, DevLog, GameClock, Player, Transform, Upgrades
from logic.entity_factory import spawn_world
from logic.tick import setup_world, tick_systems
from scenes.world_draw import draw_debug_shapes, draw_dev_log, draw_entities, draw_hud


def upgrades_from_tuning() -> Upgrades:
    return Upgrades(active=set(tuning_mod.get("upgrades", "active", [])))


class GameScene(Scene):
    state = AppState.GAME

    def __init__(self, game_world: GameWorld):
        self.game_world = game_world
        self.show_debug = False
        self.hit_by: int | None = None
        self.camera = Camera()
        self._built = False

    @property
    def level_name(self) -> str:
        wt = self.game_world.world_type
        if isinstance(wt, LevelWorld) and 0 <= wt.number < len(LEVELS):
            return LEVELS[wt.number][0]
        return "Endless"

    def on_enter(self, app: App):
        if self._built:
            return
        world = app.reset_world()
        upgrades = upgrades_from_tuning()
        bus = setup_world(world, upgrades)
        bus.subscribe("PlayerHit", self._on_player_hit)
        world.set_res(self.camera)
        spawn_world(world, self.game_world, upgrades)
        self.camera.x, self.camera.y = self.game_world.player_spawn_position()
        self._built = True
        print(f"[GAME] Entered {self.level_name}")

    def _on_player_hit(self, event: PlayerHit):
        if self.hit_by is None:
            self.hit_by = event.enemy_eid

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            from scenes.menu_scene import LevelSelectScene
            app.replace_scene(LevelSelectScene())
        elif event.key == pygame.K_TAB:
            self.show_debug = not self.show_debug
        elif event.key == pygame.K_F4:
            tuning_mod.reload()

    def update(self, dt: float, app: App):
        # Clamp long frames (window drags, breakpoints)
        dt = min(dt, 0.1)
        tick_systems(app.world, dt, app.cursor(), app.size)

        result = app.world.query_one(Player, Transform)
        if result is not None:
            _, _, tf = result
            self.camera.x, self.camera.y = tf.x, tf.y

        if self.hit_by is not None:
            from scenes.death_scene import DeathScene
            clock = app.world.res(GameClock)
            app.replace_scene(DeathScene(self.game_world, clock.time if clock else 0.0))

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(COLORS["background"])
        draw_entities(surface, app.world, self.camera)

        clock = app.world.res(GameClock)
        upgrades = app.world.res(Upgrades)
        draw_hud(surface, app, self.level_name,
                 clock.time if clock else 0.0,
                 sorted(upgrades.active) if upgrades else [])

        if self.show_debug:
            draw_debug_shapes(surface, app.world, self.camera)
            draw_dev_log(surface, app, app.world.res(DevLog))
