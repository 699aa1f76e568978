"""scenes/world_draw.py — Rendering helpers for the game scene.

All pure-draw functions live here so that GameScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object beyond what is explicitly passed.

World space is Y-up and centred on the camera; screen space is Y-down
with the origin in the top-left corner.
"""

from __future__ import annotations
import math
import pygame
from core.app import App
from core.constants import COLORS
from core.ecs import World
from components import Camera, CollisionShape, DevLog, Player, Sprite, Transform


def world_to_screen(x: float, y: float, camera: Camera,
                    size: tuple[int, int]) -> tuple[int, int]:
    sw, sh = size
    return (int(round(sw / 2 + (x - camera.x))),
            int(round(sh / 2 - (y - camera.y))))


def _rotated_square(cx: int, cy: int, side: float, rotation: float) -> list[tuple[float, float]]:
    # Screen Y is flipped, so a counter-clockwise world rotation is
    # clockwise on screen.
    half = side / 2.0
    c, s = math.cos(-rotation), math.sin(-rotation)
    return [(cx + px * c - py * s, cy + px * s + py * c)
            for px, py in ((-half, -half), (half, -half), (half, half), (-half, half))]


# ── Entities ────────────────────────────────────────────────────────

def draw_entities(surface: pygame.Surface, world: World, camera: Camera) -> None:
    size = surface.get_size()
    entities = []
    for eid, tf, sprite in world.query(Transform, Sprite):
        entities.append((sprite.layer, eid, tf, sprite))
    entities.sort(key=lambda e: (e[0], e[1]))

    for _, eid, tf, sprite in entities:
        sx, sy = world_to_screen(tf.x, tf.y, camera, size)
        side = sprite.size * tf.scale
        if world.has(eid, Player):
            draw_bee(surface, sx, sy, side, tf.rotation, sprite.color)
        elif tf.rotation:
            pygame.draw.polygon(surface, sprite.color,
                                _rotated_square(sx, sy, side, tf.rotation))
        else:
            rect = pygame.Rect(0, 0, int(side), int(side))
            rect.center = (sx, sy)
            pygame.draw.rect(surface, sprite.color, rect)


def draw_bee(surface: pygame.Surface, sx: int, sy: int, side: float,
             rotation: float, color: tuple) -> None:
    """Body square plus two stripes across the heading."""
    pygame.draw.polygon(surface, color, _rotated_square(sx, sy, side, rotation))
    # Heading in screen space: sprite "up" is rotation + pi/2 in world
    heading = rotation + math.pi / 2.0
    hx, hy = math.cos(heading), -math.sin(heading)
    px, py = -hy, hx
    for offset in (-side * 0.15, side * 0.15):
        cx, cy = sx + hx * offset, sy + hy * offset
        a = (cx + px * side * 0.45, cy + py * side * 0.45)
        b = (cx - px * side * 0.45, cy - py * side * 0.45)
        pygame.draw.line(surface, COLORS["bee_stripe"], a, b, max(1, int(side * 0.12)))
    nose = (sx + hx * side * 0.6, sy + hy * side * 0.6)
    pygame.draw.circle(surface, COLORS["bee_stripe"], (int(nose[0]), int(nose[1])),
                       max(1, int(side * 0.08)))


# ── Debug overlay ───────────────────────────────────────────────────

def draw_debug_shapes(surface: pygame.Surface, world: World, camera: Camera) -> None:
    """Outline every synced collision box."""
    size = surface.get_size()
    for _, shape in world.all_of(CollisionShape):
        sx, sy = world_to_screen(shape.cx - shape.ext_w, shape.cy + shape.ext_h, camera, size)
        rect = pygame.Rect(sx, sy, int(shape.ext_w * 2), int(shape.ext_h * 2))
        pygame.draw.rect(surface, COLORS["shape"], rect, 1)


def draw_dev_log(surface: pygame.Surface, app: App, log: DevLog | None,
                 n: int = 12) -> None:
    if log is None:
        return
    y = surface.get_height() - 16 * n - 10
    for entry in log.recent(n):
        text = f"{entry['t']:7.2f}  [{entry['cat']}] {entry['msg']}"
        app.draw_text(surface, text, 10, y, (180, 220, 200), app.font_sm)
        y += 16


def draw_hud(surface: pygame.Surface, app: App, level_name: str,
             elapsed: float, upgrades: list[str]) -> None:
    app.draw_text(surface, level_name, 10, 8, (255, 255, 255))
    app.draw_text(surface, f"{elapsed:6.1f}s", surface.get_width() - 90, 8,
                  (255, 230, 120))
    if upgrades:
        app.draw_text(surface, "upgrades: " + ", ".join(upgrades), 10, 26,
                      (150, 200, 255), app.font_sm)
