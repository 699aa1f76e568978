"""logic/enemies.py — Enemy materialisation and motion.

Turns ``SpawnEnemy`` events into live projectile entities and moves
them each tick:

  - Missiles home in on the bee, turning at most ``turn_rate`` rad/s.
  - Lasers fly straight along their spawner's angle.

Both despawn when their lifetime runs out or their centre enters a
wall tile.  Speeds, sizes and lifetimes come from ``[enemy.*]`` in
``data/tuning.toml``.
"""

from __future__ import annotations
import math
from core.constants import COLORS, TILE_SIZE
from core.ecs import World
from core.events import EventBus, SpawnEnemy
from core.tuning import get as _tun
from components import (
    CollisionShape, Enemy, Laser, Missile, Player, Sprite, Transform, Wall,
)


_DEFAULTS = {
    "missile": {"speed": 140.0, "size": 12.0, "lifetime": 6.0, "turn_rate": 2.5},
    "laser":   {"speed": 320.0, "size": 8.0,  "lifetime": 3.0, "turn_rate": 0.0},
}


def _param(kind_name: str, key: str) -> float:
    return float(_tun(f"enemy.{kind_name}", key, _DEFAULTS[kind_name][key]))


def _player_position(world: World) -> tuple[float, float] | None:
    result = world.query_one(Player, Transform)
    if result is None:
        return None
    _, _, tf = result
    return (tf.x, tf.y)


def spawn_enemy(world: World, event: SpawnEnemy) -> int:
    """Create the enemy entity described by *event*."""
    kind = event.kind
    name = kind.name
    if isinstance(kind, Laser):
        heading = event.angle if event.angle is not None else kind.angle
    else:
        target = _player_position(world)
        heading = (math.atan2(target[1] - event.y, target[0] - event.x)
                   if target is not None else 0.0)

    size = _param(name, "size")
    eid = world.spawn()
    world.add(eid, Transform(x=event.x, y=event.y, rotation=heading - math.pi / 2.0))
    world.add(eid, CollisionShape.rectangle(size, size))
    world.add(eid, Enemy(kind=kind, heading=heading,
                         speed=_param(name, "speed"),
                         turn_rate=_param(name, "turn_rate"),
                         remaining=_param(name, "lifetime")))
    world.add(eid, Sprite(color=COLORS[name], size=size, layer=2))
    return eid


def register_enemy_handlers(world: World) -> None:
    """Subscribe the spawner → enemy bridge on the world's bus."""
    bus = world.res(EventBus)
    if bus is None:
        return
    bus.subscribe("SpawnEnemy", lambda event: spawn_enemy(world, event))


def _steer(heading: float, target_angle: float, max_turn: float) -> float:
    diff = (target_angle - heading + math.pi) % (2 * math.pi) - math.pi
    return heading + max(-max_turn, min(max_turn, diff))


def _inside_wall(x: float, y: float, walls: list[tuple[float, float]]) -> bool:
    half = TILE_SIZE / 2.0
    return any(abs(x - wx) < half and abs(y - wy) < half for wx, wy in walls)


def enemy_motion_system(world: World, dt: float) -> None:
    """Move, steer and expire every live enemy."""
    target = _player_position(world)
    walls = [(tf.x, tf.y) for _, _, tf in world.query(Wall, Transform)]
    to_kill: list[int] = []

    for eid, tf, enemy in world.query(Transform, Enemy):
        if isinstance(enemy.kind, Missile) and target is not None:
            desired = math.atan2(target[1] - tf.y, target[0] - tf.x)
            enemy.heading = _steer(enemy.heading, desired, enemy.turn_rate * dt)

        step = enemy.speed * dt
        tf.x += math.cos(enemy.heading) * step
        tf.y += math.sin(enemy.heading) * step
        tf.rotation = enemy.heading - math.pi / 2.0

        enemy.remaining -= dt
        if enemy.remaining <= 0.0 or _inside_wall(tf.x, tf.y, walls):
            to_kill.append(eid)

    for eid in to_kill:
        world.kill(eid)
