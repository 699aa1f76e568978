"""logic/collision.py — Collision-shape mirroring and enemy overlap.

Two systems, run in this order every tick:

  1. ``collision_sync_system`` copies each body's ``Transform`` into
     its ``CollisionShape`` (translation → centre, scale → extents,
     rotation ignored).
  2. ``enemy_collision_system`` tests the bee's box against every enemy
     box that changed in that sync and emits ``PlayerHit``.

The wall resolver in ``logic/movement.py`` never reads these shapes.
"""

from __future__ import annotations
from core.collision import aabb_overlap
from core.ecs import World
from core.events import EventBus, PlayerHit
from components import CollisionShape, DevLog, Enemy, GameClock, Player, Transform


def sync_shape(shape: CollisionShape, tf: Transform) -> bool:
    """Mirror *tf* into *shape*.  Returns True if the box changed."""
    new = (tf.x, tf.y, shape.half_w * tf.scale, shape.half_h * tf.scale)
    old = (shape.cx, shape.cy, shape.ext_w, shape.ext_h)
    shape.cx, shape.cy, shape.ext_w, shape.ext_h = new
    shape.changed = new != old or not shape.synced
    shape.synced = True
    return shape.changed


def collision_sync_system(world: World) -> None:
    for _, tf, shape in world.query(Transform, CollisionShape):
        sync_shape(shape, tf)


def enemy_collision_system(world: World) -> PlayerHit | None:
    """Emit ``PlayerHit`` for the first enemy overlapping the bee."""
    result = world.query_one(Player, CollisionShape)
    if result is None:
        return None
    pid, _, player_shape = result

    for eid, _, shape in world.query(Enemy, CollisionShape):
        if not shape.changed:
            continue
        if not aabb_overlap(player_shape.center, player_shape.half_extents,
                            shape.center, shape.half_extents):
            continue

        event = PlayerHit(enemy_eid=eid, player_eid=pid)
        bus = world.res(EventBus)
        if bus is not None:
            bus.emit(event)
        log = world.res(DevLog)
        if log is not None:
            clock = world.res(GameClock)
            log.record(pid, "hit", f"bee hit by enemy {eid}",
                       t=clock.time if clock else 0.0,
                       details={"enemy": shape.center, "bee": player_shape.center})
        print(f"[PLAYER] hit by enemy {eid} at ({shape.cx:.1f}, {shape.cy:.1f})")
        return event
    return None
