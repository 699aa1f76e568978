"""logic/spawners.py — Enemy spawner timers.

Every spawner tile carries a repeating ``Spawner`` timer.  When a timer
fires, a ``SpawnEnemy`` event is queued on the bus at the spawner's
world position; lasers inherit the spawner's firing angle.  The enemy
itself is created later, when the bus is drained (see
``logic/enemies.py``), so it first takes part in collision checks on
the following tick.
"""

from __future__ import annotations
from core.ecs import World
from core.events import EventBus, SpawnEnemy
from components import DevLog, GameClock, Laser, Spawner, Transform


def spawner_system(world: World, dt: float) -> list[SpawnEnemy]:
    """Advance every spawner by *dt*.  Returns the events emitted."""
    bus = world.res(EventBus)
    log = world.res(DevLog)
    clock = world.res(GameClock)
    emitted: list[SpawnEnemy] = []

    for eid, tf, spawner in world.query(Transform, Spawner):
        if not spawner.tick(dt):
            continue
        angle = spawner.kind.angle if isinstance(spawner.kind, Laser) else None
        event = SpawnEnemy(kind=spawner.kind, x=tf.x, y=tf.y,
                           angle=angle, spawner_eid=eid)
        emitted.append(event)
        if bus is not None:
            bus.emit(event)
        if log is not None:
            log.record(eid, "spawn", f"{spawner.kind.name} fired",
                       t=clock.time if clock else 0.0,
                       details={"x": tf.x, "y": tf.y, "angle": angle})

    return emitted
