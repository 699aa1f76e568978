"""logic/tick.py — System tick orchestration.

Houses the per-frame system pipeline.  The order is fixed:

  0. enemy motion           (enemy subsystem, moves live projectiles)
  1. collision-shape sync   (Transform → CollisionShape)
  2. spawner timers         (queue SpawnEnemy events)
  3. bee movement           (cursor → velocity → wall resolution)
  4. enemy overlap test     (queue PlayerHit)
  5. event bus drain        (materialise enemies, notify the scene)

Enemies created in step 5 are first seen by the overlap test on the
next tick.

Usage::

    from logic.tick import setup_world, tick_systems
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import DevLog, FrameInput, GameClock, Upgrades
from core.events import EventBus
from logic.collision import collision_sync_system, enemy_collision_system
from logic.enemies import enemy_motion_system, register_enemy_handlers
from logic.movement import player_movement_system
from logic.spawners import spawner_system

if TYPE_CHECKING:
    from core.ecs import World


def setup_world(world: "World", upgrades: Upgrades | None = None) -> EventBus:
    """Install the resources every system expects.  Returns the bus."""
    bus = EventBus()
    world.set_res(bus)
    world.set_res(GameClock())
    world.set_res(FrameInput())
    world.set_res(upgrades if upgrades is not None else Upgrades())
    if world.res(DevLog) is None:
        world.set_res(DevLog())
    register_enemy_handlers(world)
    return bus


def tick_systems(world: "World", dt: float,
                 cursor: tuple[float, float] | None = None,
                 window: tuple[float, float] | None = None,
                 *, skip_enemies: bool = False,
                 skip_spawners: bool = False) -> None:
    """Run all core gameplay systems for one frame.

    Parameters
    ----------
    world : World
        The ECS world (see ``setup_world``).
    dt : float
        Seconds since the previous frame.
    cursor : tuple | None
        Pointer position in window pixels, Y-up, or None when the
        pointer is outside the window.
    window : tuple | None
        Window ``(width, height)``; keeps the previous size if None.
    skip_enemies : bool
        Skip enemy motion (useful in test scenes).
    skip_spawners : bool
        Skip spawner timers.
    """
    clock = world.res(GameClock)
    if clock:
        clock.time += dt

    frame = world.res(FrameInput)
    if frame is not None:
        frame.cursor = cursor
        if window is not None:
            frame.window = window

    if not skip_enemies:
        enemy_motion_system(world, dt)

    collision_sync_system(world)

    if not skip_spawners:
        spawner_system(world, dt)

    player_movement_system(world, dt)

    enemy_collision_system(world)

    bus = world.res(EventBus)
    if bus:
        bus.drain()

    world.purge()
