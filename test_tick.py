"""test_tick.py — Whole-pipeline behaviour through ``tick_systems``.

Builds worlds from small tab-separated maps, steps the fixed system
order and checks what the game would see: the bee resting against
walls, enemies appearing one tick after their spawner fires, and
``PlayerHit`` reaching bus subscribers.  No display needed.

Run: python test_tick.py   (or: pytest test_tick.py)
"""
from __future__ import annotations
import sys, traceback

from core import tuning
from core.collision import flt_equal
from core.ecs import World
from core.level import GameWorld
from components import (
    CollisionShape, DevLog, Enemy, Laser, Player, Transform, Upgrades,
)
from logic.collision import enemy_collision_system, collision_sync_system
from logic.entity_factory import spawn_world
from logic.tick import setup_world, tick_systems

DT = 1.0 / 60.0
WINDOW = (800.0, 600.0)
RIGHT_EDGE = (800.0, 300.0)


def _build(text: str, upgrades: Upgrades | None = None, values: dict | None = None):
    tuning.override(values or {})
    world = World()
    bus = setup_world(world, upgrades)
    pid = spawn_world(world, GameWorld.parse(text), upgrades)
    hits = []
    bus.subscribe("PlayerHit", hits.append)
    return world, pid, hits


def _bee(world: World) -> Transform:
    _, _, tf = world.query_one(Player, Transform)
    return tf


def _enemies(world: World) -> list[tuple[int, Transform, Enemy]]:
    return list(world.query(Transform, Enemy))


# ════════════════════════════════════════════════════════════════════════
#  Bee movement through the pipeline
# ════════════════════════════════════════════════════════════════════════

def test_bee_rests_against_wall():
    world, _, hits = _build("*\t.\t#")
    for _ in range(60):
        tick_systems(world, DT, RIGHT_EDGE, WINDOW)
    tf = _bee(world)
    assert flt_equal(tf.x, 24.0) and flt_equal(tf.y, 0.0), (tf.x, tf.y)
    assert hits == []
    assert world.res(DevLog).for_cat("collision")


def test_no_cursor_no_motion():
    world, _, _ = _build(".\t*\t.")
    tick_systems(world, DT, None, WINDOW)
    tf = _bee(world)
    assert (tf.x, tf.y) == (24.0, 0.0)


def test_shrink_upgrade_reaches_shape():
    upgrades = Upgrades({Upgrades.SHRINK})
    world, pid, _ = _build("*", upgrades)
    tick_systems(world, DT, None, WINDOW)
    shape = world.get(pid, CollisionShape)
    assert shape.half_extents == (6.0, 6.0)


# ════════════════════════════════════════════════════════════════════════
#  Spawners → enemies → hits
# ════════════════════════════════════════════════════════════════════════

FAST_MISSILE = {"enemy": {"missile": {"cooldown": 0.1}}}


def test_enemy_appears_after_drain_and_hits_next_tick():
    world, pid, hits = _build("M\t*", values=FAST_MISSILE)

    tick_systems(world, 0.1, None, WINDOW)
    enemies = _enemies(world)
    assert len(enemies) == 1
    _, tf, enemy = enemies[0]
    assert (tf.x, tf.y) == (0.0, 0.0)
    # born during the drain, so not checked against the bee yet
    assert hits == []

    tick_systems(world, 0.1, None, WINDOW)
    assert len(hits) == 1
    assert hits[0].player_eid == pid
    assert hits[0].enemy_eid == enemies[0][0]


def test_laser_flies_along_spawner_angle():
    laser_map = "L:0\t.\t.\t.\n.\t.\t.\t.\n*"
    world, _, hits = _build(laser_map, values={"enemy": {"laser": {"cooldown": 0.1}}})
    tick_systems(world, 0.1, None, WINDOW)
    (_, tf, enemy), = _enemies(world)
    assert enemy.kind == Laser(angle=0.0)

    tick_systems(world, 0.1, None, WINDOW, skip_spawners=True)
    assert flt_equal(tf.x, 32.0) and flt_equal(tf.y, 0.0)
    assert hits == []


def test_enemy_expires_and_is_purged():
    world, _, _ = _build("*\t.\t.\t.")
    eid = world.spawn()
    world.add(eid, Transform(x=72.0, y=0.0))
    world.add(eid, CollisionShape.rectangle(8.0, 8.0))
    world.add(eid, Enemy(kind=Laser(), speed=10.0, remaining=0.05))
    tick_systems(world, 0.1, None, WINDOW)
    assert world.get(eid, Enemy) is None
    assert _enemies(world) == []


def test_enemy_entering_wall_is_removed():
    world, _, _ = _build("*\t.\t.\t#")
    eid = world.spawn()
    world.add(eid, Transform(x=50.0, y=0.0))
    world.add(eid, CollisionShape.rectangle(8.0, 8.0))
    world.add(eid, Enemy(kind=Laser(), heading=0.0, speed=200.0, remaining=5.0))
    tick_systems(world, 0.1, None, WINDOW)
    assert world.get(eid, Enemy) is None


def test_only_changed_shapes_are_tested():
    world, pid, _ = _build("*")
    eid = world.spawn()
    world.add(eid, Transform(x=10.0, y=0.0))
    world.add(eid, CollisionShape.rectangle(8.0, 8.0))
    world.add(eid, Enemy(kind=Laser(), speed=0.0, remaining=5.0))

    collision_sync_system(world)
    hit = enemy_collision_system(world)
    assert hit is not None and hit.enemy_eid == eid and hit.player_eid == pid

    # nothing moved since the last sync
    collision_sync_system(world)
    assert enemy_collision_system(world) is None


# ════════════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    passed = failed = 0
    for name, fn in list(globals().items()):
        if not (name.startswith("test_") and callable(fn)):
            continue
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()
    tuning.override({})
    print(f"\n  Tick Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
