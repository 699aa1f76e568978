"""logic/entity_factory.py — Materialise a loaded level into entities.

``spawn_world`` walks the ``GameWorld`` layout in grid scan order and
creates one entity per wall and spawner tile, then the bee at the
level's spawn point.  Scan order matters: the wall resolver breaks ties
between equally early wall edges by spawn order.
"""

from __future__ import annotations
import math
from core.constants import COLORS, PLAYER_SIZE, TILE_SIZE
from core.ecs import World
from core.level import GameWorld, SpawnerTile, WallTile, tile_center
from components import (
    CollisionShape, Laser, Player, Spawner, Sprite, Transform, Upgrades, Wall,
)


def spawn_wall(world: World, x: float, y: float) -> int:
    eid = world.spawn()
    world.add(eid, Transform(x=x, y=y))
    world.add(eid, Wall())
    world.add(eid, Sprite(color=COLORS["wall"], size=TILE_SIZE, layer=0))
    return eid


def spawn_spawner(world: World, x: float, y: float, tile: SpawnerTile) -> int:
    eid = world.spawn()
    kind = tile.kind
    if isinstance(kind, Laser):
        rotation = kind.angle - math.pi / 2.0
        color = COLORS["laser_spawner"]
    else:
        rotation = 0.0
        color = COLORS["missile_spawner"]
    world.add(eid, Transform(x=x, y=y, rotation=rotation))
    world.add(eid, Spawner.for_kind(kind))
    world.add(eid, Sprite(color=color, size=TILE_SIZE, layer=0))
    return eid


def spawn_player(world: World, x: float, y: float,
                 upgrades: Upgrades | None = None) -> int:
    """Create the bee.  ``SHRINK`` halves its transform scale."""
    scale = upgrades.player_scale if upgrades is not None else 1.0
    eid = world.spawn()
    world.add(eid, Transform(x=x, y=y, scale=scale))
    world.add(eid, CollisionShape.rectangle(PLAYER_SIZE, PLAYER_SIZE))
    world.add(eid, Player(size=PLAYER_SIZE))
    world.add(eid, Sprite(color=COLORS["bee"], size=PLAYER_SIZE, layer=1))
    return eid


def spawn_world(world: World, game_world: GameWorld,
                upgrades: Upgrades | None = None) -> int:
    """Spawn walls, spawners and the bee.  Returns the bee's entity id."""
    walls = spawners = 0
    for i, j, tile in game_world.tiles():
        x, y = tile_center(i, j)
        if isinstance(tile, WallTile):
            spawn_wall(world, x, y)
            walls += 1
        elif isinstance(tile, SpawnerTile):
            spawn_spawner(world, x, y, tile)
            spawners += 1

    px, py = game_world.player_spawn_position()
    print(f"[SPAWN] {walls} walls, {spawners} spawners, bee at ({px:.0f}, {py:.0f})")
    return spawn_player(world, px, py, upgrades)
