"""core/level.py — Tile-grid level model and the ``.tsv`` map loader.

A level map is plain UTF-8 text: one line per row, cells separated by
tabs.  Cell tokens:

    .           empty
    #           wall
    M           missile spawner
    L:<float>   laser spawner firing at <float> radians
    *           player spawn (the cell itself is empty)

Rows need not be the same length.  Tile ``(row i, col j)`` has its
world centre at ``(j * TILE_SIZE, -i * TILE_SIZE)``: rows grow downward
in the file while world Y grows upward.

    world = GameWorld.load_level(0)
    for x, y in world.walls():
        ...
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
from core.constants import TILE_SIZE
from components.enemy import EnemyKind, Laser, Missile

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# (display name, map file) — index is the level number
LEVELS: list[tuple[str, Path]] = [
    ("Level 1 — First Flight", DATA_DIR / "levels" / "level1.tsv"),
    ("Level 2 — Crossfire", DATA_DIR / "levels" / "level2.tsv"),
    ("Level 3 — The Hive", DATA_DIR / "levels" / "level3.tsv"),
]


# ── Errors ──────────────────────────────────────────────────────────

class MapError(Exception):
    """Base class for level map failures."""


class MapIoError(MapError):
    """The map file could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read map {self.path}: {reason}")


class MapParseError(MapError):
    """A cell holds a token the loader does not understand."""

    def __init__(self, row: int, col: int, token: str):
        self.row = row
        self.col = col
        self.token = token
        super().__init__(f"invalid map token {token!r} at row {row}, col {col}")


# ── Tiles ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class WallTile:
    pass


@dataclass(frozen=True)
class SpawnerTile:
    kind: EnemyKind


Tile = WallTile | SpawnerTile


@dataclass(frozen=True)
class LevelWorld:
    number: int


@dataclass(frozen=True)
class EndlessWorld:
    pass


WorldType = LevelWorld | EndlessWorld


def tile_center(row: int, col: int) -> tuple[float, float]:
    """World-space centre of the tile at grid ``(row, col)``."""
    return (col * TILE_SIZE, -(row * TILE_SIZE))


def parse_token(token: str, row: int, col: int) -> tuple[Tile | None, bool]:
    """Parse one cell.  Returns ``(tile, is_player_spawn)``."""
    token = token.strip()
    if token == ".":
        return None, False
    if token == "#":
        return WallTile(), False
    if token == "M":
        return SpawnerTile(Missile()), False
    if token == "*":
        return None, True
    if token.startswith("L:"):
        try:
            angle = float(token[2:])
        except ValueError:
            raise MapParseError(row, col, token) from None
        return SpawnerTile(Laser(angle=angle)), False
    raise MapParseError(row, col, token)


@dataclass
class GameWorld:
    """A loaded level.  Read-only once constructed.

    ``player_start`` is ``(col, row)`` of the ``*`` marker, or ``(0, 0)``
    when the map has none.
    """
    world_type: WorldType
    player_start: tuple[int, int] = (0, 0)
    layout: list[list[Tile | None]] = field(default_factory=list)

    # -- Construction --

    @classmethod
    def parse(cls, text: str, world_type: WorldType | None = None) -> GameWorld:
        """Build a world from map *text*."""
        if world_type is None:
            world_type = EndlessWorld()
        start = None
        layout: list[list[Tile | None]] = []
        for i, line in enumerate(text.splitlines()):
            row: list[Tile | None] = []
            if "\t" not in line and not line.strip():
                # Blank line: a row with no cells
                layout.append(row)
                continue
            for j, value in enumerate(line.split("\t")):
                tile, is_start = parse_token(value, i, j)
                if is_start:
                    if start is not None:
                        print(f"[LEVEL] extra player spawn at row {i}, col {j} "
                              f"(replaces row {start[1]}, col {start[0]})")
                    start = (j, i)
                row.append(tile)
            layout.append(row)
        return cls(world_type=world_type,
                   player_start=start if start is not None else (0, 0),
                   layout=layout)

    @classmethod
    def from_file(cls, path: str | Path, world_type: WorldType | None = None) -> GameWorld:
        """Read and parse a map file.  Raises ``MapIoError`` / ``MapParseError``."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MapIoError(path, str(exc)) from exc
        world = cls.parse(text, world_type)
        print(f"[LEVEL] Loaded {path.name}: {len(world.layout)} rows, "
              f"{sum(1 for _ in world.walls())} walls, "
              f"{sum(1 for _ in world.spawners())} spawners")
        return world

    @classmethod
    def load_level(cls, level: int) -> GameWorld:
        """Load entry *level* of ``LEVELS``."""
        _, path = LEVELS[level]
        return cls.from_file(path, LevelWorld(level))

    # -- Queries --

    def tiles(self) -> Iterator[tuple[int, int, Tile]]:
        """Yield ``(row, col, tile)`` for every non-empty cell, scan order."""
        for i, row in enumerate(self.layout):
            for j, tile in enumerate(row):
                if tile is not None:
                    yield i, j, tile

    def walls(self) -> Iterator[tuple[float, float]]:
        """World centres of all walls in grid scan order."""
        for i, j, tile in self.tiles():
            if isinstance(tile, WallTile):
                yield tile_center(i, j)

    def spawners(self) -> Iterator[tuple[tuple[float, float], EnemyKind]]:
        for i, j, tile in self.tiles():
            if isinstance(tile, SpawnerTile):
                yield tile_center(i, j), tile.kind

    def player_spawn_position(self) -> tuple[float, float]:
        col, row = self.player_start
        return tile_center(row, col)
