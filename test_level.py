"""test_level.py — Level map parsing, tile → world mapping and errors.

Run: python test_level.py   (or: pytest test_level.py)
"""
from __future__ import annotations
import sys, tempfile, traceback
from pathlib import Path

from core.level import (
    EndlessWorld, GameWorld, LEVELS, LevelWorld, MapError, MapIoError, MapParseError,
    SpawnerTile, WallTile, tile_center,
)
from components import Laser, Missile


def test_small_map_walls_and_spawn():
    world = GameWorld.parse(".\t#\t.\n.\t*\t.")
    assert list(world.walls()) == [(24.0, 0.0)]
    assert world.player_start == (1, 1)
    assert world.player_spawn_position() == (24.0, -24.0)
    assert isinstance(world.world_type, EndlessWorld)


def test_every_token_kind():
    world = GameWorld.parse("#\tM\tL:1.5\n.\t*\t.", LevelWorld(2))
    row0 = world.layout[0]
    assert row0[0] == WallTile()
    assert row0[1] == SpawnerTile(Missile())
    assert row0[2] == SpawnerTile(Laser(angle=1.5))
    assert world.layout[1] == [None, None, None]
    assert world.world_type == LevelWorld(2)

    spawners = list(world.spawners())
    assert spawners == [((24.0, 0.0), Missile()), ((48.0, 0.0), Laser(angle=1.5))]


def test_tile_center_rows_grow_downward():
    assert tile_center(0, 0) == (0.0, 0.0)
    assert tile_center(3, 2) == (48.0, -72.0)


def test_missing_spawn_defaults_to_origin():
    world = GameWorld.parse("#\t#\n.\t.")
    assert world.player_start == (0, 0)
    assert world.player_spawn_position() == (0.0, 0.0)


def test_ragged_rows_and_whitespace():
    world = GameWorld.parse("#\n#\t.\t#\r\n. \t *\n\n#")
    assert [len(r) for r in world.layout] == [1, 3, 2, 0, 1]
    assert world.player_start == (1, 2)
    assert list(world.walls()) == [(0.0, 0.0), (0.0, -24.0), (48.0, -24.0), (0.0, -96.0)]


def test_tabs_only_line_is_empty_cells():
    try:
        GameWorld.parse("#\t.\n\t\n.\t*")
    except MapParseError as exc:
        assert (exc.row, exc.col, exc.token) == (1, 0, "")
    else:
        raise AssertionError("expected MapParseError")


def test_last_spawn_marker_wins():
    world = GameWorld.parse("*\t.\n.\t*")
    assert world.player_start == (1, 1)


def test_walls_in_scan_order():
    world = GameWorld.parse(".\t#\n#\t#")
    assert list(world.walls()) == [(24.0, 0.0), (0.0, -24.0), (24.0, -24.0)]


def test_unknown_token_reports_position():
    try:
        GameWorld.parse("#\t.\n.\tX\t#")
    except MapParseError as exc:
        assert (exc.row, exc.col, exc.token) == (1, 1, "X")
        assert isinstance(exc, MapError)
    else:
        raise AssertionError("expected MapParseError")


def test_bad_laser_angle_and_empty_cell():
    for text, col, token in (("L:up", 0, "L:up"), ("#\t\t#", 1, "")):
        try:
            GameWorld.parse(text)
        except MapParseError as exc:
            assert exc.col == col and exc.token == token
        else:
            raise AssertionError(f"expected MapParseError for {text!r}")


def test_missing_file_is_io_error():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nope.tsv"
        try:
            GameWorld.from_file(path)
        except MapIoError as exc:
            assert exc.path == path
        else:
            raise AssertionError("expected MapIoError")


def test_from_file_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tiny.tsv"
        path.write_text("#\t#\t#\n#\t*\tM\n", encoding="utf-8")
        world = GameWorld.from_file(path, LevelWorld(7))
    assert world.world_type == LevelWorld(7)
    assert len(list(world.walls())) == 4
    assert world.player_spawn_position() == (24.0, -24.0)


def test_bundled_levels_load():
    for index, (name, path) in enumerate(LEVELS):
        world = GameWorld.load_level(index)
        assert world.world_type == LevelWorld(index), name
        assert any(True for _ in world.walls()), name
        assert any(True for _ in world.spawners()), name
        assert world.player_start != (0, 0), name


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
    print(f"\n  Level Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
