"""test_movement.py — Bee kinematics and wall resolution.

Covers the cursor → velocity mapping, the swept wall resolver (head-on,
glancing slide, axis classification, tie-breaking) and the multi-tick
scenarios: no penetration, DOUBLE_SPEED and SHRINK.

Run: python test_movement.py   (or: pytest test_movement.py)
"""
from __future__ import annotations
import math, sys, traceback

from core.collision import ParaLine, flt_equal
from core.constants import BASE_SPEED, EPSILON, TILE_SIZE
from components import Upgrades
from logic.movement import (
    desired_velocity, earliest_hit, leading_corner, resolve_wall_collision,
    step_player, wall_edges,
)

DT = 1.0 / 60.0
WINDOW = (800.0, 600.0)
CENTRE = (400.0, 300.0)
RIGHT_EDGE = (800.0, 300.0)   # full deflection, heading +x


def _run_ticks(start, cursor, walls, ticks, upgrades=None):
    pos = start
    for _ in range(ticks):
        motion = step_player(pos, cursor, WINDOW, DT, walls, upgrades)
        if motion is not None:
            pos = (motion.x, motion.y)
    return pos


# ════════════════════════════════════════════════════════════════════════
#  Desired velocity
# ════════════════════════════════════════════════════════════════════════

def test_velocity_scales_with_cursor_distance():
    # |relative| = 75 = half the cap (min(800, 600) / 4 = 150)
    angle, (vx, vy) = desired_velocity((475.0, 300.0), WINDOW, 1.0)
    assert flt_equal(angle, 0.0)
    assert flt_equal(vx, BASE_SPEED / 2) and flt_equal(vy, 0.0)


def test_velocity_capped_at_base_speed():
    angle, (vx, vy) = desired_velocity((400.0, 600.0), WINDOW, 0.5)
    assert flt_equal(angle, math.pi / 2)
    assert flt_equal(math.hypot(vx, vy), BASE_SPEED * 0.5)


def test_cursor_missing_or_outside_is_noop():
    assert desired_velocity(None, WINDOW, DT) is None
    assert desired_velocity((-1.0, 10.0), WINDOW, DT) is None
    assert desired_velocity((10.0, 601.0), WINDOW, DT) is None
    assert step_player((5.0, 5.0), None, WINDOW, DT, []) is None


def test_cursor_at_centre_does_not_move():
    assert step_player((0.0, 0.0), CENTRE, WINDOW, DT, [(24.0, 0.0)]) is None


def test_orientation_points_sprite_up_along_heading():
    motion = step_player((0.0, 0.0), (400.0, 0.0), WINDOW, DT, [])
    # heading straight down (-pi/2) → sprite rotated by -pi
    assert flt_equal(motion.orientation, -math.pi)


# ════════════════════════════════════════════════════════════════════════
#  Resolver
# ════════════════════════════════════════════════════════════════════════

def test_no_walls_moves_by_velocity():
    start = (10.0, -20.0)
    motion = step_player(start, (500.0, 350.0), WINDOW, DT, [])
    vx, vy = motion.velocity
    assert flt_equal(motion.x, start[0] + vx)
    assert flt_equal(motion.y, start[1] + vy)
    assert motion.hits == []


def test_head_on_wall_stops_corner_at_edge():
    (nx, ny), hits = resolve_wall_collision((0.0, 0.0), (100.0, 0.0), 0.0, [(50.0, 0.0)])
    assert len(hits) == 1
    t, edge = hits[0]
    assert edge.is_vertical and flt_equal(t, 0.26)
    # leading right corner of the bee sits on the wall's left edge
    assert flt_equal(nx + TILE_SIZE / 2, 50.0 - TILE_SIZE / 2)
    assert flt_equal(ny, 0.0)


def test_leading_corner_head_on():
    corner = leading_corner((0.0, 0.0), (100.0, 0.0), 0.0, True, 12.0)
    assert flt_equal(corner[0], 12.0) and flt_equal(corner[1], -12.0)


def test_glancing_slide_clamps_x_only():
    angle = math.atan2(10.0, 30.0)
    (nx, ny), hits = resolve_wall_collision((0.0, 0.0), (30.0, 10.0), angle, [(36.0, 0.0)])
    assert len(hits) == 1 and hits[0][1].is_vertical
    # corner = 12 * (sin a + cos a) along x
    expected_x = 24.0 - 12.0 * (math.sin(angle) + math.cos(angle))
    assert flt_equal(nx, expected_x)
    assert nx < 30.0
    assert flt_equal(ny, 10.0)


def test_horizontal_edge_clamps_y_only():
    angle = math.atan2(30.0, 5.0)
    (nx, ny), hits = resolve_wall_collision((0.0, 0.0), (5.0, 30.0), angle, [(0.0, 36.0)])
    assert len(hits) == 1 and not hits[0][1].is_vertical
    assert flt_equal(nx, 5.0)
    assert ny < 30.0


def test_straight_up_into_ceiling():
    (nx, ny), _ = resolve_wall_collision((0.0, 0.0), (0.0, 30.0), math.pi / 2, [(0.0, 36.0)])
    assert flt_equal(nx, 0.0)
    # top of the bee meets the wall's lower edge
    assert flt_equal(ny + 12.0, 24.0)


def test_earliest_edge_wins_and_ties_keep_scan_order():
    edges = list(wall_edges([(24.0, 24.0), (24.0, 0.0)]))
    probe = ParaLine((0.0, 12.0), (20.0, 0.0))
    idx, t = earliest_hit(probe, edges)
    assert idx == 1 and flt_equal(t, 0.6)
    # skipping the first hit falls through to the tied edge of the next wall
    idx2, t2 = earliest_hit(probe, edges, {1})
    assert idx2 == 5 and flt_equal(t2, 0.6)


def test_extra_passes_do_not_reresolve_same_edge():
    one, hits_one = resolve_wall_collision((0.0, 0.0), (100.0, 0.0), 0.0, [(50.0, 0.0)])
    many, hits_many = resolve_wall_collision((0.0, 0.0), (100.0, 0.0), 0.0, [(50.0, 0.0)],
                                             passes=4)
    assert flt_equal(one[0], many[0]) and flt_equal(one[1], many[1])
    assert len(hits_one) == len(hits_many) == 1


# ════════════════════════════════════════════════════════════════════════
#  Multi-tick scenarios
# ════════════════════════════════════════════════════════════════════════

def test_steering_into_wall_never_penetrates():
    walls = [(24.0, 24.0), (24.0, 0.0), (24.0, -24.0)]
    pos = (0.0, 0.0)
    for _ in range(60):
        motion = step_player(pos, RIGHT_EDGE, WINDOW, DT, walls)
        pos = (motion.x, motion.y)
        assert pos[0] + 12.0 <= 12.0 + EPSILON, pos
    assert flt_equal(pos[1], 0.0)


def test_approach_then_rest_against_wall():
    pos = _run_ticks((0.0, 0.0), RIGHT_EDGE, [(48.0, 0.0)], 60)
    assert flt_equal(pos[0], 24.0), pos


def test_double_speed_doubles_displacement():
    base = step_player((0.0, 0.0), (520.0, 210.0), WINDOW, DT, [])
    fast = step_player((0.0, 0.0), (520.0, 210.0), WINDOW, DT, [],
                       Upgrades({Upgrades.DOUBLE_SPEED}))
    assert flt_equal(fast.x, 2 * base.x) and flt_equal(fast.y, 2 * base.y)
    assert flt_equal(math.hypot(fast.x, fast.y), 2 * math.hypot(base.x, base.y))


def test_shrink_halves_rejection_distance():
    wall_edge_x = 48.0 - TILE_SIZE / 2
    normal = _run_ticks((0.0, 0.0), RIGHT_EDGE, [(48.0, 0.0)], 60)
    shrunk = _run_ticks((0.0, 0.0), RIGHT_EDGE, [(48.0, 0.0)], 60,
                        Upgrades({Upgrades.SHRINK}))
    gap_normal = wall_edge_x - normal[0]
    gap_shrunk = wall_edge_x - shrunk[0]
    assert flt_equal(gap_normal, 12.0)
    assert flt_equal(gap_shrunk, gap_normal / 2)


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
    print(f"\n  Movement Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
