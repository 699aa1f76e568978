"""logic/movement.py — Bee kinematics and wall resolution.

Each tick the bee flies toward the cursor: the further the cursor is
from the window centre (up to a quarter of the smaller window side),
the faster it goes.  The desired displacement is then cast from the
bee's nose against every wall edge; on a hit the displacement is
clamped on the blocked axis so the leading corner of the bee just
touches the wall, while the free axis keeps its motion (wall-sliding).

The pure functions take explicit inputs and return explicit outputs;
``player_movement_system`` is the thin ECS wrapper.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator
from core.collision import ParaLine, Vec2, flt_equal, polar_to_cartesian, rect_to_lines
from core.constants import BASE_SPEED, PLAYER_SIZE, TILE_SIZE
from core.ecs import World
from core.tuning import get as _tun
from components import DevLog, FrameInput, GameClock, Player, Transform, Upgrades, Wall


@dataclass
class PlayerMotion:
    """Result of one resolver step."""
    x: float
    y: float
    orientation: float                       # rad, sprite "up" along the heading
    velocity: Vec2 = (0.0, 0.0)              # desired displacement this tick
    hits: list[tuple[float, ParaLine]] = field(default_factory=list)


# ── Desired velocity ────────────────────────────────────────────────

def desired_velocity(cursor: Vec2 | None, window: Vec2, dt: float,
                     upgrades: Upgrades | None = None,
                     base_speed: float = BASE_SPEED) -> tuple[float, Vec2] | None:
    """Return ``(heading, displacement)`` for this tick, or None.

    *cursor* is in window pixels, Y-up.  None is returned when the
    cursor is missing or outside the window.
    """
    if cursor is None:
        return None
    width, height = window
    cx, cy = cursor
    if not (0.0 <= cx <= width and 0.0 <= cy <= height):
        return None
    magnitude_cap = min(width, height) / 4.0
    if magnitude_cap <= 0.0:
        return None

    rel_x = cx - width / 2.0
    rel_y = cy - height / 2.0
    angle = math.atan2(rel_y, rel_x)
    # between 0 and 1
    velocity_scale = min(math.hypot(rel_x, rel_y), magnitude_cap) / magnitude_cap

    speed = velocity_scale * base_speed
    if upgrades is not None:
        speed *= upgrades.speed_multiplier
    return angle, polar_to_cartesian(angle, speed * dt)


# ── Wall casting ────────────────────────────────────────────────────

def wall_edges(walls: Iterable[Vec2]) -> Iterator[ParaLine]:
    """Edges of every wall tile, four per wall (top, left, right, bottom)."""
    half = TILE_SIZE / 2.0
    for wx, wy in walls:
        yield from rect_to_lines((wx - half, wy - half), (TILE_SIZE, TILE_SIZE))


def earliest_hit(probe: ParaLine, edges: list[ParaLine],
                 skip: set[int] | None = None) -> tuple[int, float] | None:
    """Return ``(edge_index, t)`` of the first edge *probe* crosses.

    Equal ``t`` keeps the edge seen first.
    """
    best: tuple[int, float] | None = None
    for idx, edge in enumerate(edges):
        if skip and idx in skip:
            continue
        t = probe.intersect(edge)
        if t is not None and (best is None or t < best[1]):
            best = (idx, t)
    return best


def leading_corner(position: Vec2, velocity: Vec2, angle: float,
                   vertical_edge: bool, half_extent: float) -> Vec2:
    """Corner of the bee that runs into the wall.

    Starts from ``(vx >= 0) xor (vy >= 0)``, flipped for vertical
    edges, and places the corner in the bee's rotated frame.
    """
    top_right_corner = (velocity[0] >= 0.0) != (velocity[1] >= 0.0)
    if vertical_edge:
        top_right_corner = not top_right_corner
    bx = polar_to_cartesian(angle - math.pi / 2.0, 1.0)
    by = polar_to_cartesian(angle, 1.0)
    side = half_extent if top_right_corner else -half_extent
    return (position[0] + side * bx[0] + half_extent * by[0],
            position[1] + side * bx[1] + half_extent * by[1])


def resolve_wall_collision(position: Vec2, velocity: Vec2, angle: float,
                           walls: Iterable[Vec2],
                           half_extent: float = PLAYER_SIZE / 2.0,
                           passes: int = 1) -> tuple[Vec2, list[tuple[float, ParaLine]]]:
    """Move from *position* by *velocity*, sliding along the first wall hit.

    Returns the new position and the ``(t, edge)`` pairs that were
    resolved.  With ``passes > 1`` the corrected displacement is cast
    again against the edges not yet resolved.
    """
    px, py = position
    edges = list(wall_edges(walls))
    nose = polar_to_cartesian(angle, half_extent)
    disp = velocity
    resolved: set[int] = set()
    hits: list[tuple[float, ParaLine]] = []

    for _ in range(max(1, passes)):
        if flt_equal(disp[0], 0.0) and flt_equal(disp[1], 0.0):
            break
        # from the front of the bee to where the front is going
        probe = ParaLine((px + nose[0], py + nose[1]), disp)
        hit = earliest_hit(probe, edges, resolved)
        if hit is None:
            break
        idx, t = hit
        edge = edges[idx]
        vertical = edge.is_vertical
        corner = leading_corner(position, disp, angle, vertical, half_extent)
        if vertical:
            # Vertical edge blocks horizontal motion
            disp = (edge.p[0] - corner[0], disp[1])
        else:
            disp = (disp[0], edge.p[1] - corner[1])
        resolved.add(idx)
        hits.append((t, edge))

    return (px + disp[0], py + disp[1]), hits


def step_player(position: Vec2, cursor: Vec2 | None, window: Vec2, dt: float,
                walls: Iterable[Vec2], upgrades: Upgrades | None = None, *,
                size: float = PLAYER_SIZE, scale: float | None = None,
                base_speed: float = BASE_SPEED, passes: int = 1) -> PlayerMotion | None:
    """One resolver tick.  Returns None when the bee does not move.

    *scale* defaults to the upgrade-derived scale (0.5 under SHRINK).
    """
    desired = desired_velocity(cursor, window, dt, upgrades, base_speed)
    if desired is None:
        return None
    angle, velocity = desired
    if flt_equal(velocity[0], 0.0) and flt_equal(velocity[1], 0.0):
        return None
    if scale is None:
        scale = upgrades.player_scale if upgrades is not None else 1.0
    half_extent = size * scale / 2.0
    (nx, ny), hits = resolve_wall_collision(position, velocity, angle, walls,
                                            half_extent, passes)
    return PlayerMotion(x=nx, y=ny, orientation=angle - math.pi / 2.0,
                        velocity=velocity, hits=hits)


# ── ECS system ──────────────────────────────────────────────────────

def player_movement_system(world: World, dt: float) -> None:
    """Move the bee toward the cursor, resolving wall contacts.

    Reads the ``FrameInput`` and ``Upgrades`` resources; writes the
    player's ``Transform``.
    """
    frame = world.res(FrameInput)
    if frame is None:
        return
    result = world.query_one(Player, Transform)
    if result is None:
        return
    pid, player, tf = result
    upgrades = world.res(Upgrades)

    walls = [(wtf.x, wtf.y) for _, _, wtf in world.query(Wall, Transform)]
    motion = step_player(
        (tf.x, tf.y), frame.cursor, frame.window, dt, walls, upgrades,
        size=player.size, scale=tf.scale,
        base_speed=float(_tun("player", "base_speed", BASE_SPEED)),
        passes=int(_tun("player", "resolve_passes", 1)),
    )
    if motion is None:
        return

    tf.x = motion.x
    tf.y = motion.y
    tf.rotation = motion.orientation

    log = world.res(DevLog)
    if log is not None and motion.hits:
        clock = world.res(GameClock)
        for t, edge in motion.hits:
            axis = "vertical" if edge.is_vertical else "horizontal"
            log.record(pid, "collision", f"wall contact ({axis} edge)",
                       t=clock.time if clock else 0.0,
                       details={"t": round(t, 3), "edge": (edge.p, edge.v)})
