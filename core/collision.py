"""core/collision.py — Low-level segment / AABB collision primitives.

These live in ``core/`` (not ``logic/``) because both the world model
(wall edges) and gameplay systems (player resolver, enemy overlap)
need them.  Keeping them here prevents a circular dependency.

Everything here is pure: plain floats and tuples in, plain values out.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from core.constants import EPSILON

Vec2 = tuple[float, float]


def flt_equal(a: float, b: float) -> bool:
    """Float equality within ``EPSILON``."""
    return abs(a - b) < EPSILON


def polar_to_cartesian(angle: float, magnitude: float) -> Vec2:
    return (math.cos(angle) * magnitude, math.sin(angle) * magnitude)


@dataclass(frozen=True, eq=False)
class ParaLine:
    """Parametric segment ``p + v*t`` for ``0 <= t <= 1``."""
    p: Vec2
    v: Vec2

    def point(self, t: float) -> Vec2:
        """Return the point at *t*."""
        return (self.p[0] + self.v[0] * t, self.p[1] + self.v[1] * t)

    def intersect(self, other: ParaLine) -> float | None:
        """Return this line's scalar at the crossing with *other*, or None."""
        return intersect_lines(self.p, self.v, other.p, other.v)

    @property
    def is_vertical(self) -> bool:
        """True if the segment runs along Y (blocks horizontal motion)."""
        return flt_equal(self.v[0], 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParaLine):
            return NotImplemented
        return (flt_equal(self.p[0], other.p[0]) and flt_equal(self.p[1], other.p[1])
                and flt_equal(self.v[0], other.v[0]) and flt_equal(self.v[1], other.v[1]))

    __hash__ = None  # type: ignore[assignment]


def intersect_lines(p1: Vec2, v1: Vec2, p2: Vec2, v2: Vec2) -> float | None:
    """Solve ``p1 + v1*t1 == p2 + v2*t2`` for ``0 <= t1, t2 <= 1``.

    Returns ``t1`` when both scalars fall inside the unit interval,
    otherwise ``None``.  Parallel and colinear segments never intersect.

    >>> intersect_lines((0, -1), (0, 2), (-1, 0), (2, 0))
    0.5
    """
    divisor = v1[0] * v2[1] - v1[1] * v2[0]
    if flt_equal(divisor, 0.0):
        # Parallel lines
        return None

    # t1 = ((p2 - p1) x v2) / (v1 x v2)
    t1 = (p2[0] * v2[1] - p1[0] * v2[1] + p1[1] * v2[0] - p2[1] * v2[0]) / divisor
    if not 0.0 <= t1 <= 1.0:
        return None

    if not flt_equal(v2[1], 0.0):
        t2 = (v1[1] * t1 + p1[1] - p2[1]) / v2[1]
    elif not flt_equal(v2[0], 0.0):
        t2 = (v1[0] * t1 + p1[0] - p2[0]) / v2[0]
    else:
        # Degenerate second segment: any t2 fits
        t2 = 0.0
    if not 0.0 <= t2 <= 1.0:
        return None
    return t1


def rect_to_lines(top_left: Vec2, size: Vec2) -> tuple[ParaLine, ParaLine, ParaLine, ParaLine]:
    """Split an axis-aligned rectangle into its four edges.

    Order is top, left, right, bottom.  Every edge starts at a corner
    and runs along the positive size axis, so the left/right edges have
    ``v.x == 0`` and the top/bottom edges have ``v.y == 0``.
    """
    x, y = top_left
    w, h = size
    return (
        ParaLine((x, y), (w, 0.0)),
        ParaLine((x, y), (0.0, h)),
        ParaLine((x + w, y), (0.0, h)),
        ParaLine((x, y + h), (w, 0.0)),
    )


def aabb_overlap(center_a: Vec2, half_a: Vec2, center_b: Vec2, half_b: Vec2) -> bool:
    """Return True if two axis-aligned boxes overlap.

    Boxes that merely touch (distance equal to the half-extent sum on
    either axis) do not overlap.
    """
    return (abs(center_a[0] - center_b[0]) < half_a[0] + half_b[0]
            and abs(center_a[1] - center_b[1]) < half_a[1] + half_b[1])
