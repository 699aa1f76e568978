"""components.spatial — Transforms, collision shapes and tile markers.

All coordinates and dimensions are in world units (1 tile = 24 u),
Y-up.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Transform:
    """World transform of a body.

    ``rotation`` is cosmetic for collision purposes; ``scale`` shrinks
    or grows the body's collision half-extents.
    """
    x: float = 0.0        # u
    y: float = 0.0        # u
    rotation: float = 0.0  # rad
    scale: float = 1.0


@dataclass
class CollisionShape:
    """Axis-aligned box mirrored from the body's ``Transform``.

    ``half_w`` / ``half_h`` are the unscaled half-extents.  The
    world-space box (``cx``, ``cy``, ``ext_w``, ``ext_h``) is rewritten
    by ``collision_sync_system`` once per tick; ``changed`` tells
    whether that sync moved or resized it.  The first sync always
    counts as a change.
    """
    half_w: float = 12.0
    half_h: float = 12.0
    cx: float = 0.0
    cy: float = 0.0
    ext_w: float = 12.0
    ext_h: float = 12.0
    changed: bool = True
    synced: bool = False

    @classmethod
    def rectangle(cls, width: float, height: float) -> CollisionShape:
        return cls(half_w=width / 2.0, half_h=height / 2.0,
                   ext_w=width / 2.0, ext_h=height / 2.0)

    @property
    def center(self) -> tuple[float, float]:
        return (self.cx, self.cy)

    @property
    def half_extents(self) -> tuple[float, float]:
        return (self.ext_w, self.ext_h)


@dataclass
class Wall:
    """Marks a solid wall tile entity."""
    pass
