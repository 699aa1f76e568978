"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
All gameplay distances are measured in **world units**, where:

    1 tile = 24 units   (TILE_SIZE)

World space is Y-up: row 0 of a level map sits at y = 0 and every
following row is one tile *lower* (negative y).  Screen space as
delivered by pygame is Y-down; the scene flips it before handing the
cursor to the core.

    Distance / position     u       (world units)
    Speed                   u/s
    Time                    s       (seconds)
    Angles                  rad     (radians, counter-clockwise from +x)

Tunable numbers (speeds, cooldowns, enemy sizes) live in
``data/tuning.toml``; the values below are the fixed geometry of the
game plus the defaults used when a tuning key is missing.
"""

# ── Geometry ────────────────────────────────────────────────────────
TILE_SIZE: float = 24.0        # u, side of a wall / spawner tile
PLAYER_SIZE: float = 24.0      # u, side of the bee's collision box

# Float tolerance for every equality test in the collision code.
EPSILON: float = 1e-4

# ── Player ──────────────────────────────────────────────────────────
BASE_SPEED: float = 500.0      # u/s at full cursor deflection
SHRINK_SCALE: float = 0.5

# ── Enemy defaults (overridden by [enemy.*] in tuning.toml) ─────────
MISSILE_COOLDOWN: float = 3.0  # s
LASER_COOLDOWN: float = 1.5    # s

# ── Window ──────────────────────────────────────────────────────────
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 640
FPS = 60

# Flat palette — the renderer draws coloured rectangles only.
COLORS = {
    "background": (24, 22, 30),
    "wall": (200, 40, 40),
    "missile_spawner": (90, 90, 110),
    "laser_spawner": (60, 120, 160),
    "missile": (240, 150, 40),
    "laser": (120, 220, 255),
    "bee": (250, 210, 60),
    "bee_stripe": (30, 30, 30),
    "shape": (0, 255, 120),
}
