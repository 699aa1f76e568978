"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Transform, CollisionShape, Wall
rendering      Sprite
enemy          Missile, Laser, Enemy, Spawner
resources      GameClock, Camera, Upgrades, FrameInput, Player
dev_log        DevLog

All public names are re-exported here so systems can do
``from components import Transform``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Transform, CollisionShape, Wall

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Sprite

# ── Enemies ──────────────────────────────────────────────────────────
from components.enemy import Missile, Laser, EnemyKind, Enemy, Spawner

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock, Camera, Upgrades, FrameInput, Player

# ── Dev tools ────────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Transform", "CollisionShape", "Wall",
    # rendering
    "Sprite",
    # enemy
    "Missile", "Laser", "EnemyKind", "Enemy", "Spawner",
    # resources
    "GameClock", "Camera", "Upgrades", "FrameInput", "Player",
    # dev tools
    "DevLog",
]
