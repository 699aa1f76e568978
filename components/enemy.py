"""components.enemy — Enemy kinds, live enemies and their spawners.

An enemy *kind* is a small frozen value shared by the level map (which
spawner sits on a tile), the spawner timer, the ``SpawnEnemy`` event
and the live enemy entity.
"""

from __future__ import annotations
from dataclasses import dataclass
from core.constants import EPSILON, MISSILE_COOLDOWN, LASER_COOLDOWN
from core.tuning import get as _tun


@dataclass(frozen=True)
class Missile:
    """Homing projectile, steers toward the bee."""
    name = "missile"


@dataclass(frozen=True)
class Laser:
    """Straight projectile fired along ``angle`` (radians)."""
    angle: float = 0.0
    name = "laser"


EnemyKind = Missile | Laser


def cooldown_for(kind: EnemyKind) -> float:
    """Spawner cooldown in seconds for *kind* (tuning, with defaults)."""
    if isinstance(kind, Laser):
        return float(_tun("enemy.laser", "cooldown", LASER_COOLDOWN))
    return float(_tun("enemy.missile", "cooldown", MISSILE_COOLDOWN))


@dataclass
class Enemy:
    """A live projectile enemy.

    ``heading`` is the direction of travel in radians; missiles turn it
    toward the player at ``turn_rate`` rad/s, lasers keep it fixed.
    """
    kind: EnemyKind
    heading: float = 0.0
    speed: float = 0.0          # u/s
    turn_rate: float = 0.0      # rad/s
    remaining: float = 0.0      # s until despawn


@dataclass
class Spawner:
    """Repeating cooldown timer attached to a spawner tile.

    ``elapsed`` grows by ``dt`` every tick.  Once it reaches
    ``cooldown`` the timer fires and ``cooldown`` is subtracted, so the
    phase never drifts by more than one tick.  At most one fire per
    tick, however large ``dt`` is; fires missed during a long frame are
    dropped, not queued.
    """
    kind: EnemyKind
    cooldown: float
    elapsed: float = 0.0

    @classmethod
    def for_kind(cls, kind: EnemyKind) -> Spawner:
        return cls(kind=kind, cooldown=cooldown_for(kind))

    def tick(self, dt: float) -> bool:
        """Advance by *dt* seconds.  Returns True if the timer fired."""
        self.elapsed += dt
        if self.elapsed + EPSILON >= self.cooldown:
            self.elapsed -= self.cooldown
            if self.elapsed + EPSILON >= self.cooldown:
                self.elapsed %= self.cooldown
            return True
        return False
