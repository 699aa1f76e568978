"""components.resources — World-level singletons and the player marker."""

from __future__ import annotations
from dataclasses import dataclass, field
from core.constants import PLAYER_SIZE, SHRINK_SCALE


@dataclass
class GameClock:
    """Monotonic game time — accumulated ``dt`` since the level started."""
    time: float = 0.0


@dataclass
class Camera:
    """World point drawn at the centre of the window."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Upgrades:
    """Active upgrade flags.

    Only ``SHRINK`` (half-size bee) and ``DOUBLE_SPEED`` affect the
    movement core; unknown flags are carried but ignored.
    """
    SHRINK = "shrink"
    DOUBLE_SPEED = "double_speed"

    active: set[str] = field(default_factory=set)

    def has_upgrade(self, flag: str) -> bool:
        return flag in self.active

    @property
    def player_scale(self) -> float:
        return SHRINK_SCALE if self.has_upgrade(self.SHRINK) else 1.0

    @property
    def speed_multiplier(self) -> float:
        return 2.0 if self.has_upgrade(self.DOUBLE_SPEED) else 1.0


@dataclass
class FrameInput:
    """Per-frame pointer state handed from the scene to the core.

    ``cursor`` is in window pixels with Y pointing *up* (origin at the
    bottom-left corner), or ``None`` when the pointer left the window.
    """
    cursor: tuple[float, float] | None = None
    window: tuple[float, float] = (960.0, 640.0)


@dataclass
class Player:
    """Marks the bee."""
    size: float = PLAYER_SIZE   # u, unscaled side length

