"""components.rendering — Visual identity and display."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Sprite:
    color: tuple = (255, 255, 255)
    size: float = 24.0         # u, side of the drawn square
    layer: int = 0             # draw order
