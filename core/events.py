"""core/events.py — Event bus between the core systems and their listeners.

Systems queue events during the tick; the pipeline drains the bus once,
after the overlap test, so listeners see a finished frame::

    bus = world.res(EventBus)
    bus.emit(SpawnEnemy(kind=Missile(), x=48.0, y=-24.0))

    bus.subscribe("PlayerHit", on_hit)   # keyed by class name
    bus.drain()

Two events exist: ``SpawnEnemy`` (spawner timer fired; the enemy
subsystem materialises it) and ``PlayerHit`` (the game scene ends the
run).  Events are plain dataclasses and are delivered in FIFO order;
events emitted by a handler are delivered in the same drain.
"""

from __future__ import annotations
import traceback
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict
from components.enemy import EnemyKind


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class SpawnEnemy:
    """A spawner's cooldown elapsed; an enemy should appear at (x, y)."""
    kind: EnemyKind
    x: float = 0.0
    y: float = 0.0
    angle: float | None = None     # lasers only
    spawner_eid: int = 0


@dataclass
class PlayerHit:
    """An enemy's shape overlapped the bee's shape."""
    enemy_eid: int = 0
    player_eid: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus stored as an ECS resource."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"PlayerHit"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events — those are processed in the
        same drain pass (breadth-first).
        """
        processed = 0
        rounds = 1000  # handlers that keep re-emitting stop here
        while self._queue and rounds > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            rounds -= 1
        return processed

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
