"""components.dev_log — Per-tick event log for the debug overlay.

A ring-buffer resource.  Systems record wall contacts (``collision``),
spawner fires (``spawn``) and enemy hits (``hit``); the game scene's
Tab overlay prints the newest entries.

    log = world.res(DevLog)
    log.record(eid, "collision", "wall contact", t=clock.time,
               details={"t": 0.42})

Each entry is a dict:
    {"t": float, "eid": int, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    # If non-empty, only these categories are kept
    cat_filter: set[str] = field(default_factory=set)

    def record(self, eid: int, cat: str, msg: str, *,
               t: float = 0.0, details: dict | None = None) -> None:
        if self.cat_filter and cat not in self.cat_filter:
            return
        self.entries.append({"t": t, "eid": eid, "cat": cat, "msg": msg,
                             "details": details})
        if len(self.entries) > self.max_entries:
            del self.entries[:-self.max_entries]

    def recent(self, n: int = 50) -> list[dict]:
        """The *n* newest entries, oldest first."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]
