"""
core/ecs.py — Entity-Component-System

Entities are ints, components are plain objects stored by their type,
and resources are per-world singletons stored under id -1.

    w = World()
    e = w.spawn()
    w.add(e, Transform(24.0, -48.0))
    w.add(e, CollisionShape.rectangle(24.0, 24.0))

    for eid, tf, shape in w.query(Transform, CollisionShape):
        shape.cx, shape.cy = tf.x, tf.y

Stores are insertion-ordered dicts, so a query visits entities in spawn
order.  The wall resolver relies on that to break ties between equally
early wall edges.
"""

from __future__ import annotations
from typing import Any, Iterator

_RESOURCE = -1


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._dead: set[int] = set()

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    def kill(self, eid: int):
        """Mark *eid* dead.  It stays stored until ``purge()``."""
        self._dead.add(eid)

    def purge(self):
        """Drop dead entities from every store.  Called at the end of a tick."""
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield ``(eid, comp1, comp2, ...)`` for live entities holding all *types*."""
        if not types:
            return
        stores = [self._stores.get(t, {}) for t in types]
        # walk the first store so spawn order is kept
        for eid in list(stores[0]):
            if eid == _RESOURCE or eid in self._dead:
                continue
            if all(eid in s for s in stores[1:]):
                yield (eid, *(s[eid] for s in stores))

    def query_one(self, *types: type) -> tuple | None:
        """Return the first match or None."""
        return next(self.query(*types), None)

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield ``(eid, component)`` for every live entity with *comp_type*."""
        for eid, comp in list(self._stores.get(comp_type, {}).items()):
            if eid != _RESOURCE and eid not in self._dead:
                yield eid, comp

    # -- Resources --

    def set_res(self, resource: Any):
        self._stores.setdefault(type(resource), {})[_RESOURCE] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(_RESOURCE)
