"""core/tuning.py — Data-driven tuning values.

Gameplay numbers live in ``data/tuning.toml`` and are read once at
startup by ``main.py``.  Systems look values up with a default, so the
core also runs (and is tested) with nothing loaded::

    from core.tuning import get
    cooldown = get("enemy.missile", "cooldown", 3.0)

``reload()`` re-reads the file (F4 in game).  Values copied into live
entities, such as spawner cooldowns and enemy speeds, only change on
the next level start.
"""

from __future__ import annotations
import tomllib
from pathlib import Path

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path = DEFAULT_PATH


def load(path: str | Path | None = None) -> None:
    """Load tuning values from *path* (default ``data/tuning.toml``).

    A missing file is not an error: every ``get`` falls back to its
    default.
    """
    global _data, _path
    _path = Path(path) if path is not None else DEFAULT_PATH

    if not _path.exists():
        print(f"[TUNING] {_path} not found — using defaults")
        _data = {}
        return

    with open(_path, "rb") as f:
        _data = tomllib.load(f)
    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {_path}")


def reload() -> None:
    load(_path)


def _table(section: str) -> dict | None:
    node = _data
    for part in section.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read ``[section] key``.  Dotted sections address nested tables.

    >>> get("enemy.laser", "no_such_key", 1.5)
    1.5
    """
    table = _table(section)
    if table is None:
        return default
    return table.get(key, default)


def override(values: dict) -> None:
    """Replace the loaded values wholesale (tests and scripts)."""
    global _data
    _data = values


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1 for v in d.values())
