"""In-process cache of rendered read views, keyed by request path.

Read endpoints store their response under ``(path, key)`` where ``key``
usually carries the owner id and query parameters. Mutations invalidate a
whole path (every owner, every key), which mirrors how a rendered page is
revalidated after a write. Each path keeps at most ``max_entries`` keys and
evicts the least recently used one beyond that. The cache lives in one
process; run a single worker or disable it with ``VIEW_CACHE_ENABLED=false``
when scaling out.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Hashable

from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")

DASHBOARD_PATH = "/dashboard"


def workout_path(workout_id: int) -> str:
    return f"/workouts/{workout_id}"


class ViewCache:
    def __init__(self, *, enabled: bool = True, max_entries: int = 256):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.enabled = enabled
        self.max_entries = max_entries
        self._entries: dict[str, OrderedDict[Hashable, Any]] = {}
        self._lock = threading.Lock()

    def get(self, path: str, key: Hashable) -> Any | None:
        if not self.enabled:
            return None
        with self._lock:
            entries = self._entries.get(path)
            if entries is None or key not in entries:
                return None
            entries.move_to_end(key)
            return entries[key]

    def set(self, path: str, key: Hashable, value: Any) -> None:
        if not self.enabled:
            return
        with self._lock:
            entries = self._entries.setdefault(path, OrderedDict())
            entries[key] = value
            entries.move_to_end(key)
            while len(entries) > self.max_entries:
                entries.popitem(last=False)

    def invalidate(self, *paths: str) -> None:
        # Dropping a path that holds nothing is a no-op
        with self._lock:
            for path in paths:
                dropped = self._entries.pop(path, None)
                if dropped:
                    log.debug("view cache: dropped %d entries for %s", len(dropped), path)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self, path: str) -> int:
        with self._lock:
            return len(self._entries.get(path, ()))

    def __contains__(self, path: str) -> bool:
        return self.size(path) > 0


_settings = get_settings()
view_cache = ViewCache(enabled=_settings.VIEW_CACHE_ENABLED, max_entries=_settings.VIEW_CACHE_MAX_ENTRIES)


# Dependency for FastAPI routes
def get_view_cache() -> ViewCache:
    return view_cache
