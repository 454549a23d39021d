"""
GeometryCache — Thread-safe in-memory memoization of computed geometry.

Transformers are pure, so a result can be reused whenever the same
structural input comes back.  The key is built from the ``(label,
value)`` pairs of the input records plus the sizing options; inputs
that cannot be turned into a hashable key are simply not cached.

Bounded to ``CACHE_MAX_ENTRIES`` entries; the least recently used
entry is evicted first.
"""

import threading
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Hashable, Iterable, Optional, Tuple

from chart_geometry.core.config import settings


@dataclass
class CacheEntry:
    """Container for a cached result with creation-time metadata."""
    data: Any
    created_at: datetime = field(default_factory=datetime.now)
    hits: int = 0

    @property
    def age_seconds(self) -> float:
        return (datetime.now() - self.created_at).total_seconds()


class GeometryCache:
    """
    Singleton in-memory cache.

    Usage::

        from chart_geometry.core.cache import geometry_cache

        key = geometry_cache.make_key("PieChartGeometry", rows, options)
        hit = geometry_cache.get(key)
    """

    _instance: Optional["GeometryCache"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not GeometryCache._initialized:
            self._cache: "OrderedDict[Hashable, CacheEntry]" = OrderedDict()
            self._lock = threading.Lock()
            self._hits = 0
            self._misses = 0
            GeometryCache._initialized = True

    # ─────────────────────────────────────────────────────────────
    #  KEYS
    # ─────────────────────────────────────────────────────────────

    @staticmethod
    def make_key(
        chart_name: str,
        rows: Iterable[Tuple[Any, Any]],
        options: Dict[str, Any],
    ) -> Optional[Hashable]:
        """
        Structural key for one computation, or ``None`` if uncacheable.

        ``repr`` is used for labels and values so that NaN entries
        (which never compare equal) still produce identical keys.
        """
        try:
            frozen_rows = tuple((repr(label), repr(value)) for label, value in rows)
            opts = tuple(sorted((k, _freeze(v)) for k, v in options.items()))
            key = (chart_name, frozen_rows, opts)
            hash(key)
        except (TypeError, ValueError):
            return None
        return key

    # ─────────────────────────────────────────────────────────────
    #  ACCESS
    # ─────────────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return settings.CACHE_ENABLED and settings.CACHE_MAX_ENTRIES > 0

    def get(self, key: Optional[Hashable]) -> Optional[Any]:
        if key is None or not self.enabled:
            return None
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._cache.move_to_end(key)
            entry.hits += 1
            self._hits += 1
            return entry.data

    def put(self, key: Optional[Hashable], value: Any) -> None:
        if key is None or not self.enabled:
            return
        with self._lock:
            self._cache[key] = CacheEntry(data=value)
            self._cache.move_to_end(key)
            while len(self._cache) > settings.CACHE_MAX_ENTRIES:
                self._cache.popitem(last=False)

    # ─────────────────────────────────────────────────────────────
    #  MANAGEMENT
    # ─────────────────────────────────────────────────────────────

    def clear(self) -> None:
        """Wipe the cache (used in tests or forced reset)."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def get_cache_info(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "enabled": self.enabled,
                "entries": len(self._cache),
                "max_entries": settings.CACHE_MAX_ENTRIES,
                "hits": self._hits,
                "misses": self._misses,
            }


def _freeze(value: Any) -> Hashable:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Mapping):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    return value


# ── Singleton ────────────────────────────────────────────────────
geometry_cache = GeometryCache()
