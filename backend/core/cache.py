# core/cache.py
import time
from typing import Any, Callable, Awaitable, Dict, Tuple

from config import settings


class TTLCache:
    def __init__(self, ttl_seconds: int = 60, maxsize: int = 1000):
        self.ttl = ttl_seconds
        self.maxsize = maxsize
        self._store: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str):
        rec = self._store.get(key)
        if not rec:
            return None
        exp, val = rec
        if exp < time.time():
            self._store.pop(key, None)
            return None
        return val

    def set(self, key: str, val: Any):
        if key not in self._store and len(self._store) >= self.maxsize:
            # simple eviction: pop oldest
            old_key = next(iter(self._store))
            self._store.pop(old_key, None)
        self._store[key] = (time.time() + self.ttl, val)

    def pop(self, key: str):
        rec = self._store.pop(key, None)
        return rec[1] if rec else None

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

    async def aget_or_set(self, key: str, creator: Callable[[], Awaitable[Any]]):
        hit = self.get(key)
        if hit is not None:
            return hit
        val = await creator()
        # misses (None) are not cached so a later retry can resolve
        if val is not None:
            self.set(key, val)
        return val


# free-text place -> (lon, lat)
geocode_cache = TTLCache(ttl_seconds=settings.GEOCODE_CACHE_TTL_S)
