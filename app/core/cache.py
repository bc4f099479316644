import time
from typing import Any, Callable, Dict, List, Optional
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

class TTLCache:
    """Process-local key/value store with per-entry time-to-live.

    Expired entries are never returned: ``get`` drops them lazily and
    ``sweep`` purges them in bulk (the application schedules it every
    ``CACHE_CHECK_PERIOD`` seconds). ``set`` always replaces the whole value.
    """

    def __init__(self, default_ttl: Optional[int] = None, clock: Callable[[], float] = time.monotonic):
        self.default_ttl = settings.CACHE_DEFAULT_TTL if default_ttl is None else default_ttl
        self._clock = clock
        self._cache: Dict[str, Dict[str, Any]] = {}
        self.hits = 0
        self.misses = 0

    def _is_expired(self, item: Dict[str, Any], now: float) -> bool:
        return item["expiry"] is not None and now >= item["expiry"]

    def get(self, key: str) -> Optional[Any]:
        item = self._cache.get(key)
        if item is None:
            self.misses += 1
            return None
        if self._is_expired(item, self._clock()):
            self._cache.pop(key, None)
            self.misses += 1
            return None
        self.hits += 1
        return item["value"]

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        if ttl is None:
            ttl = self.default_ttl
        now = self._clock()
        # ttl == 0 keeps the entry until it is deleted; a negative ttl is already expired
        self._cache[key] = {
            "value": value,
            "expiry": now + ttl if ttl != 0 else None,
            "created_at": now,
        }
        return True

    def has(self, key: str) -> bool:
        item = self._cache.get(key)
        if item is None:
            return False
        if self._is_expired(item, self._clock()):
            self._cache.pop(key, None)
            return False
        return True

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def clear(self) -> bool:
        self._cache.clear()
        return True

    def keys(self) -> List[str]:
        now = self._clock()
        return [key for key, item in list(self._cache.items()) if not self._is_expired(item, now)]

    def sweep(self) -> int:
        now = self._clock()
        expired_keys = [key for key, item in list(self._cache.items()) if self._is_expired(item, now)]
        for key in expired_keys:
            self._cache.pop(key, None)
        if expired_keys:
            logger.debug(f"Swept {len(expired_keys)} expired cache entries")
        return len(expired_keys)

    def stats(self) -> Dict[str, Any]:
        lookups = self.hits + self.misses
        return {
            "entries": len(self.keys()),
            "hits": self.hits,
            "misses": self.misses,
            "hit_ratio": round(self.hits / lookups, 4) if lookups else 0.0,
        }

    def __len__(self) -> int:
        return len(self._cache)
