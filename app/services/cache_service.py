from typing import Any, Callable, Dict, Optional
from datetime import datetime
import logging

from fastapi import Request

from app.core.cache import TTLCache
from app.core.cache_config import cache_key, view_ttl
from app.core.constants import CacheViewEnum

logger = logging.getLogger(__name__)

class CacheService:

    @staticmethod
    def get_or_compute(
        cache: TTLCache,
        view: CacheViewEnum,
        user_id: str,
        compute: Callable[[], Any],
        request: Optional[Request] = None,
    ) -> Any:
        key = cache_key(view, user_id)

        cached_value = cache.get(key)
        if cached_value is not None:
            if request:
                request.state.cache_status = "HIT"
            logger.debug(f"Cache HIT for key: {key}")
            return cached_value

        result = compute()
        ttl = view_ttl(view)
        cache.set(key, result, ttl=ttl)
        if request:
            request.state.cache_status = "MISS"
        logger.debug(f"Cache MISS for key: {key} (stored with TTL {ttl}s)")
        return result

    @staticmethod
    def get_cache_stats(cache: TTLCache) -> Dict[str, Any]:
        stats = cache.stats()
        stats.update({
            "backend": "Memory",
            "default_ttl": cache.default_ttl,
            "timestamp": datetime.utcnow().isoformat(),
        })
        return stats

    @staticmethod
    def health_check(cache: TTLCache) -> bool:
        try:
            test_key = "health_check_test"
            test_value = {"timestamp": datetime.utcnow().isoformat()}

            cache.set(test_key, test_value, ttl=10)
            retrieved = cache.get(test_key)
            cache.delete(test_key)

            return retrieved == test_value
        except Exception as e:
            logger.error(f"Cache health check failed: {e}")
            return False

cache_service = CacheService()
