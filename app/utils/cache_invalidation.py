"""Cache invalidation utilities for maintaining data consistency"""
from typing import List
import logging

from app.core.cache import TTLCache
from app.core.cache_config import INVALIDATION_PATTERNS, cache_key
from app.core.constants import MutationEnum

logger = logging.getLogger(__name__)

class CacheInvalidator:
    """Evicts every view a mutation can stale for one user.

    Runs inline on the write's response path. A failing store is logged and
    otherwise ignored; the next read simply recomputes.
    """

    def __init__(self, cache: TTLCache):
        self.cache = cache

    def keys_for(self, mutation: MutationEnum, user_id: str) -> List[str]:
        views = INVALIDATION_PATTERNS[MutationEnum(mutation)]
        return [cache_key(view, user_id) for view in views]

    def invalidate(self, mutation: MutationEnum, user_id: str) -> List[str]:
        keys = self.keys_for(mutation, user_id)
        deleted_count = 0
        for key in keys:
            try:
                if self.cache.delete(key):
                    deleted_count += 1
            except Exception as e:
                logger.warning(f"Failed to delete cache key {key}: {e}")

        logger.info(f"Invalidated {deleted_count}/{len(keys)} cache entries for {MutationEnum(mutation).value} (user {user_id})")
        return keys
