import pytest

from app.core.cache import TTLCache
from app.core.cache_config import CACHE_TTL, INVALIDATION_PATTERNS, cache_key
from app.core.constants import CacheViewEnum, MutationEnum
from app.utils.cache_invalidation import CacheInvalidator

EXPECTED_FANOUT = {
    MutationEnum.CLASS_CHANGED: {"classes", "dashboard-summary"},
    MutationEnum.BUDGET_CHANGED: {"budget", "dashboard-summary", "summary"},
    MutationEnum.PLANNER_CHANGED: {"planner", "dashboard-summary"},
    MutationEnum.STUDY_SESSION_RECORDED: {"dashboard-summary"},
    MutationEnum.WELLNESS_RECORDED: {"dashboard-summary"},
    MutationEnum.STUDY_GOAL_CREATED: {"study-goals", "dashboard-summary"},
    MutationEnum.QUIZ_RESULT_CHANGED: {"quiz-stats", "dashboard-summary", "quiz-performance"},
}


def _fill(cache: TTLCache, user_id: str):
    for view in CacheViewEnum:
        cache.set(cache_key(view, user_id), f"{view.value} for {user_id}")


def test_cache_key_format():
    assert cache_key(CacheViewEnum.DASHBOARD_SUMMARY, "abc123") == "dashboard-summary:abc123"
    assert cache_key(CacheViewEnum.BUDGET_SUMMARY, "abc123") == "summary:abc123"


def test_cache_keys_are_unique_per_view_and_user():
    users = ["u1", "u2", "u:3", "u"]
    keys = [cache_key(view, user) for view in CacheViewEnum for user in users]
    assert len(keys) == len(set(keys))


def test_every_view_has_a_ttl():
    assert set(CACHE_TTL) == set(CacheViewEnum)
    assert CACHE_TTL[CacheViewEnum.DASHBOARD_SUMMARY] == 300
    assert CACHE_TTL[CacheViewEnum.QUIZ_PERFORMANCE] == 600
    assert CACHE_TTL[CacheViewEnum.QUIZ_STATS] == 300
    assert CACHE_TTL[CacheViewEnum.STUDY_GOALS] == 60


def test_every_mutation_has_a_pattern():
    assert set(INVALIDATION_PATTERNS) == set(MutationEnum)


@pytest.mark.parametrize("mutation", list(MutationEnum))
def test_invalidation_evicts_exactly_the_mapped_views(mutation):
    cache = TTLCache(default_ttl=60)
    _fill(cache, "u1")

    CacheInvalidator(cache).invalidate(mutation, "u1")

    remaining = {key.split(":", 1)[0] for key in cache.keys()}
    evicted = {view.value for view in CacheViewEnum} - remaining
    assert evicted == EXPECTED_FANOUT[mutation]


@pytest.mark.parametrize("mutation", list(MutationEnum))
def test_invalidation_leaves_other_users_untouched(mutation):
    cache = TTLCache(default_ttl=60)
    _fill(cache, "u1")
    _fill(cache, "u2")

    CacheInvalidator(cache).invalidate(mutation, "u1")

    for view in CacheViewEnum:
        assert cache.get(cache_key(view, "u2")) == f"{view.value} for u2"


def test_invalidating_absent_keys_is_a_no_op():
    cache = TTLCache(default_ttl=60)
    keys = CacheInvalidator(cache).invalidate(MutationEnum.BUDGET_CHANGED, "nobody")
    assert sorted(keys) == ["budget:nobody", "dashboard-summary:nobody", "summary:nobody"]
    assert len(cache) == 0


def test_store_failure_does_not_propagate():
    class BrokenCache(TTLCache):
        def delete(self, key):
            raise RuntimeError("store unavailable")

    cache = BrokenCache(default_ttl=60)
    keys = CacheInvalidator(cache).invalidate(MutationEnum.QUIZ_RESULT_CHANGED, "u1")
    assert len(keys) == 3


def test_partial_store_failure_still_evicts_remaining_keys():
    class FlakyCache(TTLCache):
        def delete(self, key):
            if key.startswith("quiz-stats"):
                raise RuntimeError("transient")
            return super().delete(key)

    cache = FlakyCache(default_ttl=60)
    _fill(cache, "u1")

    CacheInvalidator(cache).invalidate(MutationEnum.QUIZ_RESULT_CHANGED, "u1")

    assert cache.get("dashboard-summary:u1") is None
    assert cache.get("quiz-performance:u1") is None
