"""Cache configuration: view TTLs, key namespace and invalidation fan-out"""
from typing import Dict, List

from app.core.constants import CacheViewEnum, MutationEnum

# Cache TTL (Time To Live) configurations in seconds
CACHE_TTL = {
    # Composed summaries
    CacheViewEnum.DASHBOARD_SUMMARY: 300,   # 5 minutes
    CacheViewEnum.QUIZ_PERFORMANCE: 600,    # 10 minutes
    CacheViewEnum.QUIZ_STATS: 300,          # 5 minutes
    CacheViewEnum.BUDGET_SUMMARY: 300,      # 5 minutes

    # List views
    CacheViewEnum.STUDY_GOALS: 60,          # 1 minute
    CacheViewEnum.CLASSES: 60,
    CacheViewEnum.BUDGET: 60,
    CacheViewEnum.PLANNER: 60,
}

# Cache invalidation patterns - what to clear when data changes
INVALIDATION_PATTERNS: Dict[MutationEnum, List[CacheViewEnum]] = {
    MutationEnum.CLASS_CHANGED: [
        CacheViewEnum.CLASSES,
        CacheViewEnum.DASHBOARD_SUMMARY,
    ],
    MutationEnum.BUDGET_CHANGED: [
        CacheViewEnum.BUDGET,
        CacheViewEnum.DASHBOARD_SUMMARY,
        CacheViewEnum.BUDGET_SUMMARY,
    ],
    MutationEnum.PLANNER_CHANGED: [
        CacheViewEnum.PLANNER,
        CacheViewEnum.DASHBOARD_SUMMARY,
    ],
    MutationEnum.STUDY_SESSION_RECORDED: [
        CacheViewEnum.DASHBOARD_SUMMARY,
    ],
    MutationEnum.WELLNESS_RECORDED: [
        CacheViewEnum.DASHBOARD_SUMMARY,
    ],
    MutationEnum.STUDY_GOAL_CREATED: [
        CacheViewEnum.STUDY_GOALS,
        CacheViewEnum.DASHBOARD_SUMMARY,
    ],
    MutationEnum.QUIZ_RESULT_CHANGED: [
        CacheViewEnum.QUIZ_STATS,
        CacheViewEnum.DASHBOARD_SUMMARY,
        CacheViewEnum.QUIZ_PERFORMANCE,
    ],
}


def cache_key(view: CacheViewEnum, user_id: str) -> str:
    """``<view>:<user>``. View names never contain ``:``, so the first colon
    always separates the two parts and distinct pairs never collide."""
    view_name = CacheViewEnum(view).value
    return f"{view_name}:{user_id}"


def view_ttl(view: CacheViewEnum) -> int:
    return CACHE_TTL[CacheViewEnum(view)]
