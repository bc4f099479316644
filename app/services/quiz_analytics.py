"""Quiz performance analytics.

All helpers expect results ordered newest first, which is the order the
quiz-result collection is read in. Averages are rounded half up to whole
percentage points before they are compared or reported.
"""
import logging
import math
from collections import OrderedDict
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from fastapi import HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.core.cache_config import cache_key, view_ttl
from app.core.constants import (
    CacheViewEnum, DEFAULT_DIFFICULTY, PerformanceRatingEnum, TrendEnum, UNKNOWN_SUBJECT,
)
from app.crud.quiz_result import quiz_result as crud_quiz_result
from app.schemas.quiz_result import (
    DifficultyStats, Improvement, PerformanceInsights, QuizPerformance, QuizResult, QuizStats, QuizSummary,
    RatedQuizResult, SubjectStats,
)

logger = logging.getLogger(__name__)

TREND_WINDOW = 5
TREND_THRESHOLD = 5
STREAK_PASS_MARK = 60
RECENT_RESULTS = 5
SUBJECT_TREND_LENGTH = 3
SECONDS_PER_DAY = 24 * 60 * 60

RATING_THRESHOLDS = (
    (90, PerformanceRatingEnum.EXCELLENT),
    (80, PerformanceRatingEnum.VERY_GOOD),
    (70, PerformanceRatingEnum.GOOD),
    (60, PerformanceRatingEnum.AVERAGE),
    (50, PerformanceRatingEnum.BELOW_AVERAGE),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def performance_rating(percentage: float) -> PerformanceRatingEnum:
    for threshold, rating in RATING_THRESHOLDS:
        if percentage >= threshold:
            return rating
    return PerformanceRatingEnum.NEEDS_IMPROVEMENT


def average_percentage(results: Sequence[QuizResult]) -> int:
    if not results:
        return 0
    return round_half_up(sum(result.percentage for result in results) / len(results))


def calculate_trend(results: Sequence[QuizResult]) -> Improvement:
    """Compare the five most recent results with the five before them."""
    recent_average = average_percentage(results[:TREND_WINDOW])
    previous_average = average_percentage(results[TREND_WINDOW:TREND_WINDOW * 2])
    improvement = recent_average - previous_average

    trend = TrendEnum.STABLE
    if improvement > TREND_THRESHOLD:
        trend = TrendEnum.IMPROVING
    elif improvement < -TREND_THRESHOLD:
        trend = TrendEnum.DECLINING

    return Improvement(
        value=improvement,
        trend=trend,
        recent_average=recent_average,
        previous_average=previous_average,
    )


def calculate_consistency(percentages: Sequence[float], center: float) -> int:
    """``100 - stddev / 2`` around ``center``; not clamped to [0, 100]."""
    if not percentages:
        return 0
    variance = sum((percentage - center) ** 2 for percentage in percentages) / len(percentages)
    return round_half_up(100 - math.sqrt(variance) / 2)


def calculate_streak(results: Sequence[QuizResult], now: datetime) -> int:
    """Count passing results walking back from the newest one.

    The walk stops at the first result below the pass mark, or once a result
    is more than ``streak + 1`` whole days older than ``now``.
    """
    streak = 0
    for result in sorted(results, key=lambda r: r.date, reverse=True):
        day_diff = math.floor((now - result.date).total_seconds() / SECONDS_PER_DAY)
        if day_diff > streak + 1:
            break
        if result.percentage >= STREAK_PASS_MARK:
            streak += 1
        else:
            break
    return streak


def difficulty_stats(results: Sequence[QuizResult]) -> Dict[str, DifficultyStats]:
    groups: Dict[str, List[float]] = OrderedDict()
    for result in results:
        groups.setdefault(result.difficulty or DEFAULT_DIFFICULTY, []).append(result.percentage)
    return {
        difficulty: DifficultyStats(
            total=len(scores),
            total_score=sum(scores),
            average=round_half_up(sum(scores) / len(scores)),
        )
        for difficulty, scores in groups.items()
    }


def subject_stats(results: Sequence[QuizResult]) -> List[SubjectStats]:
    groups: Dict[str, List[float]] = OrderedDict()
    for result in results:
        groups.setdefault(result.topic or UNKNOWN_SUBJECT, []).append(result.percentage)

    stats = []
    for subject, scores in groups.items():
        average = round_half_up(sum(scores) / len(scores))
        stats.append(SubjectStats(
            subject=subject,
            total_quizzes=len(scores),
            average_score=average,
            performance_rating=performance_rating(average),
            best_score=max(scores),
            worst_score=min(scores),
            trend=scores[:SUBJECT_TREND_LENGTH],
        ))
    stats.sort(key=lambda item: item.average_score, reverse=True)
    return stats


def rate_results(results: Sequence[QuizResult]) -> List[RatedQuizResult]:
    return [
        RatedQuizResult(**result.model_dump(), performance_rating=performance_rating(result.percentage))
        for result in results
    ]


def build_performance_insights(results: Sequence[QuizResult], now: datetime) -> Optional[PerformanceInsights]:
    if not results:
        return None

    average_score = average_percentage(results)
    best = max(results, key=lambda result: result.percentage)
    worst = min(results, key=lambda result: result.percentage)

    return PerformanceInsights(
        overall_rating=performance_rating(average_score),
        average_score=average_score,
        best_score=best.percentage,
        worst_score=worst.percentage,
        total_quizzes=len(results),
        improvement=calculate_trend(results),
        difficulty_stats=difficulty_stats(results),
        consistency=calculate_consistency([result.percentage for result in results], average_score),
        streak=calculate_streak(results, now),
    )


def build_quiz_performance(results: Sequence[QuizResult], now: datetime) -> QuizPerformance:
    if not results:
        return QuizPerformance(
            has_data=False,
            overall_rating=performance_rating(0),
            average_score=0,
            total_quizzes=0,
        )

    insights = build_performance_insights(results, now)
    return QuizPerformance(
        has_data=True,
        overall_rating=insights.overall_rating,
        average_score=insights.average_score,
        total_quizzes=len(results),
        recent_results=rate_results(results[:RECENT_RESULTS]),
        performance_insights=insights,
        subject_performance=subject_stats(results),
        time_spent_total=sum(result.time_spent or 0 for result in results),
        consistency=insights.consistency,
    )


def build_quiz_summary(
    recent_results: Sequence[QuizResult], all_results: Sequence[QuizResult], now: datetime
) -> QuizSummary:
    average_score = average_percentage(all_results)
    return QuizSummary(
        recent_results=rate_results(recent_results),
        stats=QuizStats(
            total_quizzes=len(all_results),
            average_score=average_score,
            best_score=max((result.percentage for result in all_results), default=0),
            current_streak=calculate_streak(all_results, now),
            overall_rating=performance_rating(average_score),
        ),
    )


class QuizAnalyticsService:
    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def _history(self, db: Session, user_id: str, limit: Optional[int] = None) -> List[QuizResult]:
        try:
            rows = crud_quiz_result.get_multi_by_user(db, user_id=user_id, limit=limit)
        except SQLAlchemyError as e:
            logger.error(f"Error reading quiz results for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error fetching quiz results",
            )
        return [QuizResult.model_validate(row) for row in rows]

    def get_performance(
        self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None
    ) -> QuizPerformance:
        key = cache_key(CacheViewEnum.QUIZ_PERFORMANCE, user_id)

        cached_value = cache.get(key)
        if cached_value is not None:
            if request:
                request.state.cache_status = "HIT"
            return cached_value

        performance = build_quiz_performance(self._history(db, user_id), self.clock())
        if request:
            request.state.cache_status = "MISS"

        # an empty history is cheap to recompute and is left uncached
        if performance.has_data:
            cache.set(key, performance, ttl=view_ttl(CacheViewEnum.QUIZ_PERFORMANCE))
        return performance

    def get_summary(
        self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None
    ) -> QuizSummary:
        key = cache_key(CacheViewEnum.QUIZ_STATS, user_id)

        cached_value = cache.get(key)
        if cached_value is not None:
            if request:
                request.state.cache_status = "HIT"
            return cached_value

        recent_results = self._history(db, user_id, limit=RECENT_RESULTS)
        all_results = self._history(db, user_id)
        summary = build_quiz_summary(recent_results, all_results, self.clock())

        cache.set(key, summary, ttl=view_ttl(CacheViewEnum.QUIZ_STATS))
        if request:
            request.state.cache_status = "MISS"
        return summary


quiz_analytics_service = QuizAnalyticsService()
