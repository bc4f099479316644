import asyncio
import logging
import re
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastapi import HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from app.core.cache import TTLCache
from app.core.cache_config import cache_key, view_ttl
from app.core.constants import (
    BudgetEntryTypeEnum, CacheViewEnum, TaskPriorityEnum, TaskStatusEnum, UNCATEGORIZED,
)
from app.core.database import SessionLocal
from app.crud.budget_entry import budget_entry as crud_budget_entry
from app.crud.class_entry import class_entry as crud_class_entry
from app.crud.planner_task import planner_task as crud_planner_task
from app.crud.wellness import study_session as crud_study_session
from app.crud.wellness import wellness_entry as crud_wellness_entry
from app.schemas.budget_entry import BudgetEntry
from app.schemas.class_entry import ClassEntry
from app.schemas.dashboard import (
    BudgetSummary, ClassesSummary, DashboardSummary, PlannerSummary, QuickStats, WeeklyData, WellnessSummary,
)
from app.schemas.planner_task import PlannerTask
from app.schemas.wellness import StudySession, WellnessEntry

logger = logging.getLogger(__name__)

DAY_NAME_TO_INDEX = {
    "sun": 0, "sunday": 0,
    "mon": 1, "monday": 1,
    "tue": 2, "tuesday": 2,
    "wed": 3, "wednesday": 3,
    "thu": 4, "thursday": 4,
    "fri": 5, "friday": 5,
    "sat": 6, "saturday": 6,
}

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*(am|pm))?$")

WELLNESS_WINDOW = 7
RECENT_TRANSACTIONS = 5
UPCOMING_TASKS = 5
WEEKLY_WINDOW = timedelta(days=7)
EPOCH = datetime(1970, 1, 1)


def day_name_to_index(value: Any) -> Optional[int]:
    """Weekday index (Sunday=0) for a full or 3-letter day name, any case."""
    if value is None:
        return None
    name = str(value).strip().lower()
    if name in DAY_NAME_TO_INDEX:
        return DAY_NAME_TO_INDEX[name]
    if len(name) >= 3 and name[:3] in DAY_NAME_TO_INDEX:
        return DAY_NAME_TO_INDEX[name[:3]]
    return None


def parse_time_to_minutes(value: Any) -> Optional[int]:
    """Minutes since midnight for ``H:MM``, ``HH:MM`` or ``H:MM am/pm``."""
    if not isinstance(value, str):
        return None
    match = TIME_PATTERN.match(value.strip().lower())
    if not match:
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = match.group(3)
    if meridiem == "pm" and hours != 12:
        hours += 12
    elif meridiem == "am" and hours == 12:
        hours = 0
    return hours * 60 + minutes


def weekday_index(moment: datetime) -> int:
    return (moment.weekday() + 1) % 7


def resolve_class_day(entry: ClassEntry) -> Optional[int]:
    """Stored day index when valid, otherwise the parsed day name."""
    day_index = entry.day_index
    if isinstance(day_index, int) and not isinstance(day_index, bool) and 0 <= day_index <= 6:
        return day_index
    if entry.day:
        return day_name_to_index(entry.day)
    return None


def _naive(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    return moment


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0


def summarize_classes(classes: List[ClassEntry], now: datetime) -> ClassesSummary:
    today = weekday_index(now)
    now_minutes = now.hour * 60 + now.minute

    today_classes = [entry for entry in classes if resolve_class_day(entry) == today]

    upcoming = []
    for entry in today_classes:
        start = parse_time_to_minutes(entry.start_time)
        if start is not None and start > now_minutes:
            upcoming.append((start, entry))
    upcoming.sort(key=lambda pair: pair[0])

    return ClassesSummary(
        total=len(classes),
        today_classes=today_classes,
        next_class=upcoming[0][1] if upcoming else None,
    )


def summarize_budget(entries: List[BudgetEntry]) -> BudgetSummary:
    total_income = sum(entry.amount or 0 for entry in entries if entry.type == BudgetEntryTypeEnum.INCOME.value)
    total_expenses = sum(entry.amount or 0 for entry in entries if entry.type == BudgetEntryTypeEnum.EXPENSE.value)
    return BudgetSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        recent_transactions=entries[:RECENT_TRANSACTIONS],
    )


def expenses_by_category(entries: Iterable[BudgetEntry]) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for entry in entries:
        if entry.type != BudgetEntryTypeEnum.EXPENSE.value:
            continue
        totals[entry.category or UNCATEGORIZED] += entry.amount or 0
    return dict(totals)


def summarize_planner(tasks: List[PlannerTask], now: datetime) -> PlannerSummary:
    completed = TaskStatusEnum.COMPLETED.value
    pending = [task for task in tasks if task.status != completed]

    # missing due dates sort as the epoch, i.e. ahead of everything else
    upcoming = sorted(pending, key=lambda task: _naive(task.due_date) if task.due_date else EPOCH)

    return PlannerSummary(
        total_tasks=len(tasks),
        completed_tasks=len(tasks) - len(pending),
        pending_tasks=len(pending),
        high_priority_tasks=sum(1 for task in pending if task.priority == TaskPriorityEnum.HIGH.value),
        overdue_tasks=sum(1 for task in pending if task.due_date and _naive(task.due_date) < now),
        upcoming_tasks=upcoming[:UPCOMING_TASKS],
    )


def summarize_wellness(entries: List[WellnessEntry]) -> WellnessSummary:
    return WellnessSummary(
        total_entries=len(entries),
        average_mood=_mean([entry.mood or 0 for entry in entries]),
        sleep_hours=_mean([entry.sleep_hours or 0 for entry in entries]),
        study_hours=_mean([entry.study_hours or 0 for entry in entries]),
        last_entry=entries[0] if entries else None,
    )


def summarize_week(
    sessions: List[StudySession], budget_entries: List[BudgetEntry], now: datetime
) -> WeeklyData:
    window_start = now - WEEKLY_WINDOW

    week_sessions = [session for session in sessions if _naive(session.date) >= window_start]

    expenses: Dict[str, float] = defaultdict(float)
    for entry in budget_entries:
        if entry.type != BudgetEntryTypeEnum.EXPENSE.value or not entry.date:
            continue
        entry_date = _naive(entry.date)
        if entry_date >= window_start:
            expenses[entry_date.date().isoformat()] += entry.amount or 0

    return WeeklyData(study_sessions=week_sessions, expenses=dict(expenses))


def compose_dashboard(
    *,
    classes: List[ClassEntry],
    budget_entries: List[BudgetEntry],
    tasks: List[PlannerTask],
    wellness_entries: List[WellnessEntry],
    study_sessions: List[StudySession],
    now: datetime,
) -> DashboardSummary:
    classes_summary = summarize_classes(classes, now)
    budget_summary = summarize_budget(budget_entries)
    planner_summary = summarize_planner(tasks, now)
    weekly_data = summarize_week(study_sessions, budget_entries, now)

    return DashboardSummary(
        classes=classes_summary,
        budget=budget_summary,
        expenses_by_category=expenses_by_category(budget_entries),
        planner=planner_summary,
        wellness=summarize_wellness(wellness_entries),
        weekly_data=weekly_data,
        quick_stats=QuickStats(
            total_classes=classes_summary.total,
            balance=budget_summary.balance,
            pending_tasks=planner_summary.pending_tasks,
            study_hours_this_week=sum(session.duration or 0 for session in weekly_data.study_sessions),
        ),
        timestamp=now,
    )


class DashboardService:
    def __init__(self, session_factory: Callable = SessionLocal, clock: Callable[[], datetime] = datetime.now):
        self.session_factory = session_factory
        self.clock = clock

    def _read(self, crud, schema, user_id: str, limit: Optional[int] = None) -> list:
        db = self.session_factory()
        try:
            rows = crud.get_multi_by_user(db, user_id=user_id, limit=limit)
            return [schema.model_validate(row) for row in rows]
        finally:
            db.close()

    async def _fetch_collections(self, user_id: str) -> Dict[str, list]:
        classes, budget_entries, tasks, wellness_entries, study_sessions = await asyncio.gather(
            run_in_threadpool(self._read, crud_class_entry, ClassEntry, user_id),
            run_in_threadpool(self._read, crud_budget_entry, BudgetEntry, user_id),
            run_in_threadpool(self._read, crud_planner_task, PlannerTask, user_id),
            run_in_threadpool(self._read, crud_wellness_entry, WellnessEntry, user_id, WELLNESS_WINDOW),
            run_in_threadpool(self._read, crud_study_session, StudySession, user_id),
        )
        return {
            "classes": classes,
            "budget_entries": budget_entries,
            "tasks": tasks,
            "wellness_entries": wellness_entries,
            "study_sessions": study_sessions,
        }

    async def get_dashboard_summary(
        self, cache: TTLCache, user_id: str, request: Optional[Request] = None
    ) -> DashboardSummary:
        key = cache_key(CacheViewEnum.DASHBOARD_SUMMARY, user_id)

        cached_value = cache.get(key)
        if cached_value is not None:
            if request:
                request.state.cache_status = "HIT"
            logger.debug(f"Cache HIT for key: {key}")
            return cached_value

        try:
            collections = await self._fetch_collections(user_id)
            summary = compose_dashboard(now=self.clock(), **collections)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Error fetching dashboard summary for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error fetching dashboard data",
            )

        cache.set(key, summary, ttl=view_ttl(CacheViewEnum.DASHBOARD_SUMMARY))
        if request:
            request.state.cache_status = "MISS"
        logger.debug(f"Cache MISS for key: {key}")
        return summary


dashboard_service = DashboardService()
