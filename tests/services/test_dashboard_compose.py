from datetime import datetime, timedelta

import pytest

from app.schemas.budget_entry import BudgetEntry
from app.schemas.class_entry import ClassEntry
from app.schemas.planner_task import PlannerTask
from app.schemas.wellness import StudySession, WellnessEntry
from app.services.dashboard import (
    compose_dashboard, day_name_to_index, expenses_by_category, parse_time_to_minutes, resolve_class_day,
    summarize_budget, summarize_classes, summarize_planner, summarize_wellness, summarize_week, weekday_index,
)

# a Wednesday, 10:00 local time
NOW = datetime(2026, 10, 21, 10, 0)


def make_class(id=1, **overrides):
    data = dict(id=id, user_id="u1", subject="Biology", day=None, day_index=None, start_time="09:00", end_time="10:00")
    data.update(overrides)
    return ClassEntry(**data)


def make_budget(id=1, **overrides):
    data = dict(id=id, user_id="u1", type="expense", amount=10, category="Food", date=NOW)
    data.update(overrides)
    return BudgetEntry(**data)


def make_task(id=1, **overrides):
    data = dict(id=id, user_id="u1", title=f"Task {id}", status="pending", priority="medium", due_date=NOW + timedelta(days=1))
    data.update(overrides)
    return PlannerTask(**data)


def make_session(id=1, **overrides):
    data = dict(id=id, user_id="u1", subject="Physics", duration=1, date=NOW)
    data.update(overrides)
    return StudySession(**data)


def make_wellness(id=1, **overrides):
    data = dict(id=id, user_id="u1", mood=4, sleep_hours=8, study_hours=2, date=NOW)
    data.update(overrides)
    return WellnessEntry(**data)


def test_reference_day_is_wednesday():
    assert weekday_index(NOW) == 3


@pytest.mark.parametrize("name,expected", [
    ("Sunday", 0), ("monday", 1), ("TUE", 2), ("Wed", 3), ("thursday", 4), ("Fri", 5), ("saturday", 6),
    ("Thurs", 4), ("", None), ("Someday", None), (None, None),
])
def test_day_name_to_index(name, expected):
    assert day_name_to_index(name) == expected


@pytest.mark.parametrize("value,expected", [
    ("09:00", 540), ("9:05", 545), ("14:30", 870), ("8:00am", 480), ("8:00 PM", 1200),
    ("12:15am", 15), ("12:15pm", 735), ("noon", None), ("", None), (None, None), (900, None),
])
def test_parse_time_to_minutes(value, expected):
    assert parse_time_to_minutes(value) == expected


def test_stored_day_index_wins_over_day_name():
    assert resolve_class_day(make_class(day_index=3, day="Friday")) == 3


def test_day_name_used_when_index_missing_or_invalid():
    assert resolve_class_day(make_class(day="Thursday")) == 4
    assert resolve_class_day(make_class(day_index=9, day="Thursday")) == 4


def test_class_with_no_resolvable_day_is_never_today():
    assert resolve_class_day(make_class(day="whenever")) is None
    summary = summarize_classes([make_class(day="whenever")], NOW)
    assert summary.total == 1
    assert summary.today_classes == []


def test_today_classes_use_index_then_name():
    by_index = make_class(id=1, day_index=3)
    by_name = make_class(id=2, day="Thursday")
    neither = make_class(id=3)

    wednesday = summarize_classes([by_index, by_name, neither], NOW)
    thursday = summarize_classes([by_index, by_name, neither], NOW + timedelta(days=1))

    assert [entry.id for entry in wednesday.today_classes] == [1]
    assert [entry.id for entry in thursday.today_classes] == [2]


def test_next_class_is_earliest_start_after_now():
    classes = [
        make_class(id=1, day_index=3, start_time="09:00"),
        make_class(id=2, day_index=3, start_time="14:30"),
        make_class(id=3, day_index=3, start_time="8:00am"),
        make_class(id=4, day_index=3, start_time="3:00pm"),
        make_class(id=5, day_index=3, start_time="TBD"),
    ]
    summary = summarize_classes(classes, NOW)

    assert len(summary.today_classes) == 5
    assert summary.next_class.id == 2
    assert summary.next_class.start_time == "14:30"


def test_next_class_absent_when_all_have_started():
    summary = summarize_classes([make_class(day_index=3, start_time="10:00")], NOW)
    assert summary.next_class is None


def test_budget_totals_and_balance():
    entries = [
        make_budget(id=1, type="income", amount=500, category="Job"),
        make_budget(id=2, type="expense", amount=200, category="Rent"),
    ]
    summary = summarize_budget(entries)

    assert summary.total_income == 500
    assert summary.total_expenses == 200
    assert summary.balance == 300


def test_recent_transactions_are_first_five_in_read_order():
    entries = [make_budget(id=i) for i in range(1, 8)]
    summary = summarize_budget(entries)
    assert [entry.id for entry in summary.recent_transactions] == [1, 2, 3, 4, 5]


def test_expenses_by_category_buckets_missing_category():
    entries = [
        make_budget(id=1, amount=12, category="Food"),
        make_budget(id=2, amount=8, category="Food"),
        make_budget(id=3, amount=5, category=None),
        make_budget(id=4, amount=5, category=""),
        make_budget(id=5, type="income", amount=100, category="Food"),
    ]
    assert expenses_by_category(entries) == {"Food": 20, "Uncategorized": 10}


def test_planner_counts():
    tasks = [
        make_task(id=1, status="completed", priority="high"),
        make_task(id=2, priority="high", due_date=NOW - timedelta(days=2)),
        make_task(id=3, priority="low", due_date=NOW + timedelta(days=3)),
        make_task(id=4, status="in_progress", priority="high", due_date=NOW + timedelta(hours=1)),
    ]
    summary = summarize_planner(tasks, NOW)

    assert summary.total_tasks == 4
    assert summary.completed_tasks == 1
    assert summary.pending_tasks == 3
    assert summary.high_priority_tasks == 2
    assert summary.overdue_tasks == 1
    assert summary.pending_tasks + summary.completed_tasks == summary.total_tasks


def test_upcoming_tasks_sorted_by_due_date_with_missing_dates_first():
    tasks = [
        make_task(id=1, due_date=NOW + timedelta(days=5)),
        make_task(id=2, due_date=None),
        make_task(id=3, due_date=NOW + timedelta(days=1)),
        make_task(id=4, due_date=NOW - timedelta(days=1)),
        make_task(id=5, due_date=NOW + timedelta(days=2)),
        make_task(id=6, due_date=NOW + timedelta(days=9)),
        make_task(id=7, status="completed", due_date=NOW - timedelta(days=30)),
    ]
    summary = summarize_planner(tasks, NOW)

    assert [task.id for task in summary.upcoming_tasks] == [2, 4, 3, 5, 1]
    # a task without a due date is never overdue
    assert summary.overdue_tasks == 1


def test_wellness_defaults_to_zero_without_entries():
    summary = summarize_wellness([])
    assert summary.total_entries == 0
    assert summary.average_mood == 0
    assert summary.sleep_hours == 0
    assert summary.study_hours == 0
    assert summary.last_entry is None


def test_wellness_means_and_last_entry():
    entries = [
        make_wellness(id=2, mood=5, sleep_hours=6, study_hours=4),
        make_wellness(id=1, mood=3, sleep_hours=8, study_hours=2),
    ]
    summary = summarize_wellness(entries)
    assert summary.average_mood == 4
    assert summary.sleep_hours == 7
    assert summary.study_hours == 3
    assert summary.last_entry.id == 2


def test_weekly_window_filters_sessions_and_groups_expenses_by_day():
    sessions = [
        make_session(id=1, duration=2, date=NOW - timedelta(days=1)),
        make_session(id=2, duration=1.5, date=NOW - timedelta(days=6, hours=23)),
        make_session(id=3, duration=4, date=NOW - timedelta(days=8)),
    ]
    budget = [
        make_budget(id=1, amount=10, date=datetime(2026, 10, 20, 8, 0)),
        make_budget(id=2, amount=5, date=datetime(2026, 10, 20, 18, 0)),
        make_budget(id=3, amount=99, date=NOW - timedelta(days=10)),
        make_budget(id=4, type="income", amount=300, date=NOW),
    ]
    weekly = summarize_week(sessions, budget, NOW)

    assert [session.id for session in weekly.study_sessions] == [1, 2]
    assert weekly.expenses == {"2026-10-20": 15}


def test_compose_dashboard_quick_stats():
    summary = compose_dashboard(
        classes=[make_class(id=1, day_index=3, start_time="14:30"), make_class(id=2, day_index=1)],
        budget_entries=[make_budget(id=1, type="income", amount=500), make_budget(id=2, amount=200)],
        tasks=[make_task(id=1), make_task(id=2, status="completed")],
        wellness_entries=[make_wellness()],
        study_sessions=[make_session(id=1, duration=2), make_session(id=2, duration=1.5)],
        now=NOW,
    )

    assert summary.quick_stats.total_classes == 2
    assert summary.quick_stats.balance == 300
    assert summary.quick_stats.pending_tasks == 1
    assert summary.quick_stats.study_hours_this_week == 3.5
    assert summary.classes.next_class.id == 1
    assert summary.timestamp == NOW


def test_compose_dashboard_for_empty_user():
    summary = compose_dashboard(
        classes=[], budget_entries=[], tasks=[], wellness_entries=[], study_sessions=[], now=NOW,
    )

    assert summary.classes.total == 0
    assert summary.classes.next_class is None
    assert summary.budget.balance == 0
    assert summary.expenses_by_category == {}
    assert summary.planner.upcoming_tasks == []
    assert summary.wellness.average_mood == 0
    assert summary.weekly_data.expenses == {}
    assert summary.quick_stats.study_hours_this_week == 0


def test_compose_dashboard_is_deterministic_apart_from_timestamp():
    collections = dict(
        classes=[make_class(day_index=3, start_time="11:00")],
        budget_entries=[make_budget(), make_budget(id=2, type="income", amount=40)],
        tasks=[make_task(due_date=None), make_task(id=2)],
        wellness_entries=[make_wellness()],
        study_sessions=[make_session()],
    )
    first = compose_dashboard(now=NOW, **collections)
    second = compose_dashboard(now=NOW + timedelta(seconds=30), **collections)

    assert first.model_dump(exclude={"timestamp"}) == second.model_dump(exclude={"timestamp"})
    assert first.timestamp != second.timestamp
