import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# settings are read once at import time, so the test environment must be in place first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["TESTING"] = "true"
os.environ["ALLOW_DEV_USER_HEADER"] = "true"
os.environ.pop("SECRET_KEY", None)

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

import main
from app.core.cache import TTLCache
from app.core.constants import DEFAULT_CLASS_COLOR
from app.core.database import Base, SessionLocal, engine, init_db
from app.crud.budget_entry import budget_entry as crud_budget_entry
from app.crud.class_entry import class_entry as crud_class_entry
from app.crud.planner_task import planner_task as crud_planner_task
from app.crud.quiz_result import quiz_result as crud_quiz_result
from app.crud.wellness import study_session as crud_study_session
from app.crud.wellness import wellness_entry as crud_wellness_entry


@pytest.fixture(scope="session")
def database_engine():
    init_db()
    yield engine
    engine.dispose()
    if os.path.exists("./test.db"):
        os.remove("./test.db")


@pytest.fixture(scope="function")
def db_session(database_engine):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        with database_engine.begin() as connection:
            for table in reversed(Base.metadata.sorted_tables):
                connection.execute(table.delete())


@pytest.fixture(scope="function")
def cache():
    fresh = TTLCache(default_ttl=60)
    main.app.state.cache = fresh
    return fresh


@pytest.fixture(scope="function")
def client(db_session, cache):
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture
def user_id():
    return f"user-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def other_user_id():
    return f"user-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def auth_headers(user_id):
    return {"X-User-Id": user_id}


@pytest.fixture
def other_headers(other_user_id):
    return {"X-User-Id": other_user_id}


@pytest.fixture
def class_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {
            "subject": "Calculus",
            "instructor": "Dr. Reyes",
            "day": "Monday",
            "day_index": 1,
            "start_time": "09:00",
            "end_time": "10:30",
            "color": DEFAULT_CLASS_COLOR,
        }
        data.update(overrides)
        return crud_class_entry.create(db_session, obj_in=data, user_id=user_id)
    return _create


@pytest.fixture
def budget_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {
            "type": "expense",
            "amount": 10.0,
            "category": "Food",
            "description": "",
            "date": datetime.now(),
        }
        data.update(overrides)
        return crud_budget_entry.create(db_session, obj_in=data, user_id=user_id)
    return _create


@pytest.fixture
def task_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {
            "title": "Read chapter 4",
            "description": "",
            "due_date": datetime.now(),
            "status": "pending",
            "priority": "medium",
        }
        data.update(overrides)
        return crud_planner_task.create(db_session, obj_in=data, user_id=user_id)
    return _create


@pytest.fixture
def wellness_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {"mood": 4, "sleep_hours": 7, "study_hours": 3, "notes": ""}
        data.update(overrides)
        return crud_wellness_entry.create(db_session, obj_in=data, user_id=user_id)
    return _create


@pytest.fixture
def study_session_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {"subject": "Physics", "duration": 1.5, "topic": "", "efficiency": 0}
        data.update(overrides)
        return crud_study_session.create(db_session, obj_in=data, user_id=user_id)
    return _create


@pytest.fixture
def quiz_factory(db_session):
    def _create(user_id: str, **overrides):
        data = {
            "topic": "Algebra",
            "score": 8,
            "total_questions": 10,
            "percentage": 80,
            "type": "multiple-choice",
            "difficulty": "medium",
            "time_spent": 120,
        }
        data.update(overrides)
        return crud_quiz_result.create(db_session, obj_in=data, user_id=user_id)
    return _create
