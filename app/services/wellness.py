from typing import List, Optional
from fastapi import Request
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.core.constants import CacheViewEnum, MutationEnum
from app.crud.wellness import study_goal as crud_study_goal
from app.crud.wellness import study_session as crud_study_session
from app.crud.wellness import wellness_entry as crud_wellness_entry
from app.schemas.wellness import (
    StudyGoal, StudyGoalCreate, StudySession, StudySessionCreate, WellnessEntry, WellnessEntryCreate,
)
from app.services.cache_service import cache_service
from app.utils.cache_invalidation import CacheInvalidator

HISTORY_LIMIT = 30


class WellnessService:

    def record_study_session(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, session_in: StudySessionCreate
    ) -> StudySession:
        session_data = {
            "subject": session_in.subject.strip(),
            "duration": session_in.duration,
            "topic": (session_in.topic or "").strip(),
            "efficiency": session_in.efficiency or 0,
        }
        new_session = crud_study_session.create(db, obj_in=session_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.STUDY_SESSION_RECORDED, user_id)
        return StudySession.model_validate(new_session)

    def record_wellness(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, entry_in: WellnessEntryCreate
    ) -> WellnessEntry:
        entry_data = {
            "mood": entry_in.mood,
            "sleep_hours": entry_in.sleep_hours or 0,
            "study_hours": entry_in.study_hours or 0,
            "notes": (entry_in.notes or "").strip(),
        }
        new_entry = crud_wellness_entry.create(db, obj_in=entry_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.WELLNESS_RECORDED, user_id)
        return WellnessEntry.model_validate(new_entry)

    def wellness_history(self, db: Session, user_id: str) -> List[WellnessEntry]:
        rows = crud_wellness_entry.get_multi_by_user(db, user_id=user_id, limit=HISTORY_LIMIT)
        return [WellnessEntry.model_validate(row) for row in rows]

    def study_history(self, db: Session, user_id: str) -> List[StudySession]:
        rows = crud_study_session.get_multi_by_user(db, user_id=user_id, limit=HISTORY_LIMIT)
        return [StudySession.model_validate(row) for row in rows]

    def list_goals(self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None) -> List[StudyGoal]:
        return cache_service.get_or_compute(
            cache, CacheViewEnum.STUDY_GOALS, user_id,
            lambda: [StudyGoal.model_validate(row) for row in crud_study_goal.get_multi_by_user(db, user_id=user_id)],
            request=request,
        )

    def create_goal(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, goal_in: StudyGoalCreate
    ) -> StudyGoal:
        goal_data = goal_in.model_dump()
        goal_data["title"] = goal_in.title.strip()
        goal_data["subject"] = (goal_in.subject or "").strip()
        new_goal = crud_study_goal.create(db, obj_in=goal_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.STUDY_GOAL_CREATED, user_id)
        return StudyGoal.model_validate(new_goal)


wellness_service = WellnessService()
