from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.schemas.dashboard import DashboardSummary
from app.schemas.response import APIResponse
from app.schemas.wellness import (
    StudyGoal, StudyGoalCreate, StudySession, StudySessionCreate, WellnessEntry, WellnessEntryCreate,
)
from app.services.dashboard import dashboard_service
from app.services.wellness import wellness_service
from app.utils import deps
from app.utils.cache_invalidation import CacheInvalidator

router = APIRouter()

@router.get("/dashboard", response_model=APIResponse[DashboardSummary])
async def get_dashboard(
    request: Request,
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    """Classes, budget, planner, wellness and weekly study data in one view."""
    data = await dashboard_service.get_dashboard_summary(cache, user_id, request=request)
    return APIResponse(message="Dashboard summary fetched successfully", data=data)

@router.post("/study-session", response_model=APIResponse[StudySession], status_code=status.HTTP_201_CREATED)
def record_study_session(
    session_in: StudySessionCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.record_study_session(db, invalidator, user_id, session_in)
    return APIResponse(message="Study session recorded successfully", data=data)

@router.post("/mood-track", response_model=APIResponse[WellnessEntry], status_code=status.HTTP_201_CREATED)
def record_wellness_entry(
    entry_in: WellnessEntryCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.record_wellness(db, invalidator, user_id, entry_in)
    return APIResponse(message="Wellness entry recorded successfully", data=data)

@router.get("/wellness-history", response_model=APIResponse[List[WellnessEntry]])
def get_wellness_history(
    db: Session = Depends(deps.get_db),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.wellness_history(db, user_id)
    return APIResponse(message="Wellness history fetched successfully", data=data)

@router.get("/study-history", response_model=APIResponse[List[StudySession]])
def get_study_history(
    db: Session = Depends(deps.get_db),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.study_history(db, user_id)
    return APIResponse(message="Study history fetched successfully", data=data)

@router.get("/study-goals", response_model=APIResponse[List[StudyGoal]])
def list_study_goals(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.list_goals(db, cache, user_id, request=request)
    return APIResponse(message="Study goals fetched successfully", data=data)

@router.post("/study-goals", response_model=APIResponse[StudyGoal], status_code=status.HTTP_201_CREATED)
def create_study_goal(
    goal_in: StudyGoalCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = wellness_service.create_goal(db, invalidator, user_id, goal_in)
    return APIResponse(message="Study goal created successfully", data=data)
