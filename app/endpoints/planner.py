from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.schemas.planner_task import PlannerTask, PlannerTaskCreate, PlannerTaskUpdate
from app.schemas.response import APIResponse
from app.services.planner import planner_service
from app.utils import deps
from app.utils.cache_invalidation import CacheInvalidator

router = APIRouter()

@router.get("/", response_model=APIResponse[List[PlannerTask]])
def list_planner_tasks(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = planner_service.list_tasks(db, cache, user_id, request=request)
    return APIResponse(message="Planner tasks fetched successfully", data=data)

@router.post("/", response_model=APIResponse[PlannerTask], status_code=status.HTTP_201_CREATED)
def create_planner_task(
    task_in: PlannerTaskCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = planner_service.create_task(db, invalidator, user_id, task_in)
    return APIResponse(message="Planner task created successfully", data=data)

@router.put("/{task_id}", response_model=APIResponse[PlannerTask])
def update_planner_task(
    task_id: int,
    task_in: PlannerTaskUpdate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = planner_service.update_task(db, invalidator, user_id, task_id, task_in)
    return APIResponse(message="Planner task updated successfully", data=data)

@router.delete("/{task_id}", response_model=APIResponse[None])
def delete_planner_task(
    task_id: int,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    planner_service.delete_task(db, invalidator, user_id, task_id)
    return APIResponse(message="Planner task deleted successfully")
