from typing import List, Optional
from fastapi import HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.core.constants import CacheViewEnum, MutationEnum
from app.crud.planner_task import planner_task as crud_planner_task
from app.schemas.planner_task import PlannerTask, PlannerTaskCreate, PlannerTaskUpdate
from app.services.cache_service import cache_service
from app.utils.cache_invalidation import CacheInvalidator


class PlannerService:

    def list_tasks(self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None) -> List[PlannerTask]:
        return cache_service.get_or_compute(
            cache, CacheViewEnum.PLANNER, user_id,
            lambda: [PlannerTask.model_validate(row) for row in crud_planner_task.get_multi_by_user(db, user_id=user_id)],
            request=request,
        )

    def create_task(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, task_in: PlannerTaskCreate
    ) -> PlannerTask:
        task_data = task_in.model_dump()
        task_data["title"] = task_in.title.strip()
        task_data["description"] = (task_in.description or "").strip()
        new_task = crud_planner_task.create(db, obj_in=task_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.PLANNER_CHANGED, user_id)
        return PlannerTask.model_validate(new_task)

    def update_task(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, task_id: int, task_in: PlannerTaskUpdate
    ) -> PlannerTask:
        updated = crud_planner_task.update_for_user(db, id=task_id, user_id=user_id, obj_in=task_in)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Planner task not found or unauthorized")
        invalidator.invalidate(MutationEnum.PLANNER_CHANGED, user_id)
        return PlannerTask.model_validate(updated)

    def delete_task(self, db: Session, invalidator: CacheInvalidator, user_id: str, task_id: int) -> None:
        deleted = crud_planner_task.delete_for_user(db, id=task_id, user_id=user_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Planner task not found or unauthorized")
        invalidator.invalidate(MutationEnum.PLANNER_CHANGED, user_id)


planner_service = PlannerService()
