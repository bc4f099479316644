from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.schemas.class_entry import ClassEntry, ClassEntryCreate, ClassEntryUpdate
from app.schemas.response import APIResponse
from app.services.class_schedule import class_schedule_service
from app.utils import deps
from app.utils.cache_invalidation import CacheInvalidator

router = APIRouter()

@router.get("/", response_model=APIResponse[List[ClassEntry]])
def list_classes(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = class_schedule_service.list_classes(db, cache, user_id, request=request)
    return APIResponse(message="Classes fetched successfully", data=data)

@router.post("/", response_model=APIResponse[ClassEntry], status_code=status.HTTP_201_CREATED)
def create_class(
    class_in: ClassEntryCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = class_schedule_service.create_class(db, invalidator, user_id, class_in)
    return APIResponse(message="Class created successfully", data=data)

@router.put("/{class_id}", response_model=APIResponse[ClassEntry])
def update_class(
    class_id: int,
    class_in: ClassEntryUpdate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = class_schedule_service.update_class(db, invalidator, user_id, class_id, class_in)
    return APIResponse(message="Class updated successfully", data=data)

@router.delete("/{class_id}", response_model=APIResponse[None])
def delete_class(
    class_id: int,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    class_schedule_service.delete_class(db, invalidator, user_id, class_id)
    return APIResponse(message="Class deleted successfully")
