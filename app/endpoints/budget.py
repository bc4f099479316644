from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.schemas.budget_entry import BudgetEntry, BudgetEntryCreate, BudgetEntryUpdate, BudgetOverview
from app.schemas.response import APIResponse
from app.services.budget import budget_service
from app.utils import deps
from app.utils.cache_invalidation import CacheInvalidator

router = APIRouter()

@router.get("/", response_model=APIResponse[List[BudgetEntry]])
def list_budget_entries(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = budget_service.list_entries(db, cache, user_id, request=request)
    return APIResponse(message="Budget entries fetched successfully", data=data)

@router.get("/summary", response_model=APIResponse[BudgetOverview])
def get_budget_summary(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = budget_service.get_overview(db, cache, user_id, request=request)
    return APIResponse(message="Budget summary fetched successfully", data=data)

@router.post("/", response_model=APIResponse[BudgetEntry], status_code=status.HTTP_201_CREATED)
def create_budget_entry(
    entry_in: BudgetEntryCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = budget_service.create_entry(db, invalidator, user_id, entry_in)
    return APIResponse(message="Budget entry created successfully", data=data)

@router.put("/{entry_id}", response_model=APIResponse[BudgetEntry])
def update_budget_entry(
    entry_id: int,
    entry_in: BudgetEntryUpdate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = budget_service.update_entry(db, invalidator, user_id, entry_id, entry_in)
    return APIResponse(message="Budget entry updated successfully", data=data)

@router.delete("/{entry_id}", response_model=APIResponse[None])
def delete_budget_entry(
    entry_id: int,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    budget_service.delete_entry(db, invalidator, user_id, entry_id)
    return APIResponse(message="Budget entry deleted successfully")
