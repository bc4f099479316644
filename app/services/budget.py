from typing import List, Optional
from fastapi import HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.core.constants import CacheViewEnum, MutationEnum
from app.crud.budget_entry import budget_entry as crud_budget_entry
from app.schemas.budget_entry import BudgetEntry, BudgetEntryCreate, BudgetEntryUpdate, BudgetOverview
from app.services.cache_service import cache_service
from app.services.dashboard import expenses_by_category, summarize_budget
from app.utils.cache_invalidation import CacheInvalidator


class BudgetService:

    def _entries(self, db: Session, user_id: str) -> List[BudgetEntry]:
        return [BudgetEntry.model_validate(row) for row in crud_budget_entry.get_multi_by_user(db, user_id=user_id)]

    def list_entries(self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None) -> List[BudgetEntry]:
        return cache_service.get_or_compute(
            cache, CacheViewEnum.BUDGET, user_id, lambda: self._entries(db, user_id), request=request,
        )

    def get_overview(self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None) -> BudgetOverview:
        def compute() -> BudgetOverview:
            entries = self._entries(db, user_id)
            totals = summarize_budget(entries)
            return BudgetOverview(
                total_income=totals.total_income,
                total_expenses=totals.total_expenses,
                balance=totals.balance,
                expenses_by_category=expenses_by_category(entries),
                entry_count=len(entries),
            )

        return cache_service.get_or_compute(cache, CacheViewEnum.BUDGET_SUMMARY, user_id, compute, request=request)

    def create_entry(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, entry_in: BudgetEntryCreate
    ) -> BudgetEntry:
        entry_data = entry_in.model_dump()
        entry_data["category"] = entry_in.category.strip()
        entry_data["description"] = (entry_in.description or "").strip()
        new_entry = crud_budget_entry.create(db, obj_in=entry_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.BUDGET_CHANGED, user_id)
        return BudgetEntry.model_validate(new_entry)

    def update_entry(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, entry_id: int, entry_in: BudgetEntryUpdate
    ) -> BudgetEntry:
        updated = crud_budget_entry.update_for_user(db, id=entry_id, user_id=user_id, obj_in=entry_in)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget entry not found or unauthorized")
        invalidator.invalidate(MutationEnum.BUDGET_CHANGED, user_id)
        return BudgetEntry.model_validate(updated)

    def delete_entry(self, db: Session, invalidator: CacheInvalidator, user_id: str, entry_id: int) -> None:
        deleted = crud_budget_entry.delete_for_user(db, id=entry_id, user_id=user_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget entry not found or unauthorized")
        invalidator.invalidate(MutationEnum.BUDGET_CHANGED, user_id)


budget_service = BudgetService()
