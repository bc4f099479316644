from app.crud.base import CRUDBase
from app.models.budget_entry import BudgetEntry
from app.schemas.budget_entry import BudgetEntryCreate, BudgetEntryUpdate

class CRUDBudgetEntry(CRUDBase[BudgetEntry, BudgetEntryCreate, BudgetEntryUpdate]):
    default_order = (BudgetEntry.date.desc(), BudgetEntry.created_at.desc())

budget_entry = CRUDBudgetEntry(BudgetEntry)
