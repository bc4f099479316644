from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional
from datetime import datetime

from app.core.constants import BudgetEntryTypeEnum

class BudgetEntryCreate(BaseModel):
    type: BudgetEntryTypeEnum
    amount: float = Field(..., gt=0, description="Must be a positive number")
    category: str = Field(..., min_length=1)
    date: datetime
    description: Optional[str] = ""

class BudgetEntryUpdate(BaseModel):
    type: Optional[BudgetEntryTypeEnum] = None
    amount: Optional[float] = Field(None, gt=0)
    category: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None

    @field_validator("type", "amount", "category", "description")
    @classmethod
    def reject_null(cls, v):
        # omitted fields keep their value; an explicit null would clear a required column
        if v is None:
            raise ValueError("may not be null")
        return v

class BudgetEntry(BaseModel):
    id: int
    user_id: str
    type: str
    amount: float
    category: Optional[str] = None
    description: Optional[str] = ""
    date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class BudgetOverview(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    expenses_by_category: Dict[str, float]
    entry_count: int
