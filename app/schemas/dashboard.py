from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime

from app.schemas.class_entry import ClassEntry
from app.schemas.budget_entry import BudgetEntry
from app.schemas.planner_task import PlannerTask
from app.schemas.wellness import WellnessEntry, StudySession

class ClassesSummary(BaseModel):
    total: int
    today_classes: List[ClassEntry]
    next_class: Optional[ClassEntry] = None

class BudgetSummary(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    recent_transactions: List[BudgetEntry]

class PlannerSummary(BaseModel):
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    high_priority_tasks: int
    overdue_tasks: int
    upcoming_tasks: List[PlannerTask]

class WellnessSummary(BaseModel):
    total_entries: int
    average_mood: float
    sleep_hours: float
    study_hours: float
    last_entry: Optional[WellnessEntry] = None

class WeeklyData(BaseModel):
    study_sessions: List[StudySession]
    expenses: Dict[str, float] = Field(description="Expense totals keyed by ISO date")

class QuickStats(BaseModel):
    total_classes: int
    balance: float
    pending_tasks: int
    study_hours_this_week: float

class DashboardSummary(BaseModel):
    """Composed per-user dashboard. Replaced wholesale on recomputation."""
    classes: ClassesSummary
    budget: BudgetSummary
    expenses_by_category: Dict[str, float]
    planner: PlannerSummary
    wellness: WellnessSummary
    weekly_data: WeeklyData
    quick_stats: QuickStats
    timestamp: datetime
