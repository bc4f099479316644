from app.crud.base import CRUDBase
from app.models.planner_task import PlannerTask
from app.schemas.planner_task import PlannerTaskCreate, PlannerTaskUpdate

class CRUDPlannerTask(CRUDBase[PlannerTask, PlannerTaskCreate, PlannerTaskUpdate]):
    default_order = (PlannerTask.due_date.asc(), PlannerTask.created_at.desc())

planner_task = CRUDPlannerTask(PlannerTask)
