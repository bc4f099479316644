from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import TaskStatusEnum, TaskPriorityEnum

class PlannerTask(Base):
    __tablename__ = "planner_tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    due_date = Column(DateTime, nullable=True)
    status = Column(String, nullable=False, default=TaskStatusEnum.PENDING.value)
    priority = Column(String, nullable=False, default=TaskPriorityEnum.MEDIUM.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
