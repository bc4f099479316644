from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from app.core.constants import TaskStatusEnum, TaskPriorityEnum

class PlannerTaskCreate(BaseModel):
    title: str = Field(..., min_length=1)
    due_date: datetime
    description: Optional[str] = ""
    status: TaskStatusEnum = Field(default=TaskStatusEnum.PENDING)
    priority: TaskPriorityEnum = Field(default=TaskPriorityEnum.MEDIUM)

class PlannerTaskUpdate(BaseModel):
    title: Optional[str] = None
    due_date: Optional[datetime] = None
    description: Optional[str] = None
    status: Optional[TaskStatusEnum] = None
    priority: Optional[TaskPriorityEnum] = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

class PlannerTask(BaseModel):
    id: int
    user_id: str
    title: str
    description: Optional[str] = ""
    due_date: Optional[datetime] = None
    status: str
    priority: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
