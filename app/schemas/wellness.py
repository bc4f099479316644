from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class WellnessEntryCreate(BaseModel):
    mood: float
    sleep_hours: Optional[float] = 0
    study_hours: Optional[float] = 0
    notes: Optional[str] = ""

class WellnessEntry(BaseModel):
    id: int
    user_id: str
    mood: Optional[float] = None
    sleep_hours: float = 0
    study_hours: float = 0
    notes: Optional[str] = ""
    date: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class StudySessionCreate(BaseModel):
    subject: str = Field(..., min_length=1)
    duration: float = Field(..., ge=0, description="Session length in hours")
    topic: Optional[str] = ""
    efficiency: Optional[float] = 0

class StudySession(BaseModel):
    id: int
    user_id: str
    subject: str
    duration: float = 0
    topic: Optional[str] = ""
    efficiency: Optional[float] = 0
    date: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class StudyGoalCreate(BaseModel):
    title: str = Field(..., min_length=1)
    subject: Optional[str] = ""
    target_hours: float = Field(default=0, ge=0)
    deadline: Optional[datetime] = None

class StudyGoal(BaseModel):
    id: int
    user_id: str
    title: str
    subject: Optional[str] = ""
    target_hours: float = 0
    deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
