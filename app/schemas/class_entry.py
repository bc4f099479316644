from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class ClassEntryBase(BaseModel):
    subject: str = Field(..., min_length=1)
    instructor: Optional[str] = ""
    day: str = Field(..., min_length=1)
    start_time: str = Field(..., min_length=1)
    end_time: str = Field(..., min_length=1)
    color: Optional[str] = None

class ClassEntryCreate(ClassEntryBase):
    pass

class ClassEntryUpdate(BaseModel):
    subject: Optional[str] = None
    instructor: Optional[str] = None
    day: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    color: Optional[str] = None

    @field_validator("subject", "instructor", "day", "start_time", "end_time")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

class ClassEntry(BaseModel):
    id: int
    user_id: str
    subject: str
    instructor: Optional[str] = ""
    day: Optional[str] = None
    day_index: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    color: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
