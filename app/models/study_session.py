from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.sql import func
from app.core.database import Base

class StudySession(Base):
    __tablename__ = "study_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    subject = Column(String, nullable=False)
    duration = Column(Float, nullable=False, default=0) # hours
    topic = Column(String, nullable=False, default="")
    efficiency = Column(Float, nullable=False, default=0)
    date = Column(DateTime, nullable=False, default=datetime.now)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
