from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.sql import func
from app.core.database import Base

class WellnessEntry(Base):
    __tablename__ = "wellness_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    mood = Column(Float, nullable=True)
    sleep_hours = Column(Float, nullable=False, default=0)
    study_hours = Column(Float, nullable=False, default=0)
    notes = Column(String, nullable=False, default="")
    date = Column(DateTime, nullable=False, default=datetime.now)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
