from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base

class ClassEntry(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    subject = Column(String, nullable=False)
    instructor = Column(String, nullable=False, default="")
    day = Column(String, nullable=True)
    day_index = Column(Integer, nullable=True) # 0=Sunday ... 6=Saturday
    start_time = Column(String, nullable=True) # "9:00", "14:30", "8:00am"
    end_time = Column(String, nullable=True)
    color = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
