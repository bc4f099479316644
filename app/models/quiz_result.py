from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import DEFAULT_DIFFICULTY

class QuizResult(Base):
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    topic = Column(String, nullable=False, default="")
    score = Column(Float, nullable=False, default=0)
    total_questions = Column(Integer, nullable=False, default=0)
    percentage = Column(Float, nullable=False, default=0)
    type = Column(String, nullable=False, default="")
    difficulty = Column(String, nullable=False, default=DEFAULT_DIFFICULTY)
    time_spent = Column(Float, nullable=False, default=0) # seconds
    date = Column(DateTime, nullable=False, default=datetime.now)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
