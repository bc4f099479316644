from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import datetime

from app.core.constants import DEFAULT_DIFFICULTY, PerformanceRatingEnum, TrendEnum

class QuizResultCreate(BaseModel):
    topic: Optional[str] = ""
    score: float
    total_questions: int
    percentage: float
    type: Optional[str] = ""
    difficulty: Optional[str] = DEFAULT_DIFFICULTY
    time_spent: Optional[float] = 0

class QuizResult(BaseModel):
    id: int
    user_id: str
    topic: Optional[str] = ""
    score: float
    total_questions: int
    percentage: float
    type: Optional[str] = ""
    difficulty: Optional[str] = DEFAULT_DIFFICULTY
    time_spent: Optional[float] = 0
    date: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class RatedQuizResult(QuizResult):
    performance_rating: PerformanceRatingEnum

class QuizResultSaved(BaseModel):
    id: int
    performance_rating: PerformanceRatingEnum

class Improvement(BaseModel):
    value: int
    trend: TrendEnum
    recent_average: int
    previous_average: int

class DifficultyStats(BaseModel):
    total: int
    total_score: float
    average: int

class SubjectStats(BaseModel):
    subject: str
    total_quizzes: int
    average_score: int
    performance_rating: PerformanceRatingEnum
    best_score: float
    worst_score: float
    trend: List[float] = Field(default_factory=list, description="Three most recent scores")

class PerformanceInsights(BaseModel):
    overall_rating: PerformanceRatingEnum
    average_score: int
    best_score: float
    worst_score: float
    total_quizzes: int
    improvement: Improvement
    difficulty_stats: Dict[str, DifficultyStats]
    consistency: int
    streak: int

class QuizPerformance(BaseModel):
    has_data: bool
    overall_rating: PerformanceRatingEnum
    average_score: int
    total_quizzes: int
    recent_results: List[RatedQuizResult] = Field(default_factory=list)
    performance_insights: Optional[PerformanceInsights] = None
    subject_performance: List[SubjectStats] = Field(default_factory=list)
    time_spent_total: float = 0
    consistency: Optional[int] = None

class QuizStats(BaseModel):
    total_quizzes: int
    average_score: int
    best_score: float
    current_streak: int
    overall_rating: PerformanceRatingEnum

class QuizSummary(BaseModel):
    recent_results: List[RatedQuizResult]
    stats: QuizStats

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

class QuizHistory(BaseModel):
    results: List[RatedQuizResult]
    pagination: Pagination
