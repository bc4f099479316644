from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.schemas.quiz_result import QuizHistory, QuizPerformance, QuizResultCreate, QuizResultSaved, QuizSummary
from app.schemas.response import APIResponse
from app.services.quiz_analytics import quiz_analytics_service
from app.services.quiz_result import quiz_result_service
from app.utils import deps
from app.utils.cache_invalidation import CacheInvalidator

router = APIRouter()

@router.post("/results", response_model=APIResponse[QuizResultSaved], status_code=status.HTTP_201_CREATED)
def save_quiz_result(
    result_in: QuizResultCreate,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = quiz_result_service.save_result(db, invalidator, user_id, result_in)
    return APIResponse(message="Quiz result saved successfully", data=data)

@router.get("/results/performance", response_model=APIResponse[QuizPerformance])
def get_quiz_performance(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    """Full analytics over the user's entire quiz history."""
    data = quiz_analytics_service.get_performance(db, cache, user_id, request=request)
    message = "Quiz performance fetched successfully" if data.has_data else "No quiz results found"
    return APIResponse(message=message, data=data)

@router.get("/results/summary", response_model=APIResponse[QuizSummary])
def get_quiz_summary(
    request: Request,
    db: Session = Depends(deps.get_db),
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = quiz_analytics_service.get_summary(db, cache, user_id, request=request)
    return APIResponse(message="Quiz summary fetched successfully", data=data)

@router.get("/results/history", response_model=APIResponse[QuizHistory])
def get_quiz_history(
    db: Session = Depends(deps.get_db),
    user_id: str = Depends(deps.get_current_user_id),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
):
    data = quiz_result_service.get_history(db, user_id, page=page, limit=limit)
    return APIResponse(message="Quiz history fetched successfully", data=data)

@router.delete("/results/{result_id}", response_model=APIResponse[None])
def delete_quiz_result(
    result_id: int,
    db: Session = Depends(deps.get_db),
    invalidator: CacheInvalidator = Depends(deps.get_cache_invalidator),
    user_id: str = Depends(deps.get_current_user_id),
):
    quiz_result_service.delete_result(db, invalidator, user_id, result_id)
    return APIResponse(message="Quiz result deleted successfully")
