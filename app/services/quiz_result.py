import math
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.constants import DEFAULT_DIFFICULTY, MutationEnum
from app.crud.quiz_result import quiz_result as crud_quiz_result
from app.schemas.quiz_result import Pagination, QuizHistory, QuizResult, QuizResultCreate, QuizResultSaved
from app.services.quiz_analytics import performance_rating, rate_results
from app.utils.cache_invalidation import CacheInvalidator


class QuizResultService:

    def save_result(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, result_in: QuizResultCreate
    ) -> QuizResultSaved:
        result_data = {
            "topic": (result_in.topic or "").strip(),
            "score": result_in.score,
            "total_questions": result_in.total_questions,
            "percentage": result_in.percentage,
            "type": (result_in.type or "").strip(),
            "difficulty": (result_in.difficulty or DEFAULT_DIFFICULTY).strip(),
            "time_spent": result_in.time_spent or 0,
        }
        new_result = crud_quiz_result.create(db, obj_in=result_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.QUIZ_RESULT_CHANGED, user_id)
        return QuizResultSaved(id=new_result.id, performance_rating=performance_rating(new_result.percentage))

    def get_history(self, db: Session, user_id: str, page: int = 1, limit: int = 20) -> QuizHistory:
        rows = crud_quiz_result.get_multi_by_user(db, user_id=user_id, skip=(page - 1) * limit, limit=limit)
        total = crud_quiz_result.count_by_user(db, user_id=user_id)
        return QuizHistory(
            results=rate_results([QuizResult.model_validate(row) for row in rows]),
            pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
        )

    def delete_result(self, db: Session, invalidator: CacheInvalidator, user_id: str, result_id: int) -> None:
        deleted = crud_quiz_result.delete_for_user(db, id=result_id, user_id=user_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz result not found or unauthorized")
        invalidator.invalidate(MutationEnum.QUIZ_RESULT_CHANGED, user_id)


quiz_result_service = QuizResultService()
