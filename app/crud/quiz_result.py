from app.crud.base import CRUDBase
from app.models.quiz_result import QuizResult
from app.schemas.quiz_result import QuizResultCreate

class CRUDQuizResult(CRUDBase[QuizResult, QuizResultCreate, QuizResultCreate]):
    default_order = (QuizResult.date.desc(), QuizResult.id.desc())

quiz_result = CRUDQuizResult(QuizResult)
