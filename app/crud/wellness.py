from app.crud.base import CRUDBase
from app.models.wellness_entry import WellnessEntry
from app.models.study_session import StudySession
from app.models.study_goal import StudyGoal
from app.schemas.wellness import WellnessEntryCreate, StudySessionCreate, StudyGoalCreate

class CRUDWellnessEntry(CRUDBase[WellnessEntry, WellnessEntryCreate, WellnessEntryCreate]):
    default_order = (WellnessEntry.date.desc(),)

class CRUDStudySession(CRUDBase[StudySession, StudySessionCreate, StudySessionCreate]):
    default_order = (StudySession.date.desc(),)

class CRUDStudyGoal(CRUDBase[StudyGoal, StudyGoalCreate, StudyGoalCreate]):
    default_order = (StudyGoal.created_at.desc(), StudyGoal.id.desc())

wellness_entry = CRUDWellnessEntry(WellnessEntry)
study_session = CRUDStudySession(StudySession)
study_goal = CRUDStudyGoal(StudyGoal)
