from enum import Enum


WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

class CacheViewEnum(str, Enum):
    CLASSES = "classes"
    BUDGET = "budget"
    BUDGET_SUMMARY = "summary"
    PLANNER = "planner"
    STUDY_GOALS = "study-goals"
    DASHBOARD_SUMMARY = "dashboard-summary"
    QUIZ_STATS = "quiz-stats"
    QUIZ_PERFORMANCE = "quiz-performance"

class MutationEnum(str, Enum):
    CLASS_CHANGED = "class_changed"
    BUDGET_CHANGED = "budget_changed"
    PLANNER_CHANGED = "planner_changed"
    STUDY_SESSION_RECORDED = "study_session_recorded"
    WELLNESS_RECORDED = "wellness_recorded"
    STUDY_GOAL_CREATED = "study_goal_created"
    QUIZ_RESULT_CHANGED = "quiz_result_changed"

class BudgetEntryTypeEnum(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"

class TaskStatusEnum(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

class TaskPriorityEnum(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class PerformanceRatingEnum(str, Enum):
    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"
    NEEDS_IMPROVEMENT = "Needs Improvement"

class TrendEnum(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"

DEFAULT_DIFFICULTY = "medium"
UNKNOWN_SUBJECT = "Unknown"
UNCATEGORIZED = "Uncategorized"
DEFAULT_CLASS_COLOR = "#45b7d1"
