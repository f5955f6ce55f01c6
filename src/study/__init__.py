"""Study core: scheduling, answer grading and progress tracking."""

from .grading import AnswerResult, check_answer, check_gloss
from .paradigms import ALL_CATEGORIES, build_table_models
from .parsing import ParseKind, ParseSelection, check_parse
from .quiz import Density, apply_density
from .session import StudySession
from .srs import ReviewCard, is_due, new_card, schedule_review
from .stats import StudyStats, record_review

__all__ = [
    "ALL_CATEGORIES",
    "AnswerResult",
    "Density",
    "ParseKind",
    "ParseSelection",
    "ReviewCard",
    "StudySession",
    "StudyStats",
    "apply_density",
    "build_table_models",
    "check_answer",
    "check_gloss",
    "check_parse",
    "is_due",
    "new_card",
    "record_review",
    "schedule_review",
]
