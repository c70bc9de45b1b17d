"""
Package des evaluations de cours.

Une classe d'operation par cas d'utilisation, et une facade
(CohortCourseEvaluationService) qui les execute dans une transaction.
"""

from .create_evaluation import CreateCohortCourseEvaluationOperation
from .dataclasses import (
    NOT_AVAILABLE,
    CategoryResponseRecord,
    CohortCourseEvaluationRecord,
    CohortCourseRecord,
    QuestionResponseRecord,
)
from .get_cohort_courses_for_trainer import (
    TRAINER_EVALUATION,
    GetCohortCoursesForTrainerOperation,
)
from .get_current_evaluation_for_trainee import GetCurrentCohortCourseEvaluationForTraineeOperation
from .get_evaluation import GetCohortCourseEvaluationOperation
from .get_evaluations_for_course import GetCohortCourseEvaluationsForCourseOperation
from .get_evaluations_for_trainee import GetCohortCourseEvaluationsForTraineeOperation
from .mapper import RecordMapper
from .service import CohortCourseEvaluationService
from .update_evaluation import UpdateCohortCourseEvaluationOperation

__all__ = [
    "NOT_AVAILABLE",
    "TRAINER_EVALUATION",
    "CategoryResponseRecord",
    "CohortCourseEvaluationRecord",
    "CohortCourseRecord",
    "QuestionResponseRecord",
    "RecordMapper",
    "CohortCourseEvaluationService",
    "CreateCohortCourseEvaluationOperation",
    "GetCohortCourseEvaluationOperation",
    "GetCohortCourseEvaluationsForCourseOperation",
    "GetCohortCourseEvaluationsForTraineeOperation",
    "GetCohortCoursesForTrainerOperation",
    "GetCurrentCohortCourseEvaluationForTraineeOperation",
    "UpdateCohortCourseEvaluationOperation",
]
