"""
Facade des evaluations de cours.

Chaque methode delegue a une operation dediee, dans une transaction :
la session est validee au retour de l'operation et annulee si elle leve
une exception, l'exception etant propagee telle quelle.
"""

from functools import wraps

from loguru import logger
from sqlmodel import Session

from src.services.evaluation.create_evaluation import CreateCohortCourseEvaluationOperation
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord, CohortCourseRecord
from src.services.evaluation.get_cohort_courses_for_trainer import (
    GetCohortCoursesForTrainerOperation,
)
from src.services.evaluation.get_current_evaluation_for_trainee import (
    GetCurrentCohortCourseEvaluationForTraineeOperation,
)
from src.services.evaluation.get_evaluation import GetCohortCourseEvaluationOperation
from src.services.evaluation.get_evaluations_for_course import (
    GetCohortCourseEvaluationsForCourseOperation,
)
from src.services.evaluation.get_evaluations_for_trainee import (
    GetCohortCourseEvaluationsForTraineeOperation,
)
from src.services.evaluation.update_evaluation import UpdateCohortCourseEvaluationOperation


def transactional(method):
    """Execute la methode dans la transaction de la session du service."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            result = method(self, *args, **kwargs)
        except Exception:
            logger.debug("Transaction annulee", operation=method.__name__)
            self._session.rollback()
            raise
        self._session.commit()
        return result

    return wrapper


class CohortCourseEvaluationService:
    """Point d'entree unique des lectures et ecritures d'evaluations."""

    def __init__(
        self,
        session: Session,
        get_evaluations_for_trainee: GetCohortCourseEvaluationsForTraineeOperation,
        get_evaluations_for_course: GetCohortCourseEvaluationsForCourseOperation,
        get_cohort_courses_for_trainer: GetCohortCoursesForTrainerOperation,
        get_current_evaluation_for_trainee: GetCurrentCohortCourseEvaluationForTraineeOperation,
        get_evaluation: GetCohortCourseEvaluationOperation,
        update_evaluation: UpdateCohortCourseEvaluationOperation,
        create_evaluation: CreateCohortCourseEvaluationOperation,
    ) -> None:
        self._session = session
        self._get_evaluations_for_trainee = get_evaluations_for_trainee
        self._get_evaluations_for_course = get_evaluations_for_course
        self._get_cohort_courses_for_trainer = get_cohort_courses_for_trainer
        self._get_current_evaluation_for_trainee = get_current_evaluation_for_trainee
        self._get_evaluation = get_evaluation
        self._update_evaluation = update_evaluation
        self._create_evaluation = create_evaluation

    def close(self) -> None:
        """Ferme la session du service."""
        self._session.close()

    @transactional
    def get_cohort_course_evaluations_for_trainee(
        self, trainee_user_name: str
    ) -> list[CohortCourseEvaluationRecord]:
        return self._get_evaluations_for_trainee.get_cohort_course_evaluations_for_trainee(
            trainee_user_name
        )

    @transactional
    def get_current_evaluation_for_trainee(
        self, trainee_user_name: str
    ) -> CohortCourseEvaluationRecord:
        return self._get_current_evaluation_for_trainee.get_cohort_course_evaluation(
            trainee_user_name
        )

    @transactional
    def get_cohort_courses_for_trainer(self, user_name: str) -> list[CohortCourseRecord]:
        return self._get_cohort_courses_for_trainer.get_cohort_courses_for_trainer(user_name)

    @transactional
    def get_cohort_course_evaluation(self, evaluation_id: int) -> CohortCourseEvaluationRecord:
        return self._get_evaluation.get_cohort_course_evaluation(evaluation_id)

    @transactional
    def get_cohort_course_evaluations_for_course(
        self, cohort_course_id: int
    ) -> list[CohortCourseEvaluationRecord]:
        return self._get_evaluations_for_course.get_evaluations_for_course(cohort_course_id)

    @transactional
    def create_course_evaluation_for_trainee(
        self, record: CohortCourseEvaluationRecord
    ) -> CohortCourseEvaluationRecord:
        return self._create_evaluation.create_course_evaluation(record)

    @transactional
    def update_course_evaluation_for_trainee(
        self, record: CohortCourseEvaluationRecord
    ) -> CohortCourseEvaluationRecord:
        return self._update_evaluation.update_course_evaluation(record)
