"""
Evaluations d'une session de cours.
"""

from src.core.exceptions import ResourceNotFoundError
from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    ICohortCourseRepository,
)
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class GetCohortCourseEvaluationsForCourseOperation:
    """Liste les evaluations d'une session."""

    def __init__(
        self,
        mapper: RecordMapper,
        cohort_course_repo: ICohortCourseRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
    ) -> None:
        self._mapper = mapper
        self._cohort_course_repo = cohort_course_repo
        self._evaluation_repo = evaluation_repo

    def get_evaluations_for_course(self, cohort_course_id: int) -> list[CohortCourseEvaluationRecord]:
        """
        Retourne toutes les evaluations de la session.

        Raises:
            ResourceNotFoundError: Session inexistante
        """
        cohort_course = self._cohort_course_repo.get_by_id(cohort_course_id)
        if cohort_course is None:
            raise ResourceNotFoundError("Cohort course does not exist")
        evaluations = self._evaluation_repo.find_by_cohort_course(cohort_course)
        return self._mapper.map_list(evaluations, CohortCourseEvaluationRecord)
