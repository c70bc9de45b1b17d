"""
Evaluation par identifiant.
"""

from src.core.exceptions import ResourceNotFoundError
from src.core.ports.repositories import ICohortCourseEvaluationRepository
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class GetCohortCourseEvaluationOperation:
    """Recupere une evaluation par son ID."""

    def __init__(
        self,
        mapper: RecordMapper,
        evaluation_repo: ICohortCourseEvaluationRepository,
    ) -> None:
        self._mapper = mapper
        self._evaluation_repo = evaluation_repo

    def get_cohort_course_evaluation(self, evaluation_id: int) -> CohortCourseEvaluationRecord:
        evaluation = self._evaluation_repo.get_by_id(evaluation_id)
        if evaluation is None:
            raise ResourceNotFoundError("Cohort course evaluation does not exist")
        return self._mapper.map_object(evaluation, CohortCourseEvaluationRecord)
