"""
Evaluations redigees par un stagiaire.
"""

from src.core.exceptions import ResourceNotFoundError
from src.core.ports.repositories import ICohortCourseEvaluationRepository, ITraineeRepository
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class GetCohortCourseEvaluationsForTraineeOperation:
    """Liste les evaluations d'un stagiaire."""

    def __init__(
        self,
        mapper: RecordMapper,
        trainee_repo: ITraineeRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
    ) -> None:
        self._mapper = mapper
        self._trainee_repo = trainee_repo
        self._evaluation_repo = evaluation_repo

    def get_cohort_course_evaluations_for_trainee(
        self, trainee_user_name: str
    ) -> list[CohortCourseEvaluationRecord]:
        """
        Retourne toutes les evaluations du stagiaire.

        Raises:
            ResourceNotFoundError: Stagiaire inexistant
        """
        trainee = self._trainee_repo.find_by_user_name(trainee_user_name)
        if trainee is None:
            raise ResourceNotFoundError("Trainee does not exist")
        evaluations = self._evaluation_repo.find_by_trainee(trainee)
        return self._mapper.map_list(evaluations, CohortCourseEvaluationRecord)
