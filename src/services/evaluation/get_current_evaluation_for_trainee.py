"""
Evaluation de la session en cours pour un stagiaire.

La session courante est celle dont la periode contient la date du jour.
Si plusieurs sessions se chevauchent, la plus recemment commencee l'emporte.
"""

from collections.abc import Callable
from datetime import date

from loguru import logger

from src.core.exceptions import ResourceNotFoundError
from src.core.ports.repositories import ICohortCourseEvaluationRepository, ITraineeRepository
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class GetCurrentCohortCourseEvaluationForTraineeOperation:
    """Recupere l'evaluation de la session en cours d'un stagiaire."""

    def __init__(
        self,
        mapper: RecordMapper,
        trainee_repo: ITraineeRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Args:
            mapper: Conversion entite -> enregistrement
            trainee_repo: Repository des stagiaires
            evaluation_repo: Repository des evaluations
            today: Horloge (injectable pour les tests)
        """
        self._mapper = mapper
        self._trainee_repo = trainee_repo
        self._evaluation_repo = evaluation_repo
        self._today = today

    def get_cohort_course_evaluation(self, trainee_user_name: str) -> CohortCourseEvaluationRecord:
        """
        Retourne l'evaluation de la session en cours.

        Raises:
            ResourceNotFoundError: Stagiaire inexistant ou aucune evaluation en cours
        """
        trainee = self._trainee_repo.find_by_user_name(trainee_user_name)
        if trainee is None:
            raise ResourceNotFoundError("Trainee does not exist")

        day = self._today()
        current = [
            evaluation
            for evaluation in self._evaluation_repo.find_by_trainee(trainee)
            if evaluation.cohort_course is not None
            and evaluation.cohort_course.is_running_on(day)
        ]
        if not current:
            logger.debug("Aucune evaluation en cours", trainee=trainee_user_name, day=str(day))
            raise ResourceNotFoundError("No current course evaluation for trainee")

        latest = max(current, key=lambda evaluation: evaluation.cohort_course.start_date)
        return self._mapper.map_object(latest, CohortCourseEvaluationRecord)
