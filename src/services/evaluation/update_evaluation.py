"""
Mise a jour de l'evaluation d'une session par un stagiaire.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from src.core.entities.evaluation import EvaluationStatus
from src.core.exceptions import BusinessRuleError, ResourceNotFoundError
from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    IQuestionCategoryRepository,
)
from src.services.evaluation.categories import resolve_categories
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class UpdateCohortCourseEvaluationOperation:
    """
    Met a jour une evaluation existante.

    Le statut et les reponses sont remplaces. Le stagiaire et la session
    restent ceux de l'evaluation stockee. Une evaluation soumise est figee.
    """

    def __init__(
        self,
        mapper: RecordMapper,
        category_repo: IQuestionCategoryRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
        now: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._mapper = mapper
        self._category_repo = category_repo
        self._evaluation_repo = evaluation_repo
        self._now = now

    def update_course_evaluation(
        self, record: CohortCourseEvaluationRecord
    ) -> CohortCourseEvaluationRecord:
        """
        Remplace le statut et les reponses de l'evaluation.

        Raises:
            BusinessRuleError: ID manquant, evaluation soumise, categorie ou statut inconnu
            ResourceNotFoundError: Evaluation inexistante
        """
        if record.id is None:
            raise BusinessRuleError("Course evaluation id is required for an update")

        existing = self._evaluation_repo.get_by_id(record.id)
        if existing is None:
            raise ResourceNotFoundError("Cohort course evaluation does not exist")
        if existing.status is EvaluationStatus.SUBMITTED:
            raise BusinessRuleError("A submitted course evaluation cannot be modified")

        categories = resolve_categories(record, self._category_repo)
        evaluation = self._mapper.to_evaluation_entity(
            record,
            existing.trainee,
            existing.cohort_course,
            categories,
            evaluation_id=existing.id,
        )
        evaluation.last_updated = self._now()
        saved = self._evaluation_repo.save(evaluation)

        logger.info("Evaluation mise a jour", evaluation_id=saved.id, status=saved.status.value)
        return self._mapper.map_object(saved, CohortCourseEvaluationRecord)
