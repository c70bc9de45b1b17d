"""
Sessions de cours d'un formateur, annotees de la note moyenne de connaissance.

Pour chaque session, la note moyenne est calculee a partir des evaluations :
premiere reponse de chaque categorie "Evaluation Trainer", premier entier
du tableau JSON. Les tableaux vides sont ignores ("N/A"), un JSON invalide
interrompt le calcul (BusinessRuleError).
"""

from decimal import Decimal
from functools import cmp_to_key
from typing import Optional

from loguru import logger

from src.core.entities.evaluation import EvalQuestionCategoryResponse
from src.core.entities.portal import CohortCourse
from src.core.exceptions import BusinessRuleError, ResourceNotFoundError
from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    ICohortCourseRepository,
    ITrainerRepository,
)
from src.core.value_objects.response_value import parse_response_values
from src.services.evaluation.dataclasses import NOT_AVAILABLE, CohortCourseRecord
from src.services.evaluation.mapper import RecordMapper

TRAINER_EVALUATION = "Evaluation Trainer"

_RATING_ERROR = "Error calculating Trainer evaluation"


def compare_cohort_courses(first: CohortCourseRecord, second: CohortCourseRecord) -> int:
    """
    Comparateur de tri des sessions.

    Retourne 1 si le debut de first precede la fin de second, -1 sinon.
    Ne retourne jamais 0. Compare debut et fin, pas debut et debut.
    """
    return 1 if first.start_date < second.end_date else -1


def format_average(values: list[int]) -> str:
    """
    Formate la moyenne des notes.

    Retourne "N/A" sans valeur, sinon l'ecriture decimale exacte
    de la moyenne en virgule flottante (3.0 -> "3", 3.5 -> "3.5").
    """
    if not values:
        return NOT_AVAILABLE
    average = sum(values) / len(values)
    return str(Decimal(average))


class GetCohortCoursesForTrainerOperation:
    """
    Liste les sessions d'un formateur avec leur note moyenne.

    Collaborateurs : repositories formateur, session, evaluation et mapper.
    """

    def __init__(
        self,
        mapper: RecordMapper,
        cohort_course_repo: ICohortCourseRepository,
        trainer_repo: ITrainerRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
    ) -> None:
        self._mapper = mapper
        self._cohort_course_repo = cohort_course_repo
        self._trainer_repo = trainer_repo
        self._evaluation_repo = evaluation_repo

    def get_cohort_courses_for_trainer(self, user_name: str) -> list[CohortCourseRecord]:
        """
        Retourne les sessions du formateur, triees, avec leur note moyenne.

        Raises:
            ResourceNotFoundError: Formateur inexistant
            BusinessRuleError: Valeur de reponse illisible
        """
        trainer = self._trainer_repo.find_by_user_name(user_name)
        if trainer is None:
            raise ResourceNotFoundError("Trainer does not exist")

        records = [
            self._to_record(cohort_course)
            for cohort_course in self._cohort_course_repo.find_by_trainer(trainer)
        ]
        logger.debug(
            "Sessions du formateur chargees",
            trainer=user_name,
            count=len(records),
        )
        return sorted(records, key=cmp_to_key(compare_cohort_courses))

    def _to_record(self, cohort_course: CohortCourse) -> CohortCourseRecord:
        record = self._mapper.map_object(cohort_course, CohortCourseRecord)
        values = []
        for evaluation in self._evaluation_repo.find_by_cohort_course(cohort_course):
            for category_response in evaluation.category_responses:
                if category_response.category_name != TRAINER_EVALUATION:
                    continue
                value = self._evaluation_response_value(category_response)
                if value is not None:
                    values.append(value)
        record.average_knowledge_rating = format_average(values)
        return record

    def _evaluation_response_value(
        self, category_response: EvalQuestionCategoryResponse
    ) -> Optional[int]:
        """
        Extrait la note de la premiere reponse de la categorie.

        Retourne None pour un tableau vide (reponse "N/A").

        Raises:
            BusinessRuleError: Aucune reponse ou JSON invalide
        """
        if not category_response.question_responses:
            raise BusinessRuleError(_RATING_ERROR)

        raw = category_response.question_responses[0].response_values
        logger.debug("Valeurs de reponse", response_values=raw)
        parsed = parse_response_values(raw)
        if parsed.is_value:
            return parsed.value
        if parsed.is_malformed:
            logger.warning("Valeur de reponse illisible", response_values=parsed.raw)
            raise BusinessRuleError(_RATING_ERROR)
        return None
