"""
Conversion entre entites du domaine et enregistrements de transport.

RecordMapper.map_object(entite, type_cible) choisit la conversion
enregistree pour le couple (type de l'entite, type cible).
La conversion inverse (enregistrement -> entite) sert a la creation
et a la mise a jour des evaluations.
"""

from collections.abc import Callable
from typing import Any, Mapping, Optional, TypeVar

from src.core.entities.evaluation import (
    CohortCourseEvaluation,
    EvalQuestionCategoryResponse,
    EvaluationStatus,
    QuestionCategory,
    QuestionResponse,
)
from src.core.entities.portal import CohortCourse, Trainee
from src.core.exceptions import BusinessRuleError
from src.services.evaluation.dataclasses import (
    CategoryResponseRecord,
    CohortCourseEvaluationRecord,
    CohortCourseRecord,
    QuestionResponseRecord,
)

T = TypeVar("T")


class RecordMapper:
    """Convertit les entites du domaine en enregistrements de transport."""

    def __init__(self) -> None:
        self._converters: dict[tuple[type, type], Callable[[Any], Any]] = {
            (CohortCourse, CohortCourseRecord): self._cohort_course_record,
            (QuestionResponse, QuestionResponseRecord): self._question_response_record,
            (EvalQuestionCategoryResponse, CategoryResponseRecord): self._category_response_record,
            (CohortCourseEvaluation, CohortCourseEvaluationRecord): self._evaluation_record,
        }

    def map_object(self, entity: Any, target_type: type[T]) -> T:
        """
        Convertit une entite vers le type d'enregistrement demande.

        Raises:
            TypeError: Si aucune conversion n'existe pour ce couple de types
        """
        converter = self._converters.get((type(entity), target_type))
        if converter is None:
            raise TypeError(
                f"Aucune conversion de {type(entity).__name__} vers {target_type.__name__}"
            )
        return converter(entity)

    def map_list(self, entities: list[Any], target_type: type[T]) -> list[T]:
        """Convertit une liste d'entites vers le type d'enregistrement demande."""
        return [self.map_object(entity, target_type) for entity in entities]

    # ------------------------------------------------------------------
    # Entite -> enregistrement
    # ------------------------------------------------------------------

    def _cohort_course_record(self, entity: CohortCourse) -> CohortCourseRecord:
        return CohortCourseRecord(
            id=entity.id,
            cohort_name=entity.cohort.name if entity.cohort else None,
            course_name=entity.course.course_name if entity.course else None,
            course_code=entity.course.course_code if entity.course else None,
            trainer_user_name=entity.trainer.user_name if entity.trainer else None,
            start_date=entity.start_date,
            end_date=entity.end_date,
        )

    def _question_response_record(self, entity: QuestionResponse) -> QuestionResponseRecord:
        return QuestionResponseRecord(
            id=entity.id,
            question_id=entity.question_id,
            response_values=entity.response_values,
            comment=entity.comment,
        )

    def _category_response_record(
        self, entity: EvalQuestionCategoryResponse
    ) -> CategoryResponseRecord:
        return CategoryResponseRecord(
            id=entity.id,
            category_name=entity.category_name or "",
            question_responses=self.map_list(entity.question_responses, QuestionResponseRecord),
            comment=entity.comment,
        )

    def _evaluation_record(self, entity: CohortCourseEvaluation) -> CohortCourseEvaluationRecord:
        cohort_course = None
        if entity.cohort_course is not None:
            cohort_course = self.map_object(entity.cohort_course, CohortCourseRecord)
        return CohortCourseEvaluationRecord(
            id=entity.id,
            trainee_user_name=entity.trainee.user_name if entity.trainee else None,
            cohort_course_id=entity.cohort_course.id if entity.cohort_course else None,
            cohort_course=cohort_course,
            category_responses=self.map_list(entity.category_responses, CategoryResponseRecord),
            status=entity.status.value,
            last_updated=entity.last_updated,
        )

    # ------------------------------------------------------------------
    # Enregistrement -> entite
    # ------------------------------------------------------------------

    def to_evaluation_entity(
        self,
        record: CohortCourseEvaluationRecord,
        trainee: Trainee,
        cohort_course: CohortCourse,
        categories: Mapping[str, QuestionCategory],
        evaluation_id: Optional[int] = None,
    ) -> CohortCourseEvaluation:
        """
        Construit l'entite evaluation a partir d'un enregistrement recu.

        Args:
            record: Enregistrement recu de l'appelant
            trainee: Stagiaire deja resolu
            cohort_course: Session deja resolue
            categories: Categories resolues, indexees par nom
            evaluation_id: ID de l'evaluation mise a jour (None en creation)

        Raises:
            BusinessRuleError: Statut inconnu
        """
        try:
            status = EvaluationStatus(record.status)
        except ValueError:
            raise BusinessRuleError(f"Statut d'evaluation inconnu : {record.status}") from None

        category_responses = [
            EvalQuestionCategoryResponse(
                question_category=categories[category_record.category_name],
                question_responses=[
                    QuestionResponse(
                        question_id=response.question_id,
                        response_values=response.response_values,
                        comment=response.comment,
                    )
                    for response in category_record.question_responses
                ],
                comment=category_record.comment,
            )
            for category_record in record.category_responses
        ]

        return CohortCourseEvaluation(
            id=evaluation_id,
            trainee=trainee,
            cohort_course=cohort_course,
            category_responses=category_responses,
            status=status,
        )
