"""
Schemas pydantic de l'API web.

Les schemas de sortie sont valides directement depuis les dataclasses
de transport (from_attributes). Le schema d'entree des evaluations est
converti en CohortCourseEvaluationRecord avant d'atteindre le service.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..services.evaluation import (
    CategoryResponseRecord,
    CohortCourseEvaluationRecord,
    QuestionResponseRecord,
)


class CohortCourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    cohort_name: Optional[str] = None
    course_name: Optional[str] = None
    course_code: Optional[str] = None
    trainer_user_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    average_knowledge_rating: Optional[str] = None


class QuestionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    question_id: Optional[int] = None
    response_values: str = "[]"
    comment: Optional[str] = None


class CategoryResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    category_name: str = Field(min_length=1)
    question_responses: list[QuestionResponseSchema] = Field(default_factory=list)
    comment: Optional[str] = None


class EvaluationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    trainee_user_name: Optional[str] = None
    cohort_course_id: Optional[int] = None
    cohort_course: Optional[CohortCourseOut] = None
    category_responses: list[CategoryResponseSchema] = Field(default_factory=list)
    status: str
    last_updated: Optional[datetime] = None


class EvaluationIn(BaseModel):
    """Corps des requetes de creation et de mise a jour."""

    id: Optional[int] = None
    trainee_user_name: Optional[str] = None
    cohort_course_id: Optional[int] = None
    category_responses: list[CategoryResponseSchema] = Field(default_factory=list)
    status: str = "Saved"

    def to_record(self) -> CohortCourseEvaluationRecord:
        """Convertit le corps recu en enregistrement de transport."""
        return CohortCourseEvaluationRecord(
            id=self.id,
            trainee_user_name=self.trainee_user_name,
            cohort_course_id=self.cohort_course_id,
            category_responses=[
                CategoryResponseRecord(
                    category_name=category.category_name,
                    question_responses=[
                        QuestionResponseRecord(
                            question_id=response.question_id,
                            response_values=response.response_values,
                            comment=response.comment,
                        )
                        for response in category.question_responses
                    ],
                    comment=category.comment,
                )
                for category in self.category_responses
            ],
            status=self.status,
        )
