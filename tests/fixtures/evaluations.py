"""
Fabriques d'entites pour les tests d'evaluation.

Construisent des formateurs, stagiaires, sessions et evaluations
avec des valeurs par defaut coherentes entre elles.
"""

from datetime import date
from typing import Optional

from src.core.entities import (
    CohortCourse,
    CohortCourseEvaluation,
    Course,
    EvalQuestionCategoryResponse,
    QaCohort,
    QuestionCategory,
    QuestionResponse,
    Trainee,
    Trainer,
)


def make_trainer(user_name: str = "jdoe", trainer_id: int = 1) -> Trainer:
    """Formateur de test."""
    return Trainer(id=trainer_id, user_name=user_name, first_name="John", last_name="Doe")


def make_trainee(user_name: str = "asmith", trainee_id: int = 10) -> Trainee:
    """Stagiaire de test."""
    return Trainee(id=trainee_id, user_name=user_name, first_name="Alice", last_name="Smith")


def make_cohort_course(
    cohort_course_id: int = 100,
    start: date = date(2024, 1, 1),
    end: date = date(2024, 2, 1),
    course_name: str = "Python",
    trainer: Optional[Trainer] = None,
) -> CohortCourse:
    """Session de test, rattachee par defaut au formateur jdoe."""
    return CohortCourse(
        id=cohort_course_id,
        cohort=QaCohort(id=1, name="Cohort 1"),
        course=Course(id=7, course_name=course_name, course_code="PY-101"),
        trainer=trainer or make_trainer(),
        start_date=start,
        end_date=end,
    )


def make_category_response(
    category_name: str,
    *response_values: str,
) -> EvalQuestionCategoryResponse:
    """Reponses d'une categorie, une QuestionResponse par valeur fournie."""
    return EvalQuestionCategoryResponse(
        question_category=QuestionCategory(id=1, category_name=category_name),
        question_responses=[
            QuestionResponse(id=index, response_values=value)
            for index, value in enumerate(response_values, start=1)
        ],
    )


def make_evaluation(
    *category_responses: EvalQuestionCategoryResponse,
    evaluation_id: int = 1000,
    cohort_course: Optional[CohortCourse] = None,
    trainee: Optional[Trainee] = None,
) -> CohortCourseEvaluation:
    """Evaluation de test contenant les reponses fournies."""
    return CohortCourseEvaluation(
        id=evaluation_id,
        trainee=trainee or make_trainee(),
        cohort_course=cohort_course or make_cohort_course(),
        category_responses=list(category_responses),
    )
