"""
Tests pour les entites du portail.
"""

from datetime import date

from src.core.entities import CohortCourse, EvalQuestionCategoryResponse, QuestionCategory


class TestCohortCourse:
    """Tests pour CohortCourse.is_running_on."""

    def test_running_within_period(self):
        course = CohortCourse(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        assert course.is_running_on(date(2024, 1, 15))

    def test_bounds_are_inclusive(self):
        course = CohortCourse(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        assert course.is_running_on(date(2024, 1, 1))
        assert course.is_running_on(date(2024, 2, 1))

    def test_not_running_outside_period(self):
        course = CohortCourse(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        assert not course.is_running_on(date(2024, 2, 2))

    def test_missing_dates(self):
        """Sans dates, la session n'est jamais en cours."""
        assert not CohortCourse().is_running_on(date(2024, 1, 1))


class TestEvalQuestionCategoryResponse:
    """Tests pour le nom de categorie."""

    def test_category_name(self):
        response = EvalQuestionCategoryResponse(
            question_category=QuestionCategory(id=1, category_name="Evaluation Trainer")
        )
        assert response.category_name == "Evaluation Trainer"

    def test_category_name_without_category(self):
        assert EvalQuestionCategoryResponse().category_name is None
