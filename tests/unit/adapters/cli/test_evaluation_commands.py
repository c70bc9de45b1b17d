"""
Tests unitaires pour les commandes CLI des evaluations.

Tests couvrant:
- trainer-courses: affichage des notes moyennes, formateur inconnu
- trainee-evaluations: liste vide et liste non vide
- course-evaluations: fermeture de la session
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.exceptions import ResourceNotFoundError
from src.main import app
from src.services.evaluation import CohortCourseEvaluationRecord, CohortCourseRecord

runner = CliRunner()


@pytest.fixture
def mock_service():
    """Mock le Container pour injecter une facade simulee.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie.
    """
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        service = MagicMock()
        container_instance.evaluation_service.return_value = service
        yield service


def _course(rating):
    return CohortCourseRecord(
        id=100,
        cohort_name="Cohort 1",
        course_name="Python",
        trainer_user_name="jdoe",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 1),
        average_knowledge_rating=rating,
    )


class TestTrainerCourses:
    def test_affiche_les_notes(self, mock_service):
        mock_service.get_cohort_courses_for_trainer.return_value = [_course("3.5")]

        result = runner.invoke(app, ["trainer-courses", "jdoe"])

        assert result.exit_code == 0
        assert "3.5" in result.output
        assert "Python" in result.output
        mock_service.get_cohort_courses_for_trainer.assert_called_once_with("jdoe")
        mock_service.close.assert_called_once()

    def test_aucune_session(self, mock_service):
        mock_service.get_cohort_courses_for_trainer.return_value = []

        result = runner.invoke(app, ["trainer-courses", "jdoe"])

        assert result.exit_code == 0
        assert "Aucune session" in result.output

    def test_formateur_inconnu(self, mock_service):
        mock_service.get_cohort_courses_for_trainer.side_effect = ResourceNotFoundError(
            "Trainer does not exist"
        )

        result = runner.invoke(app, ["trainer-courses", "ghost"])

        assert result.exit_code == 1
        assert "Trainer does not exist" in result.output
        mock_service.close.assert_called_once()


class TestEvaluationListings:
    def test_evaluations_du_stagiaire(self, mock_service):
        mock_service.get_cohort_course_evaluations_for_trainee.return_value = [
            CohortCourseEvaluationRecord(
                id=1000,
                trainee_user_name="asmith",
                cohort_course_id=100,
                cohort_course=_course(None),
                status="Submitted",
            )
        ]

        result = runner.invoke(app, ["trainee-evaluations", "asmith"])

        assert result.exit_code == 0
        assert "Submitted" in result.output

    def test_aucune_evaluation_pour_la_session(self, mock_service):
        mock_service.get_cohort_course_evaluations_for_course.return_value = []

        result = runner.invoke(app, ["course-evaluations", "100"])

        assert result.exit_code == 0
        assert "Aucune evaluation" in result.output
        mock_service.get_cohort_course_evaluations_for_course.assert_called_once_with(100)


class TestHelp:
    def test_help_liste_les_commandes(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "trainer-courses" in result.output
        assert "init-db" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "QA Feedback v" in result.output
