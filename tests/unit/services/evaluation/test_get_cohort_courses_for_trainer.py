"""
Tests pour GetCohortCoursesForTrainerOperation.

Verifie le calcul de la note moyenne de connaissance du formateur par session,
la gestion des reponses vides ("N/A") et invalides, et le tri des sessions.
"""

from datetime import date

import pytest

from src.core.exceptions import BusinessRuleError, ResourceNotFoundError
from src.services.evaluation import (
    NOT_AVAILABLE,
    TRAINER_EVALUATION,
    CohortCourseRecord,
    GetCohortCoursesForTrainerOperation,
)
from src.services.evaluation.get_cohort_courses_for_trainer import (
    compare_cohort_courses,
    format_average,
)
from tests.fixtures.evaluations import (
    make_category_response,
    make_cohort_course,
    make_evaluation,
    make_trainer,
)


class TestGetCohortCoursesForTrainer:
    """Tests pour get_cohort_courses_for_trainer."""

    @pytest.fixture
    def trainer(self, mock_trainer_repo):
        trainer = make_trainer()
        mock_trainer_repo.find_by_user_name.return_value = trainer
        return trainer

    @pytest.fixture
    def operation(self, mapper, mock_cohort_course_repo, mock_trainer_repo, mock_evaluation_repo):
        return GetCohortCoursesForTrainerOperation(
            mapper=mapper,
            cohort_course_repo=mock_cohort_course_repo,
            trainer_repo=mock_trainer_repo,
            evaluation_repo=mock_evaluation_repo,
        )

    def _rating_for(self, operation, mock_cohort_course_repo, mock_evaluation_repo, *evaluations):
        """Calcule la note d'une session unique contenant les evaluations fournies."""
        course = make_cohort_course()
        mock_cohort_course_repo.find_by_trainer.return_value = [course]
        mock_evaluation_repo.find_by_cohort_course.return_value = list(evaluations)
        records = operation.get_cohort_courses_for_trainer("jdoe")
        assert len(records) == 1
        return records[0].average_knowledge_rating

    def test_unknown_trainer_raises_not_found(self, operation, mock_cohort_course_repo):
        """Un formateur inconnu leve ResourceNotFoundError, jamais une liste vide."""
        with pytest.raises(ResourceNotFoundError, match="Trainer does not exist"):
            operation.get_cohort_courses_for_trainer("unknown")
        mock_cohort_course_repo.find_by_trainer.assert_not_called()

    def test_trainer_without_courses(self, operation, trainer, mock_cohort_course_repo):
        """Un formateur sans session donne une liste vide."""
        assert operation.get_cohort_courses_for_trainer("jdoe") == []
        mock_cohort_course_repo.find_by_trainer.assert_called_once_with(trainer)

    def test_course_without_evaluations(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Une session sans evaluation vaut N/A."""
        rating = self._rating_for(operation, mock_cohort_course_repo, mock_evaluation_repo)
        assert rating == NOT_AVAILABLE

    def test_average_of_two_ratings(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """[4] et [2] donnent une moyenne de 3."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[4]")),
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[2]")),
        )
        assert rating == "3"

    def test_empty_response_is_excluded(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Un tableau vide est exclu de la moyenne (et non compte comme zero)."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[]")),
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[5]")),
        )
        assert rating == "5"

    def test_only_empty_responses(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Uniquement des reponses vides donne N/A."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[]")),
        )
        assert rating == NOT_AVAILABLE

    def test_malformed_response_fails_whole_course(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Un JSON invalide interrompt le calcul au lieu de donner une moyenne partielle."""
        with pytest.raises(BusinessRuleError, match="Error calculating Trainer evaluation"):
            self._rating_for(
                operation,
                mock_cohort_course_repo,
                mock_evaluation_repo,
                make_evaluation(make_category_response(TRAINER_EVALUATION, "[4]")),
                make_evaluation(make_category_response(TRAINER_EVALUATION, "oops")),
            )

    def test_unconvertible_trailing_element_fails_whole_course(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Un element non entier apres la note interrompt aussi le calcul."""
        with pytest.raises(BusinessRuleError, match="Error calculating Trainer evaluation"):
            self._rating_for(
                operation,
                mock_cohort_course_repo,
                mock_evaluation_repo,
                make_evaluation(make_category_response(TRAINER_EVALUATION, "[5]")),
                make_evaluation(make_category_response(TRAINER_EVALUATION, '[4, "x"]')),
            )

    def test_category_without_question_response_fails(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Une categorie formateur sans reponse est une erreur metier."""
        with pytest.raises(BusinessRuleError):
            self._rating_for(
                operation,
                mock_cohort_course_repo,
                mock_evaluation_repo,
                make_evaluation(make_category_response(TRAINER_EVALUATION)),
            )

    def test_other_categories_are_ignored(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Seule la categorie "Evaluation Trainer" compte, meme si les autres sont invalides."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(
                make_category_response("Evaluation Course", "not json"),
                make_category_response(TRAINER_EVALUATION, "[1]"),
            ),
        )
        assert rating == "1"

    def test_only_first_question_response_counts(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """Seule la premiere reponse de la categorie est lue."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[2]", "not json")),
        )
        assert rating == "2"

    def test_non_integer_average(
        self, operation, trainer, mock_cohort_course_repo, mock_evaluation_repo
    ):
        """La moyenne garde sa partie decimale."""
        rating = self._rating_for(
            operation,
            mock_cohort_course_repo,
            mock_evaluation_repo,
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[4]")),
            make_evaluation(make_category_response(TRAINER_EVALUATION, "[3]")),
        )
        assert rating == "3.5"

    def test_record_carries_course_fields(
        self, operation, trainer, mock_cohort_course_repo
    ):
        """Les champs de la session sont reportes dans l'enregistrement."""
        mock_cohort_course_repo.find_by_trainer.return_value = [make_cohort_course()]

        record = operation.get_cohort_courses_for_trainer("jdoe")[0]

        assert isinstance(record, CohortCourseRecord)
        assert record.id == 100
        assert record.course_name == "Python"
        assert record.cohort_name == "Cohort 1"
        assert record.trainer_user_name == "jdoe"

    def test_overlapping_courses_keep_order(
        self, operation, trainer, mock_cohort_course_repo
    ):
        """A (1 jan - 1 fev) puis B (15 jan - 1 mar) restent dans l'ordre [A, B]."""
        course_a = make_cohort_course(1, date(2024, 1, 1), date(2024, 2, 1))
        course_b = make_cohort_course(2, date(2024, 1, 15), date(2024, 3, 1))
        mock_cohort_course_repo.find_by_trainer.return_value = [course_a, course_b]

        records = operation.get_cohort_courses_for_trainer("jdoe")

        assert [record.id for record in records] == [1, 2]

    def test_disjoint_courses_most_recent_first(
        self, operation, trainer, mock_cohort_course_repo
    ):
        """Des sessions disjointes sortent de la plus recente a la plus ancienne."""
        course_a = make_cohort_course(1, date(2024, 1, 1), date(2024, 2, 1))
        course_c = make_cohort_course(3, date(2024, 6, 1), date(2024, 7, 1))
        mock_cohort_course_repo.find_by_trainer.return_value = [course_a, course_c]

        records = operation.get_cohort_courses_for_trainer("jdoe")

        assert [record.id for record in records] == [3, 1]


class TestCompareCohortCourses:
    """Tests pour le comparateur debut/fin."""

    def test_start_before_other_end(self):
        first = CohortCourseRecord(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        second = CohortCourseRecord(start_date=date(2024, 1, 15), end_date=date(2024, 3, 1))
        assert compare_cohort_courses(first, second) == 1

    def test_start_after_other_end(self):
        first = CohortCourseRecord(start_date=date(2024, 6, 1), end_date=date(2024, 7, 1))
        second = CohortCourseRecord(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        assert compare_cohort_courses(first, second) == -1

    def test_never_returns_zero(self):
        """Meme une session comparee a elle-meme n'est jamais egale."""
        record = CohortCourseRecord(start_date=date(2024, 1, 1), end_date=date(2024, 2, 1))
        assert compare_cohort_courses(record, record) == 1


class TestFormatAverage:
    """Tests pour format_average."""

    def test_no_values(self):
        assert format_average([]) == NOT_AVAILABLE

    def test_integral_average(self):
        assert format_average([4, 2]) == "3"

    def test_exact_binary_expansion(self):
        """La moyenne est ecrite avec l'expansion decimale exacte du flottant."""
        assert format_average([0, 0, 1]) == "0.333333333333333314829616256247390992939472198486328125"
