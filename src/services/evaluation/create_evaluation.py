"""
Creation de l'evaluation d'une session par un stagiaire.
"""

from loguru import logger

from src.core.exceptions import BusinessRuleError, ResourceNotFoundError
from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    ICohortCourseRepository,
    IQuestionCategoryRepository,
    ITraineeRepository,
)
from src.services.evaluation.categories import resolve_categories
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord
from src.services.evaluation.mapper import RecordMapper


class CreateCohortCourseEvaluationOperation:
    """
    Cree une evaluation.

    Le stagiaire et la session doivent exister, et le stagiaire ne peut
    evaluer qu'une fois chaque session.
    """

    def __init__(
        self,
        mapper: RecordMapper,
        trainee_repo: ITraineeRepository,
        cohort_course_repo: ICohortCourseRepository,
        category_repo: IQuestionCategoryRepository,
        evaluation_repo: ICohortCourseEvaluationRepository,
    ) -> None:
        self._mapper = mapper
        self._trainee_repo = trainee_repo
        self._cohort_course_repo = cohort_course_repo
        self._category_repo = category_repo
        self._evaluation_repo = evaluation_repo

    def create_course_evaluation(
        self, record: CohortCourseEvaluationRecord
    ) -> CohortCourseEvaluationRecord:
        """
        Persiste une nouvelle evaluation et la retourne avec son ID.

        Raises:
            BusinessRuleError: ID deja renseigne, categorie ou statut inconnu, doublon
            ResourceNotFoundError: Stagiaire ou session inexistant
        """
        if record.id is not None:
            raise BusinessRuleError("A new course evaluation cannot carry an id")

        trainee = self._trainee_repo.find_by_user_name(record.trainee_user_name or "")
        if trainee is None:
            raise ResourceNotFoundError("Trainee does not exist")
        if record.cohort_course_id is None:
            raise ResourceNotFoundError("Cohort course does not exist")
        cohort_course = self._cohort_course_repo.get_by_id(record.cohort_course_id)
        if cohort_course is None:
            raise ResourceNotFoundError("Cohort course does not exist")

        if self._evaluation_repo.find_by_trainee_and_cohort_course(trainee, cohort_course):
            raise BusinessRuleError("Trainee has already evaluated this cohort course")

        categories = resolve_categories(record, self._category_repo)
        evaluation = self._mapper.to_evaluation_entity(record, trainee, cohort_course, categories)
        saved = self._evaluation_repo.save(evaluation)

        logger.info(
            "Evaluation creee",
            evaluation_id=saved.id,
            trainee=trainee.user_name,
            cohort_course_id=cohort_course.id,
        )
        return self._mapper.map_object(saved, CohortCourseEvaluationRecord)
