"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Inclut les repositories SQLModel, les operations et la facade des evaluations.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCohortCourseEvaluationRepository,
    SQLModelCohortCourseRepository,
    SQLModelQuestionCategoryRepository,
    SQLModelTraineeRepository,
    SQLModelTrainerRepository,
)
from .services.evaluation import (
    CohortCourseEvaluationService,
    CreateCohortCourseEvaluationOperation,
    GetCohortCourseEvaluationOperation,
    GetCohortCourseEvaluationsForCourseOperation,
    GetCohortCourseEvaluationsForTraineeOperation,
    GetCohortCoursesForTrainerOperation,
    GetCurrentCohortCourseEvaluationForTraineeOperation,
    RecordMapper,
    UpdateCohortCourseEvaluationOperation,
)


def _build_evaluation_service(session, mapper: RecordMapper) -> CohortCourseEvaluationService:
    """Assemble la facade et ses operations autour d'une session unique."""
    trainer_repo = SQLModelTrainerRepository(session)
    trainee_repo = SQLModelTraineeRepository(session)
    cohort_course_repo = SQLModelCohortCourseRepository(session)
    category_repo = SQLModelQuestionCategoryRepository(session)
    evaluation_repo = SQLModelCohortCourseEvaluationRepository(session)

    return CohortCourseEvaluationService(
        session=session,
        get_evaluations_for_trainee=GetCohortCourseEvaluationsForTraineeOperation(
            mapper=mapper,
            trainee_repo=trainee_repo,
            evaluation_repo=evaluation_repo,
        ),
        get_evaluations_for_course=GetCohortCourseEvaluationsForCourseOperation(
            mapper=mapper,
            cohort_course_repo=cohort_course_repo,
            evaluation_repo=evaluation_repo,
        ),
        get_cohort_courses_for_trainer=GetCohortCoursesForTrainerOperation(
            mapper=mapper,
            cohort_course_repo=cohort_course_repo,
            trainer_repo=trainer_repo,
            evaluation_repo=evaluation_repo,
        ),
        get_current_evaluation_for_trainee=GetCurrentCohortCourseEvaluationForTraineeOperation(
            mapper=mapper,
            trainee_repo=trainee_repo,
            evaluation_repo=evaluation_repo,
        ),
        get_evaluation=GetCohortCourseEvaluationOperation(
            mapper=mapper,
            evaluation_repo=evaluation_repo,
        ),
        update_evaluation=UpdateCohortCourseEvaluationOperation(
            mapper=mapper,
            category_repo=category_repo,
            evaluation_repo=evaluation_repo,
        ),
        create_evaluation=CreateCohortCourseEvaluationOperation(
            mapper=mapper,
            trainee_repo=trainee_repo,
            cohort_course_repo=cohort_course_repo,
            category_repo=category_repo,
            evaluation_repo=evaluation_repo,
        ),
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.evaluation_service()

    Chaque appel a evaluation_service() ouvre une nouvelle session,
    partagee par tous les repositories et operations de ce service.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Mapper (stateless - Singleton)
    mapper = providers.Singleton(RecordMapper)

    # Une seule Factory : toutes les dependances du service partagent
    # la meme session (une transaction par service)
    evaluation_service = providers.Factory(
        _build_evaluation_service,
        session=session,
        mapper=mapper,
    )
