"""
Implementation SQLModel du repository CohortCourse.

Les sessions sont reconstituees avec leur cohorte, leur cours et leur formateur.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.portal import CohortCourse, Course, QaCohort, Trainer
from src.core.ports.repositories import ICohortCourseRepository
from src.infrastructure.persistence.models import (
    CohortCourseModel,
    CohortModel,
    CourseModel,
    TrainerModel,
)
from src.infrastructure.persistence.repositories.trainer_repository import (
    trainer_to_entity,
)


class SQLModelCohortCourseRepository(ICohortCourseRepository):
    """
    Repository SQLModel pour les sessions de cours.

    Implemente ICohortCourseRepository en chargeant les lignes liees
    (cohorte, cours, formateur) via la session.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def to_entity(self, model: CohortCourseModel) -> CohortCourse:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele CohortCourseModel depuis la DB

        Retourne :
            L'entite CohortCourse avec cohorte, cours et formateur
        """
        cohort_model = self._session.get(CohortModel, model.cohort_id)
        course_model = self._session.get(CourseModel, model.course_id)
        trainer_model = self._session.get(TrainerModel, model.trainer_id)

        cohort = None
        if cohort_model:
            cohort = QaCohort(id=cohort_model.id, name=cohort_model.name)
        course = None
        if course_model:
            course = Course(
                id=course_model.id,
                course_name=course_model.course_name,
                course_code=course_model.course_code,
            )
        trainer = trainer_to_entity(trainer_model) if trainer_model else None

        return CohortCourse(
            id=model.id,
            cohort=cohort,
            course=course,
            trainer=trainer,
            start_date=model.start_date,
            end_date=model.end_date,
        )

    def get_by_id(self, cohort_course_id: int) -> Optional[CohortCourse]:
        """Recupere une session par son ID."""
        model = self._session.get(CohortCourseModel, cohort_course_id)
        if model:
            return self.to_entity(model)
        return None

    def find_by_trainer(self, trainer: Trainer) -> list[CohortCourse]:
        """Liste les sessions d'un formateur, par ordre d'ID."""
        if trainer.id is None:
            return []
        statement = (
            select(CohortCourseModel)
            .where(CohortCourseModel.trainer_id == trainer.id)
            .order_by(CohortCourseModel.id)
        )
        models = self._session.exec(statement).all()
        return [self.to_entity(model) for model in models]
