"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des donnees.
Les implementations (adaptateurs) fournissent les mecanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les repositories ne valident jamais la transaction : la demarcation
est a la charge du service appelant.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.evaluation import CohortCourseEvaluation, QuestionCategory
from src.core.entities.portal import CohortCourse, Trainee, Trainer


class ITrainerRepository(ABC):
    """Interface de stockage des formateurs."""

    @abstractmethod
    def find_by_user_name(self, user_name: str) -> Optional[Trainer]:
        """Recupere un formateur par son nom d'utilisateur."""
        ...


class ITraineeRepository(ABC):
    """Interface de stockage des stagiaires."""

    @abstractmethod
    def find_by_user_name(self, user_name: str) -> Optional[Trainee]:
        """Recupere un stagiaire par son nom d'utilisateur."""
        ...


class ICohortCourseRepository(ABC):
    """
    Interface de stockage des sessions de cours.

    Definit les operations pour recuperer les entites CohortCourse.
    """

    @abstractmethod
    def get_by_id(self, cohort_course_id: int) -> Optional[CohortCourse]:
        """Recupere une session par son ID."""
        ...

    @abstractmethod
    def find_by_trainer(self, trainer: Trainer) -> list[CohortCourse]:
        """Liste les sessions d'un formateur, par ordre d'ID."""
        ...


class IQuestionCategoryRepository(ABC):
    """Interface de stockage des categories de questions."""

    @abstractmethod
    def find_by_name(self, category_name: str) -> Optional[QuestionCategory]:
        """Recupere une categorie par son nom."""
        ...


class ICohortCourseEvaluationRepository(ABC):
    """
    Interface de stockage des evaluations de sessions.

    Definit les operations pour persister et recuperer les entites
    CohortCourseEvaluation avec leurs reponses.
    """

    @abstractmethod
    def get_by_id(self, evaluation_id: int) -> Optional[CohortCourseEvaluation]:
        """Recupere une evaluation par son ID."""
        ...

    @abstractmethod
    def find_by_cohort_course(self, cohort_course: CohortCourse) -> list[CohortCourseEvaluation]:
        """Liste les evaluations d'une session."""
        ...

    @abstractmethod
    def find_by_trainee(self, trainee: Trainee) -> list[CohortCourseEvaluation]:
        """Liste les evaluations redigees par un stagiaire."""
        ...

    @abstractmethod
    def find_by_trainee_and_cohort_course(
        self,
        trainee: Trainee,
        cohort_course: CohortCourse,
    ) -> Optional[CohortCourseEvaluation]:
        """Recupere l'evaluation d'un stagiaire pour une session donnee."""
        ...

    @abstractmethod
    def save(self, evaluation: CohortCourseEvaluation) -> CohortCourseEvaluation:
        """
        Sauvegarde une evaluation (insertion ou mise a jour).

        Les reponses par categorie existantes sont remplacees par celles
        de l'entite. Retourne l'evaluation telle que stockee.
        """
        ...
