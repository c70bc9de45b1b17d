"""
Modeles SQLModel pour la base de donnees du portail de feedback.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- trainers, trainees: Formateurs et stagiaires (nom d'utilisateur unique)
- cohorts, courses: Cohortes et catalogue de cours
- cohort_courses: Sessions d'un cours pour une cohorte, rattachees a un formateur
- question_categories: Categories du questionnaire (ex: "Evaluation Trainer")
- cohort_course_evaluations: Evaluation d'une session par un stagiaire
- eval_category_responses: Reponses d'une evaluation pour une categorie
- question_responses: Reponse a une question (tableau JSON encode en chaine)
"""

from __future__ import annotations

from datetime import date, datetime

from sqlmodel import Field, Index, SQLModel


class TrainerModel(SQLModel, table=True):
    """Modele representant un formateur."""

    __tablename__ = "trainers"

    id: int | None = Field(default=None, primary_key=True)
    user_name: str = Field(unique=True, index=True)
    first_name: str | None = None
    last_name: str | None = None


class CohortModel(SQLModel, table=True):
    """Modele representant une cohorte de stagiaires."""

    __tablename__ = "cohorts"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class TraineeModel(SQLModel, table=True):
    """Modele representant un stagiaire, lie a sa cohorte."""

    __tablename__ = "trainees"

    id: int | None = Field(default=None, primary_key=True)
    user_name: str = Field(unique=True, index=True)
    first_name: str | None = None
    last_name: str | None = None
    cohort_id: int | None = Field(default=None, foreign_key="cohorts.id", index=True)


class CourseModel(SQLModel, table=True):
    """Modele representant un cours du catalogue."""

    __tablename__ = "courses"

    id: int | None = Field(default=None, primary_key=True)
    course_name: str
    course_code: str | None = Field(default=None, index=True)


class CohortCourseModel(SQLModel, table=True):
    """
    Modele representant une session de cours.

    Lie une cohorte, un cours et un formateur sur une periode.
    """

    __tablename__ = "cohort_courses"

    id: int | None = Field(default=None, primary_key=True)
    cohort_id: int = Field(foreign_key="cohorts.id", index=True)
    course_id: int = Field(foreign_key="courses.id", index=True)
    trainer_id: int = Field(foreign_key="trainers.id", index=True)
    start_date: date
    end_date: date


class QuestionCategoryModel(SQLModel, table=True):
    """Modele representant une categorie de questions."""

    __tablename__ = "question_categories"

    id: int | None = Field(default=None, primary_key=True)
    category_name: str = Field(unique=True, index=True)


class CohortCourseEvaluationModel(SQLModel, table=True):
    """
    Modele representant l'evaluation d'une session par un stagiaire.

    Un stagiaire n'a qu'une evaluation par session.
    """

    __tablename__ = "cohort_course_evaluations"
    __table_args__ = (
        Index(
            "ix_evaluations_trainee_cohort_course",
            "trainee_id",
            "cohort_course_id",
            unique=True,
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    trainee_id: int = Field(foreign_key="trainees.id", index=True)
    cohort_course_id: int = Field(foreign_key="cohort_courses.id", index=True)
    status: str = Field(default="Saved")  # "Saved" ou "Submitted"
    last_updated: datetime | None = Field(default_factory=datetime.utcnow)


class EvalCategoryResponseModel(SQLModel, table=True):
    """Reponses d'une evaluation pour une categorie de questions."""

    __tablename__ = "eval_category_responses"

    id: int | None = Field(default=None, primary_key=True)
    evaluation_id: int = Field(foreign_key="cohort_course_evaluations.id", index=True)
    category_id: int = Field(foreign_key="question_categories.id", index=True)
    comment: str | None = None


class QuestionResponseModel(SQLModel, table=True):
    """
    Reponse a une question.

    response_values stocke un tableau JSON encode en chaine, ex: "[4]".
    """

    __tablename__ = "question_responses"

    id: int | None = Field(default=None, primary_key=True)
    category_response_id: int = Field(foreign_key="eval_category_responses.id", index=True)
    question_id: int | None = None
    response_values: str = "[]"
    comment: str | None = None
