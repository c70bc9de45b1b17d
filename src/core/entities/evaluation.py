"""
Entites d'evaluation de cours.

Une evaluation regroupe les reponses d'un stagiaire a un questionnaire,
organisees par categorie de questions (ex: "Evaluation Trainer").
Les valeurs de reponse sont stockees telles que saisies : un tableau JSON
encode en chaine, dont le premier element porte la note.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.entities.portal import CohortCourse, Trainee


class EvaluationStatus(Enum):
    """Statut d'une evaluation de cours."""

    SAVED = "Saved"
    SUBMITTED = "Submitted"


@dataclass
class QuestionCategory:
    """Categorie de questions du questionnaire."""

    id: Optional[int] = None
    category_name: str = ""


@dataclass
class QuestionResponse:
    """
    Reponse a une question.

    Attributs :
        id : Identifiant base de donnees
        question_id : Question concernee (optionnel)
        response_values : Tableau JSON encode en chaine (ex: "[4]")
        comment : Commentaire libre
    """

    id: Optional[int] = None
    question_id: Optional[int] = None
    response_values: str = "[]"
    comment: Optional[str] = None


@dataclass
class EvalQuestionCategoryResponse:
    """
    Ensemble des reponses d'une evaluation pour une categorie.

    Les reponses aux questions sont ordonnees par ordre de saisie.
    """

    id: Optional[int] = None
    question_category: Optional[QuestionCategory] = None
    question_responses: list[QuestionResponse] = field(default_factory=list)
    comment: Optional[str] = None

    @property
    def category_name(self) -> Optional[str]:
        """Nom de la categorie, None si non renseignee."""
        if self.question_category is None:
            return None
        return self.question_category.category_name


@dataclass
class CohortCourseEvaluation:
    """
    Evaluation d'une session de cours par un stagiaire.

    Attributs :
        id : Identifiant base de donnees
        trainee : Stagiaire auteur de l'evaluation
        cohort_course : Session evaluee
        category_responses : Reponses groupees par categorie
        status : SAVED tant que le stagiaire peut modifier, SUBMITTED ensuite
        last_updated : Date de derniere modification
    """

    id: Optional[int] = None
    trainee: Optional[Trainee] = None
    cohort_course: Optional[CohortCourse] = None
    category_responses: list[EvalQuestionCategoryResponse] = field(default_factory=list)
    status: EvaluationStatus = EvaluationStatus.SAVED
    last_updated: Optional[datetime] = None
