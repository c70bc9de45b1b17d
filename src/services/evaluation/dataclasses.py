"""
Dataclasses de transport des evaluations de cours.

Ces enregistrements sont exposes par le service aux couches externes
(API web, CLI). Les lignes liees sont aplaties en identifiants et noms.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

# Valeur affichee quand aucune note exploitable n'existe
NOT_AVAILABLE = "N/A"


@dataclass
class CohortCourseRecord:
    """
    Session de cours, annotee de la note moyenne de connaissance du formateur.

    average_knowledge_rating vaut "N/A" sans note exploitable, sinon
    l'ecriture decimale exacte de la moyenne (ex: "3", "3.5").
    """

    id: Optional[int] = None
    cohort_name: Optional[str] = None
    course_name: Optional[str] = None
    course_code: Optional[str] = None
    trainer_user_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    average_knowledge_rating: Optional[str] = None


@dataclass
class QuestionResponseRecord:
    """Reponse a une question."""

    id: Optional[int] = None
    question_id: Optional[int] = None
    response_values: str = "[]"
    comment: Optional[str] = None


@dataclass
class CategoryResponseRecord:
    """Reponses d'une evaluation pour une categorie, identifiee par son nom."""

    id: Optional[int] = None
    category_name: str = ""
    question_responses: list[QuestionResponseRecord] = field(default_factory=list)
    comment: Optional[str] = None


@dataclass
class CohortCourseEvaluationRecord:
    """
    Evaluation d'une session par un stagiaire.

    En entree (creation, mise a jour), seuls trainee_user_name,
    cohort_course_id, status et category_responses sont lus.
    """

    id: Optional[int] = None
    trainee_user_name: Optional[str] = None
    cohort_course_id: Optional[int] = None
    cohort_course: Optional[CohortCourseRecord] = None
    category_responses: list[CategoryResponseRecord] = field(default_factory=list)
    status: str = "Saved"
    last_updated: Optional[datetime] = None
