"""
Entites du portail de formation.

Entites representant les acteurs et le planning des formations :
formateurs, stagiaires, cohortes, cours et sessions de cours par cohorte.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Trainer:
    """
    Formateur du portail.

    Attributs :
        id : Identifiant base de donnees
        user_name : Nom d'utilisateur unique
        first_name : Prenom
        last_name : Nom de famille
    """

    id: Optional[int] = None
    user_name: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass
class Trainee:
    """
    Stagiaire rattache a une cohorte.

    Attributs :
        id : Identifiant base de donnees
        user_name : Nom d'utilisateur unique
        first_name : Prenom
        last_name : Nom de famille
        cohort_id : Cohorte du stagiaire (optionnel)
    """

    id: Optional[int] = None
    user_name: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    cohort_id: Optional[int] = None


@dataclass
class QaCohort:
    """Groupe de stagiaires suivant le meme parcours."""

    id: Optional[int] = None
    name: str = ""


@dataclass
class Course:
    """Cours du catalogue."""

    id: Optional[int] = None
    course_name: str = ""
    course_code: Optional[str] = None


@dataclass
class CohortCourse:
    """
    Session d'un cours pour une cohorte donnee.

    Une session appartient a exactement un formateur et possede
    des dates de debut et de fin.

    Attributs :
        id : Identifiant base de donnees
        cohort : Cohorte concernee
        course : Cours dispense
        trainer : Formateur responsable de la session
        start_date : Premier jour de la session
        end_date : Dernier jour de la session
    """

    id: Optional[int] = None
    cohort: Optional[QaCohort] = None
    course: Optional[Course] = None
    trainer: Optional[Trainer] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def is_running_on(self, day: date) -> bool:
        """Indique si la session est en cours au jour donne (bornes incluses)."""
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= day <= self.end_date
