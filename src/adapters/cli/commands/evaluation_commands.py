"""
Commandes CLI de consultation des evaluations de cours.

- trainer-courses : sessions d'un formateur avec note moyenne
- trainee-evaluations : evaluations redigees par un stagiaire
- course-evaluations : evaluations d'une session
"""

from typing import Annotated

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, suppress_loguru, with_evaluation_service
from src.services.evaluation import CohortCourseEvaluationRecord, NOT_AVAILABLE


def trainer_courses(
    user_name: Annotated[str, typer.Argument(help="Nom d'utilisateur du formateur")],
) -> None:
    """Affiche les sessions d'un formateur avec leur note moyenne."""
    _trainer_courses(user_name)


@with_evaluation_service
def _trainer_courses(service, user_name: str) -> None:
    with suppress_loguru():
        records = service.get_cohort_courses_for_trainer(user_name)

    if not records:
        console.print(f"[yellow]Aucune session pour {user_name}.[/yellow]")
        return

    table = Table(title=f"Sessions de {user_name}")
    table.add_column("ID", justify="right")
    table.add_column("Cohorte")
    table.add_column("Cours")
    table.add_column("Debut")
    table.add_column("Fin")
    table.add_column("Note moyenne", justify="right")

    for record in records:
        rating = record.average_knowledge_rating or NOT_AVAILABLE
        rating_style = "dim" if rating == NOT_AVAILABLE else "green"
        table.add_row(
            str(record.id),
            record.cohort_name or "",
            record.course_name or "",
            str(record.start_date),
            str(record.end_date),
            f"[{rating_style}]{rating}[/{rating_style}]",
        )
    console.print(table)


def _evaluations_table(title: str, records: list[CohortCourseEvaluationRecord]) -> Table:
    """Construit la table Rich d'une liste d'evaluations."""
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Stagiaire")
    table.add_column("Cours")
    table.add_column("Statut")
    table.add_column("Categories", justify="right")
    table.add_column("Mise a jour")

    for record in records:
        course_name = record.cohort_course.course_name if record.cohort_course else ""
        updated = record.last_updated.strftime("%Y-%m-%d %H:%M") if record.last_updated else ""
        table.add_row(
            str(record.id),
            record.trainee_user_name or "",
            course_name or "",
            record.status,
            str(len(record.category_responses)),
            updated,
        )
    return table


def trainee_evaluations(
    user_name: Annotated[str, typer.Argument(help="Nom d'utilisateur du stagiaire")],
) -> None:
    """Affiche les evaluations redigees par un stagiaire."""
    _trainee_evaluations(user_name)


@with_evaluation_service
def _trainee_evaluations(service, user_name: str) -> None:
    with suppress_loguru():
        records = service.get_cohort_course_evaluations_for_trainee(user_name)

    if not records:
        console.print(f"[yellow]Aucune evaluation pour {user_name}.[/yellow]")
        return
    console.print(_evaluations_table(f"Evaluations de {user_name}", records))


def course_evaluations(
    cohort_course_id: Annotated[int, typer.Argument(help="ID de la session")],
) -> None:
    """Affiche les evaluations d'une session."""
    _course_evaluations(cohort_course_id)


@with_evaluation_service
def _course_evaluations(service, cohort_course_id: int) -> None:
    with suppress_loguru():
        records = service.get_cohort_course_evaluations_for_course(cohort_course_id)

    if not records:
        console.print(f"[yellow]Aucune evaluation pour la session {cohort_course_id}.[/yellow]")
        return
    console.print(_evaluations_table(f"Evaluations de la session {cohort_course_id}", records))
