"""
Dependances partagees de l'application web.

Fournit la facade des evaluations, une instance (et une session) par requete.
"""

from collections.abc import Generator

from fastapi import Request

from ..services.evaluation import CohortCourseEvaluationService


def get_evaluation_service(request: Request) -> Generator[CohortCourseEvaluationService, None, None]:
    """Construit la facade depuis le Container DI et ferme sa session en fin de requete."""
    service = request.app.state.container.evaluation_service()
    try:
        yield service
    finally:
        service.close()
