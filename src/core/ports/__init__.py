"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des donnees
- ITrainerRepository : Recherche des formateurs
- ITraineeRepository : Recherche des stagiaires
- ICohortCourseRepository : Recherche des sessions de cours
- IQuestionCategoryRepository : Recherche des categories de questions
- ICohortCourseEvaluationRepository : Stockage des evaluations
"""

from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    ICohortCourseRepository,
    IQuestionCategoryRepository,
    ITraineeRepository,
    ITrainerRepository,
)

__all__ = [
    "ITrainerRepository",
    "ITraineeRepository",
    "ICohortCourseRepository",
    "IQuestionCategoryRepository",
    "ICohortCourseEvaluationRepository",
]
