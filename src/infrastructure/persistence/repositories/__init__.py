"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.trainer_repository import (
    SQLModelTraineeRepository,
    SQLModelTrainerRepository,
)
from src.infrastructure.persistence.repositories.cohort_course_repository import (
    SQLModelCohortCourseRepository,
)
from src.infrastructure.persistence.repositories.question_category_repository import (
    SQLModelQuestionCategoryRepository,
)
from src.infrastructure.persistence.repositories.cohort_course_evaluation_repository import (
    SQLModelCohortCourseEvaluationRepository,
)

__all__ = [
    "SQLModelTrainerRepository",
    "SQLModelTraineeRepository",
    "SQLModelCohortCourseRepository",
    "SQLModelQuestionCategoryRepository",
    "SQLModelCohortCourseEvaluationRepository",
]
