"""
Entites metier representant les concepts du domaine.

Les entites sont des objets mutables avec une identite persistante.

Exports :
- Trainer, Trainee : Formateurs et stagiaires
- QaCohort, Course, CohortCourse : Cohortes, cours et sessions de cours
- QuestionCategory, QuestionResponse, EvalQuestionCategoryResponse : Reponses au questionnaire
- CohortCourseEvaluation, EvaluationStatus : Evaluation d'une session par un stagiaire
"""

from src.core.entities.portal import CohortCourse, Course, QaCohort, Trainee, Trainer
from src.core.entities.evaluation import (
    CohortCourseEvaluation,
    EvalQuestionCategoryResponse,
    EvaluationStatus,
    QuestionCategory,
    QuestionResponse,
)

__all__ = [
    "Trainer",
    "Trainee",
    "QaCohort",
    "Course",
    "CohortCourse",
    "QuestionCategory",
    "QuestionResponse",
    "EvalQuestionCategoryResponse",
    "CohortCourseEvaluation",
    "EvaluationStatus",
]
