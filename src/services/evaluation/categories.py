"""
Resolution des categories de questions citees par un enregistrement d'evaluation.
"""

from src.core.entities.evaluation import QuestionCategory
from src.core.exceptions import BusinessRuleError
from src.core.ports.repositories import IQuestionCategoryRepository
from src.services.evaluation.dataclasses import CohortCourseEvaluationRecord


def resolve_categories(
    record: CohortCourseEvaluationRecord,
    category_repo: IQuestionCategoryRepository,
) -> dict[str, QuestionCategory]:
    """
    Resout chaque nom de categorie de l'enregistrement.

    Returns:
        Categories indexees par nom

    Raises:
        BusinessRuleError: Categorie inconnue
    """
    categories: dict[str, QuestionCategory] = {}
    for category_response in record.category_responses:
        name = category_response.category_name
        if name in categories:
            continue
        category = category_repo.find_by_name(name)
        if category is None:
            raise BusinessRuleError(f"Unknown question category: {name}")
        categories[name] = category
    return categories
