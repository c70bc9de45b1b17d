"""
Implementation SQLModel du repository QuestionCategory.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.evaluation import QuestionCategory
from src.core.ports.repositories import IQuestionCategoryRepository
from src.infrastructure.persistence.models import QuestionCategoryModel


class SQLModelQuestionCategoryRepository(IQuestionCategoryRepository):
    """Repository SQLModel pour les categories de questions."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_name(self, category_name: str) -> Optional[QuestionCategory]:
        """Recupere une categorie par son nom exact."""
        statement = select(QuestionCategoryModel).where(
            QuestionCategoryModel.category_name == category_name
        )
        model = self._session.exec(statement).first()
        if model:
            return QuestionCategory(id=model.id, category_name=model.category_name)
        return None
