"""
Fixtures pytest partagees pour les tests du portail de feedback.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des repositories
- Base SQLite en memoire
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.config import Settings
from src.core.entities import QuestionCategory
from src.core.ports.repositories import (
    ICohortCourseEvaluationRepository,
    ICohortCourseRepository,
    IQuestionCategoryRepository,
    ITraineeRepository,
    ITrainerRepository,
)
from src.services.evaluation import RecordMapper


@pytest.fixture
def mapper() -> RecordMapper:
    return RecordMapper()


@pytest.fixture
def mock_trainer_repo() -> MagicMock:
    """Mock de ITrainerRepository (formateur introuvable par defaut)."""
    mock = MagicMock(spec=ITrainerRepository)
    mock.find_by_user_name.return_value = None
    return mock


@pytest.fixture
def mock_trainee_repo() -> MagicMock:
    """Mock de ITraineeRepository (stagiaire introuvable par defaut)."""
    mock = MagicMock(spec=ITraineeRepository)
    mock.find_by_user_name.return_value = None
    return mock


@pytest.fixture
def mock_cohort_course_repo() -> MagicMock:
    """Mock de ICohortCourseRepository (aucune session par defaut)."""
    mock = MagicMock(spec=ICohortCourseRepository)
    mock.get_by_id.return_value = None
    mock.find_by_trainer.return_value = []
    return mock


@pytest.fixture
def mock_category_repo() -> MagicMock:
    """Mock de IQuestionCategoryRepository : toute categorie est connue."""
    mock = MagicMock(spec=IQuestionCategoryRepository)
    mock.find_by_name.side_effect = lambda name: QuestionCategory(id=1, category_name=name)
    return mock


@pytest.fixture
def mock_evaluation_repo() -> MagicMock:
    """Mock de ICohortCourseEvaluationRepository (aucune evaluation par defaut)."""
    mock = MagicMock(spec=ICohortCourseEvaluationRepository)
    mock.get_by_id.return_value = None
    mock.find_by_cohort_course.return_value = []
    mock.find_by_trainee.return_value = []
    mock.find_by_trainee_and_cohort_course.return_value = None
    mock.save.side_effect = lambda evaluation: evaluation
    return mock


@pytest.fixture
def memory_session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire, schema cree."""
    from src.infrastructure.persistence import models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans tmp_path."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )
