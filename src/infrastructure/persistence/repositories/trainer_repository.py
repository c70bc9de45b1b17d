"""
Implementations SQLModel des repositories Trainer et Trainee.

Recherche des formateurs et stagiaires par nom d'utilisateur.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.portal import Trainee, Trainer
from src.core.ports.repositories import ITraineeRepository, ITrainerRepository
from src.infrastructure.persistence.models import TraineeModel, TrainerModel


def trainer_to_entity(model: TrainerModel) -> Trainer:
    """Convertit un modele TrainerModel en entite Trainer."""
    return Trainer(
        id=model.id,
        user_name=model.user_name,
        first_name=model.first_name,
        last_name=model.last_name,
    )


def trainee_to_entity(model: TraineeModel) -> Trainee:
    """Convertit un modele TraineeModel en entite Trainee."""
    return Trainee(
        id=model.id,
        user_name=model.user_name,
        first_name=model.first_name,
        last_name=model.last_name,
        cohort_id=model.cohort_id,
    )


class SQLModelTrainerRepository(ITrainerRepository):
    """Repository SQLModel pour les formateurs."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_user_name(self, user_name: str) -> Optional[Trainer]:
        """Recupere un formateur par son nom d'utilisateur."""
        statement = select(TrainerModel).where(TrainerModel.user_name == user_name)
        model = self._session.exec(statement).first()
        if model:
            return trainer_to_entity(model)
        return None


class SQLModelTraineeRepository(ITraineeRepository):
    """Repository SQLModel pour les stagiaires."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_user_name(self, user_name: str) -> Optional[Trainee]:
        """Recupere un stagiaire par son nom d'utilisateur."""
        statement = select(TraineeModel).where(TraineeModel.user_name == user_name)
        model = self._session.exec(statement).first()
        if model:
            return trainee_to_entity(model)
        return None
