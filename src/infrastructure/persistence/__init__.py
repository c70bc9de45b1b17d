"""
Module de persistance pour le portail de feedback.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository du domaine

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from src.infrastructure.persistence.database import (
    dispose_engine,
    get_engine,
    get_session,
    init_db,
)

__all__ = [
    "dispose_engine",
    "get_engine",
    "get_session",
    "init_db",
]
