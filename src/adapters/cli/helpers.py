"""
Utilitaires partages pour les commandes CLI du portail de feedback.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- with_evaluation_service : decorateur injectant la facade des evaluations
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container
from src.core.exceptions import QaPortalError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def with_evaluation_service(func):
    """
    Decorateur qui injecte la facade des evaluations en premier argument.

    Ferme la session en sortie. Les erreurs metier sont affichees en rouge
    et terminent la commande avec le code 1.
    """
    @wraps(func)
    @with_container()
    def wrapper(container, *args, **kwargs):
        service = container.evaluation_service()
        try:
            return func(service, *args, **kwargs)
        except QaPortalError as exc:
            console.print(f"[red]Erreur:[/red] {exc.message}")
            raise typer.Exit(code=1) from exc
        finally:
            service.close()
    return wrapper
