"""
Point d'entree CLI du portail de feedback.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from .adapters.cli.commands import course_evaluations, trainee_evaluations, trainer_courses
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="qa-feedback",
    help="Portail de feedback des formations",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs console en DEBUG"),
    ] = False,
) -> None:
    """QA Feedback - Evaluations des sessions de cours."""
    if verbose:
        settings = get_config()
        configure_logging(
            log_level="DEBUG",
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )


app.command(name="trainer-courses")(trainer_courses)
app.command(name="trainee-evaluations")(trainee_evaluations)
app.command(name="course-evaluations")(course_evaluations)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration QA Feedback")
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"API : {config.api_host}:{config.api_port}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"QA Feedback v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Cree les tables de la base de donnees si necessaire."""
    container.database.init()
    typer.echo(f"Base de donnees initialisee : {get_config().database_url}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web du portail."""
    import uvicorn

    config = get_config()
    host = host or config.api_host
    port = port or config.api_port
    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de QA Feedback", version=__version__)

    app()


if __name__ == "__main__":
    main()
