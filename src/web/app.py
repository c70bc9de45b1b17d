"""
Application FastAPI du portail de feedback.

Initialise l'application web avec le Container DI, traduit les
exceptions metier en reponses HTTP et monte les routes sous /feedback.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.exceptions import BusinessRuleError, ResourceNotFoundError
from ..infrastructure.persistence.database import dispose_engine
from .routes.evaluations import router as evaluations_router

API_PREFIX = "/feedback"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au demarrage et ferme l'engine a l'arret."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield
    dispose_engine()


def register_exception_handlers(app: FastAPI) -> None:
    """Traduit les exceptions metier en reponses JSON."""

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError):
        logger.info("Ressource introuvable", path=request.url.path, detail=exc.message)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(BusinessRuleError)
    async def business_rule_handler(request: Request, exc: BusinessRuleError):
        logger.warning("Regle metier violee", path=request.url.path, detail=exc.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Construit l'application (sans lifespan pour les tests avec container simule)."""
    application = FastAPI(title="QA Feedback", lifespan=lifespan if use_lifespan else None)
    register_exception_handlers(application)
    application.include_router(evaluations_router, prefix=API_PREFIX)
    return application


app = create_app()
