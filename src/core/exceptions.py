"""
Exceptions metier du portail de feedback.

Les couches externes (API web, CLI) traduisent ces exceptions :
- ResourceNotFoundError : ressource absente (HTTP 404)
- BusinessRuleError : regle metier violee ou donnees incoherentes (HTTP 400)
"""


class QaPortalError(Exception):
    """Exception de base du portail."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(QaPortalError):
    """Levee quand une ressource demandee n'existe pas."""


class BusinessRuleError(QaPortalError):
    """Levee quand une regle metier est violee."""
