"""
Erreurs metier partagees par les services.

Chaque erreur porte un message fixe et un type (BusinessError) que la couche
frontiere (CLI, HTTP) traduit en code de sortie ou en statut HTTP.
Les erreurs d'infrastructure (SQLAlchemy) ne passent jamais par ces classes :
elles se propagent telles quelles.
"""

from enum import Enum
from typing import Any


class BusinessError(str, Enum):
    """Types d'erreurs metier avec leur statut HTTP associe."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    NOT_ASSOCIATED = "not_associated"

    @property
    def http_status(self) -> int:
        """Statut HTTP conventionnel pour ce type d'erreur."""
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    BusinessError.NOT_FOUND: 404,
    BusinessError.BAD_REQUEST: 400,
    BusinessError.NOT_ASSOCIATED: 412,
}


# Messages reproduits a l'identique pour les consommateurs existants
AIRLINE_NOT_FOUND = "The aerolinea with the given id was not found"
AIRPORT_NOT_FOUND = "The aeropuerto with the given id was not found"
AIRPORT_NOT_ASSOCIATED = (
    "The aeropuerto with the given id is not associated to the aerolinea"
)
AIRPORT_CODE_LENGTH = "The aeropuerto code should have 3 characters"
AIRLINE_FOUNDATION_DATE = "The aerolinea foundation date should be in the past"


class BusinessLogicException(Exception):
    """
    Exception de base pour les erreurs metier.

    Attributes:
        message: Message lisible, stable pour les consommateurs
        kind: Type d'erreur pour la traduction en statut
    """

    def __init__(self, message: str, kind: BusinessError) -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convertit l'erreur en dictionnaire pour une reponse de frontiere."""
        return {
            "error": self.kind.value,
            "status": self.kind.http_status,
            "message": self.message,
        }


class NotFoundError(BusinessLogicException):
    """Levee quand l'entite demandee n'existe pas."""

    def __init__(self, message: str) -> None:
        super().__init__(message, BusinessError.NOT_FOUND)


class BadRequestError(BusinessLogicException):
    """Levee quand un champ viole une regle de validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, BusinessError.BAD_REQUEST)


class NotAssociatedError(BusinessLogicException):
    """Levee quand les deux entites existent mais ne sont pas liees."""

    def __init__(self, message: str = AIRPORT_NOT_ASSOCIATED) -> None:
        super().__init__(message, BusinessError.NOT_ASSOCIATED)
