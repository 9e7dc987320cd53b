"""
Service des aeroports : CRUD et validation du code IATA.

La longueur du code est verifiee avant toute lecture en base, y compris
dans update() : une erreur de code est levee meme si l'aeroport cible
n'existe pas.
"""

from dataclasses import replace

from loguru import logger

from src.core.entities.aviation import Airport
from src.core.errors import (
    AIRPORT_CODE_LENGTH,
    AIRPORT_NOT_FOUND,
    BadRequestError,
    NotFoundError,
)
from src.core.ports.repositories import IAirportRepository

# Longueur d'un code aeroport (IATA)
AIRPORT_CODE_SIZE = 3


class AirportService:
    """
    Service de gestion des aeroports.

    Example:
        service = AirportService(airport_repo=repo)
        airport = service.create(Airport(name="El Dorado", code="BOG", ...))
    """

    def __init__(self, airport_repo: IAirportRepository) -> None:
        self._airport_repo = airport_repo

    def _check_code(self, airport: Airport) -> None:
        if len(airport.code) != AIRPORT_CODE_SIZE:
            logger.warning("Code aeroport invalide", code=airport.code)
            raise BadRequestError(AIRPORT_CODE_LENGTH)

    def find_all(self) -> list[Airport]:
        """Retourne tous les aeroports avec leurs compagnies."""
        return self._airport_repo.list_all()

    def find_one(self, airport_id: str) -> Airport:
        """
        Retourne un aeroport avec ses compagnies.

        Raises:
            NotFoundError: Si aucun aeroport n'a cet ID
        """
        airport = self._airport_repo.get_by_id(airport_id)
        if airport is None:
            raise NotFoundError(AIRPORT_NOT_FOUND)
        return airport

    def create(self, airport: Airport) -> Airport:
        """
        Cree un aeroport, sans compagnie associee.

        Raises:
            BadRequestError: Si le code ne fait pas 3 caracteres
        """
        self._check_code(airport)
        created = self._airport_repo.save(replace(airport, id=None, airlines=[]))
        logger.info("Aeroport cree", airport_id=created.id, code=created.code)
        return created

    def update(self, airport_id: str, airport: Airport) -> Airport:
        """
        Remplace les champs d'un aeroport existant.

        L'ID du chemin prend le pas sur celui de l'entite fournie.

        Raises:
            BadRequestError: Si le code ne fait pas 3 caracteres
            NotFoundError: Si aucun aeroport n'a cet ID
        """
        self._check_code(airport)
        if self._airport_repo.get_by_id(airport_id) is None:
            raise NotFoundError(AIRPORT_NOT_FOUND)

        updated = self._airport_repo.save(replace(airport, id=airport_id))
        logger.info("Aeroport modifie", airport_id=airport_id)
        return updated

    def delete(self, airport_id: str) -> None:
        """
        Supprime un aeroport et ses liens (les compagnies sont conservees).

        Raises:
            NotFoundError: Si aucun aeroport n'a cet ID
        """
        if not self._airport_repo.delete(airport_id):
            raise NotFoundError(AIRPORT_NOT_FOUND)
        logger.info("Aeroport supprime", airport_id=airport_id)
