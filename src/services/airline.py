"""
Service des compagnies aeriennes : CRUD et regle de date de fondation.

La date de fondation n'est verifiee qu'a la modification : create() accepte
une date future.
"""

from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

from loguru import logger

from src.core.entities.aviation import Airline
from src.core.errors import (
    AIRLINE_FOUNDATION_DATE,
    AIRLINE_NOT_FOUND,
    BadRequestError,
    NotFoundError,
)
from src.core.ports.repositories import IAirlineRepository


def is_in_past(value: Optional[date]) -> bool:
    """
    Indique si une date est strictement anterieure a l'instant present.

    Une date sans heure designe minuit : la date du jour est donc dans le passe.
    """
    if value is None:
        return False
    moment = value if isinstance(value, datetime) else datetime.combine(value, time.min)
    return moment < datetime.now(moment.tzinfo)


class AirlineService:
    """
    Service de gestion des compagnies aeriennes.

    Les associations ne sont pas modifiees ici : create() part d'une liste
    vide et update() conserve la liste existante. Voir AirlineAirportService.
    """

    def __init__(self, airline_repo: IAirlineRepository) -> None:
        self._airline_repo = airline_repo

    def find_all(self) -> list[Airline]:
        """Retourne toutes les compagnies avec leurs aeroports."""
        return self._airline_repo.list_all()

    def find_one(self, airline_id: str) -> Airline:
        """
        Retourne une compagnie avec ses aeroports.

        Raises:
            NotFoundError: Si aucune compagnie n'a cet ID
        """
        airline = self._airline_repo.get_by_id(airline_id)
        if airline is None:
            raise NotFoundError(AIRLINE_NOT_FOUND)
        return airline

    def create(self, airline: Airline) -> Airline:
        """Cree une compagnie sans aeroport associe."""
        created = self._airline_repo.save(replace(airline, id=None, airports=[]))
        logger.info("Compagnie creee", airline_id=created.id, name=created.name)
        return created

    def update(self, airline_id: str, airline: Airline) -> Airline:
        """
        Remplace les champs d'une compagnie existante.

        Raises:
            BadRequestError: Si la date de fondation n'est pas dans le passe
            NotFoundError: Si aucune compagnie n'a cet ID
        """
        if not is_in_past(airline.foundation_date):
            logger.warning(
                "Date de fondation refusee",
                airline_id=airline_id,
                foundation_date=str(airline.foundation_date),
            )
            raise BadRequestError(AIRLINE_FOUNDATION_DATE)

        persisted = self._airline_repo.get_by_id(airline_id)
        if persisted is None:
            raise NotFoundError(AIRLINE_NOT_FOUND)

        updated = self._airline_repo.save(
            replace(airline, id=airline_id, airports=persisted.airports)
        )
        logger.info("Compagnie modifiee", airline_id=airline_id)
        return updated

    def delete(self, airline_id: str) -> None:
        """
        Supprime une compagnie et ses liens (les aeroports sont conserves).

        Raises:
            NotFoundError: Si aucune compagnie n'a cet ID
        """
        if not self._airline_repo.delete(airline_id):
            raise NotFoundError(AIRLINE_NOT_FOUND)
        logger.info("Compagnie supprimee", airline_id=airline_id)
