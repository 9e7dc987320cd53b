"""
Service d'association compagnie <-> aeroport.

Gere la relation plusieurs-a-plusieurs depuis le cote compagnie : ajout d'un
aeroport, lecture d'un ou de tous les aeroports lies, remplacement complet de
la liste et retrait d'un aeroport.

Regles communes:
- Les controles d'existence (compagnie, aeroport) passent toujours avant le
  controle d'appartenance : un ID invalide donne NotFoundError, jamais
  NotAssociatedError.
- Chaque operation fait au plus une ecriture, via IAirlineRepository.save().
- L'ajout ne verifie pas les doublons : ajouter deux fois le meme aeroport
  produit deux entrees.
"""

from loguru import logger

from src.core.entities.aviation import Airline, Airport
from src.core.errors import (
    AIRLINE_NOT_FOUND,
    AIRPORT_NOT_FOUND,
    NotAssociatedError,
    NotFoundError,
)
from src.core.ports.repositories import IAirlineRepository, IAirportRepository


class AirlineAirportService:
    """
    Service de gestion des aeroports associes a une compagnie.

    Les deux repositories doivent partager la meme session pour que chaque
    operation s'execute dans une seule unite de travail.

    Example:
        service = AirlineAirportService(
            airline_repo=airline_repo,
            airport_repo=airport_repo,
        )
        airline = service.add_airport_to_airline(airline_id, airport_id)
        airports = service.find_airports_by_airline_id(airline_id)
    """

    def __init__(
        self,
        airline_repo: IAirlineRepository,
        airport_repo: IAirportRepository,
    ) -> None:
        """
        Initialise le service d'association.

        Args:
            airline_repo: Repository des compagnies (proprietaire des liens)
            airport_repo: Repository des aeroports
        """
        self._airline_repo = airline_repo
        self._airport_repo = airport_repo

    def _get_airline(self, airline_id: str) -> Airline:
        airline = self._airline_repo.get_by_id(airline_id)
        if airline is None:
            logger.warning("Compagnie introuvable", airline_id=airline_id)
            raise NotFoundError(AIRLINE_NOT_FOUND)
        return airline

    def _get_airport(self, airport_id: str) -> Airport:
        airport = self._airport_repo.get_by_id(airport_id)
        if airport is None:
            logger.warning("Aeroport introuvable", airport_id=airport_id)
            raise NotFoundError(AIRPORT_NOT_FOUND)
        return airport

    def add_airport_to_airline(self, airline_id: str, airport_id: str) -> Airline:
        """
        Ajoute un aeroport a la liste d'une compagnie.

        L'aeroport est controle avant la compagnie.

        Returns:
            La compagnie mise a jour avec sa liste complete

        Raises:
            NotFoundError: Si l'aeroport ou la compagnie n'existe pas
        """
        airport = self._get_airport(airport_id)
        airline = self._get_airline(airline_id)

        airline.airports.append(airport)
        updated = self._airline_repo.save(airline)
        logger.info(
            "Aeroport associe",
            airline_id=airline_id,
            airport_id=airport_id,
            total=len(updated.airports),
        )
        return updated

    def find_airport_by_airline_id_airport_id(
        self, airline_id: str, airport_id: str
    ) -> Airport:
        """
        Retourne un aeroport s'il est associe a la compagnie.

        Raises:
            NotFoundError: Si la compagnie ou l'aeroport n'existe pas
            NotAssociatedError: Si les deux existent sans etre lies
        """
        airline = self._get_airline(airline_id)
        airport = self._get_airport(airport_id)

        if not airline.has_airport(airport.id):
            raise NotAssociatedError()
        return airport

    def find_airports_by_airline_id(self, airline_id: str) -> list[Airport]:
        """
        Retourne la liste (eventuellement vide) des aeroports d'une compagnie.

        Raises:
            NotFoundError: Si la compagnie n'existe pas
        """
        return self._get_airline(airline_id).airports

    def update_airports_for_airline(
        self, airline_id: str, airports: list[Airport]
    ) -> Airline:
        """
        Remplace toute la liste des aeroports d'une compagnie.

        Chaque aeroport fourni est recharge par son ID ; la liste stockee est
        celle des aeroports recharges, dans l'ordre fourni.

        Raises:
            NotFoundError: Si la compagnie, ou le premier aeroport manquant, n'existe pas
        """
        airline = self._get_airline(airline_id)

        validated = [self._get_airport(airport.id) for airport in airports]

        airline.airports = validated
        updated = self._airline_repo.save(airline)
        logger.info(
            "Aeroports remplaces",
            airline_id=airline_id,
            total=len(updated.airports),
        )
        return updated

    def delete_airport_from_airline(self, airline_id: str, airport_id: str) -> None:
        """
        Retire un aeroport (toutes ses occurrences) de la liste d'une compagnie.

        Raises:
            NotFoundError: Si la compagnie ou l'aeroport n'existe pas
            NotAssociatedError: Si les deux existent sans etre lies
        """
        airline = self._get_airline(airline_id)
        airport = self._get_airport(airport_id)

        if not airline.has_airport(airport.id):
            raise NotAssociatedError()

        airline.airports = [a for a in airline.airports if a.id != airport.id]
        self._airline_repo.save(airline)
        logger.info("Aeroport dissocie", airline_id=airline_id, airport_id=airport_id)
