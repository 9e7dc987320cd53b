"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks ou stockage en mémoire pour les tests, etc.).

Les deux repositories chargent toujours l'entité avec sa collection associée.
Le côté compagnie possède la relation : IAirlineRepository.save() réécrit les
liens, IAirportRepository.save() ne les touche jamais.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.aviation import Airline, Airport


class IAirlineRepository(ABC):
    """
    Interface de stockage des compagnies aériennes.

    Définit les opérations pour persister et récupérer les entités Airline
    ainsi que leurs liens vers les aéroports.
    """

    @abstractmethod
    def list_all(self) -> list[Airline]:
        """Liste toutes les compagnies avec leurs aéroports."""
        ...

    @abstractmethod
    def get_by_id(self, airline_id: str) -> Optional[Airline]:
        """Récupère une compagnie et ses aéroports par son ID."""
        ...

    @abstractmethod
    def save(self, airline: Airline) -> Airline:
        """
        Sauvegarde une compagnie (insertion ou mise à jour).

        Les liens existants sont remplacés par le contenu de airline.airports,
        doublons compris.
        """
        ...

    @abstractmethod
    def delete(self, airline_id: str) -> bool:
        """Supprime une compagnie et ses liens. Retourne True si supprimée."""
        ...


class IAirportRepository(ABC):
    """
    Interface de stockage des aéroports.

    Définit les opérations pour persister et récupérer les entités Airport.
    """

    @abstractmethod
    def list_all(self) -> list[Airport]:
        """Liste tous les aéroports avec leurs compagnies."""
        ...

    @abstractmethod
    def get_by_id(self, airport_id: str) -> Optional[Airport]:
        """Récupère un aéroport et ses compagnies par son ID."""
        ...

    @abstractmethod
    def save(self, airport: Airport) -> Airport:
        """Sauvegarde les champs d'un aéroport (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete(self, airport_id: str) -> bool:
        """Supprime un aéroport et ses liens. Retourne True si supprimé."""
        ...
