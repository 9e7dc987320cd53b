"""
Implementation SQLModel du repository Airport.

Implemente l'interface IAirportRepository pour la persistance des aeroports
via SQLModel. Les liens vers les compagnies sont lus ici mais jamais ecrits,
sauf leur suppression quand l'aeroport lui-meme est supprime.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.aviation import Airline, Airport
from src.core.ports.repositories import IAirportRepository
from src.infrastructure.persistence.models import (
    AirlineAirportLink,
    AirlineModel,
    AirportModel,
    utc_now,
)
from src.infrastructure.persistence.repositories.mappers import (
    airline_to_entity,
    airport_to_entity,
)


class SQLModelAirportRepository(IAirportRepository):
    """
    Repository SQLModel pour les aeroports.

    Implemente IAirportRepository avec conversion bidirectionnelle
    entre l'entite Airport (domaine) et AirportModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _linked_airlines(self, airport_id: str) -> list[Airline]:
        """Compagnies liees a un aeroport, dans l'ordre des liens."""
        statement = (
            select(AirlineModel)
            .join(AirlineAirportLink, AirlineAirportLink.airline_id == AirlineModel.id)
            .where(AirlineAirportLink.airport_id == airport_id)
            .order_by(AirlineAirportLink.id)
        )
        return [airline_to_entity(model) for model in self._session.exec(statement).all()]

    def _to_entity(self, model: AirportModel) -> Airport:
        return airport_to_entity(model, self._linked_airlines(model.id))

    def _to_model(self, entity: Airport) -> AirportModel:
        model = AirportModel(
            name=entity.name,
            code=entity.code,
            country=entity.country,
            city=entity.city,
        )
        if entity.id:
            model.id = entity.id
        return model

    def list_all(self) -> list[Airport]:
        """Liste tous les aeroports avec leurs compagnies."""
        models = self._session.exec(select(AirportModel)).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, airport_id: str) -> Optional[Airport]:
        """Recupere un aeroport et ses compagnies par son ID."""
        model = self._session.get(AirportModel, airport_id)
        if model:
            return self._to_entity(model)
        return None

    def save(self, airport: Airport) -> Airport:
        """Sauvegarde un aeroport (insertion ou mise a jour) sans toucher aux liens."""
        existing = self._session.get(AirportModel, airport.id) if airport.id else None

        if existing:
            existing.name = airport.name
            existing.code = airport.code
            existing.country = airport.country
            existing.city = airport.city
            existing.updated_at = utc_now()
            model = existing
        else:
            model = self._to_model(airport)

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, airport_id: str) -> bool:
        """Supprime un aeroport et ses liens ; les compagnies sont conservees."""
        model = self._session.get(AirportModel, airport_id)
        if model is None:
            return False

        statement = select(AirlineAirportLink).where(
            AirlineAirportLink.airport_id == airport_id
        )
        for link in self._session.exec(statement).all():
            self._session.delete(link)
        self._session.flush()
        self._session.delete(model)
        self._session.commit()
        return True
