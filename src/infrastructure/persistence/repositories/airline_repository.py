"""
Implementation SQLModel du repository Airline.

Implemente l'interface IAirlineRepository pour la persistance des compagnies
et de leurs liens vers les aeroports via SQLModel.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.aviation import Airline, Airport
from src.core.ports.repositories import IAirlineRepository
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


class SQLModelAirlineRepository(IAirlineRepository):
    """
    Repository SQLModel pour les compagnies aeriennes.

    Cote proprietaire de la relation : save() reecrit les lignes de
    airline_airports a partir de airline.airports.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _linked_airports(self, airline_id: str) -> list[Airport]:
        """Aeroports lies a une compagnie, dans l'ordre des liens (doublons inclus)."""
        statement = (
            select(AirportModel)
            .join(AirlineAirportLink, AirlineAirportLink.airport_id == AirportModel.id)
            .where(AirlineAirportLink.airline_id == airline_id)
            .order_by(AirlineAirportLink.id)
        )
        return [airport_to_entity(model) for model in self._session.exec(statement).all()]

    def _to_entity(self, model: AirlineModel) -> Airline:
        return airline_to_entity(model, self._linked_airports(model.id))

    def _to_model(self, entity: Airline) -> AirlineModel:
        model = AirlineModel(
            name=entity.name,
            description=entity.description,
            foundation_date=entity.foundation_date,
            web_page=entity.web_page,
        )
        if entity.id:
            model.id = entity.id
        return model

    def _remove_links(self, airline_id: str) -> None:
        statement = select(AirlineAirportLink).where(
            AirlineAirportLink.airline_id == airline_id
        )
        for link in self._session.exec(statement).all():
            self._session.delete(link)

    def list_all(self) -> list[Airline]:
        """Liste toutes les compagnies avec leurs aeroports."""
        models = self._session.exec(select(AirlineModel)).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, airline_id: str) -> Optional[Airline]:
        """Recupere une compagnie et ses aeroports par son ID."""
        model = self._session.get(AirlineModel, airline_id)
        if model:
            return self._to_entity(model)
        return None

    def save(self, airline: Airline) -> Airline:
        """Sauvegarde une compagnie (insertion ou mise a jour) et remplace ses liens."""
        existing = self._session.get(AirlineModel, airline.id) if airline.id else None

        if existing:
            # Mise a jour
            existing.name = airline.name
            existing.description = airline.description
            existing.foundation_date = airline.foundation_date
            existing.web_page = airline.web_page
            existing.updated_at = utc_now()
            model = existing
        else:
            # Insertion
            model = self._to_model(airline)

        self._session.add(model)
        # La compagnie doit exister avant l'insertion des liens
        self._session.flush()

        self._remove_links(model.id)
        for airport in airline.airports:
            self._session.add(AirlineAirportLink(airline_id=model.id, airport_id=airport.id))

        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, airline_id: str) -> bool:
        """Supprime une compagnie et ses liens ; les aeroports sont conserves."""
        model = self._session.get(AirlineModel, airline_id)
        if model is None:
            return False

        self._remove_links(airline_id)
        self._session.flush()
        self._session.delete(model)
        self._session.commit()
        return True
