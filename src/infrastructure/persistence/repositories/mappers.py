"""
Conversions entre modeles DB (SQLModel) et entites domaine (dataclass).

Partagees par les deux repositories : chacun doit construire les entites
de l'autre cote de la relation (en version superficielle, sans leurs liens).
"""

from collections.abc import Iterable

from src.core.entities.aviation import Airline, Airport
from src.infrastructure.persistence.models import AirlineModel, AirportModel


def airline_to_entity(model: AirlineModel, airports: Iterable[Airport] = ()) -> Airline:
    """
    Convertit un modele DB en entite domaine.

    Args:
        model: Le modele AirlineModel depuis la DB
        airports: Aeroports associes, dans l'ordre des liens

    Returns:
        L'entite Airline correspondante
    """
    return Airline(
        id=model.id,
        name=model.name,
        description=model.description,
        foundation_date=model.foundation_date,
        web_page=model.web_page,
        airports=list(airports),
    )


def airport_to_entity(model: AirportModel, airlines: Iterable[Airline] = ()) -> Airport:
    """
    Convertit un modele DB en entite domaine.

    Args:
        model: Le modele AirportModel depuis la DB
        airlines: Compagnies associees, dans l'ordre des liens

    Returns:
        L'entite Airport correspondante
    """
    return Airport(
        id=model.id,
        name=model.name,
        code=model.code,
        country=model.country,
        city=model.city,
        airlines=list(airlines),
    )
