"""
Modeles SQLModel pour la base de donnees AeroReg.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- airlines: Compagnies aeriennes
- airports: Aeroports
- airline_airports: Liens compagnie <-> aeroport (relation plusieurs-a-plusieurs)

La relation est portee par une seule table de liens ; les deux vues
(aeroports d'une compagnie, compagnies d'un aeroport) en sont derivees
par les repositories.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    """Genere un identifiant opaque (UUID4 en texte)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Horodatage courant en UTC (avec fuseau)."""
    return datetime.now(timezone.utc)


class AirlineModel(SQLModel, table=True):
    """Modele representant une compagnie aerienne dans la base de donnees."""

    __tablename__ = "airlines"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = Field(index=True)
    description: str
    foundation_date: date
    web_page: str
    created_at: datetime | None = Field(default_factory=utc_now)
    updated_at: datetime | None = Field(default_factory=utc_now)


class AirportModel(SQLModel, table=True):
    """Modele representant un aeroport dans la base de donnees."""

    __tablename__ = "airports"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = Field(index=True)
    code: str = Field(index=True)  # ex: "BOG"
    country: str
    city: str
    created_at: datetime | None = Field(default_factory=utc_now)
    updated_at: datetime | None = Field(default_factory=utc_now)


class AirlineAirportLink(SQLModel, table=True):
    """
    Lien entre une compagnie et un aeroport.

    La cle est un identifiant auto-incremente et non le couple
    (airline_id, airport_id) : un meme couple peut apparaitre plusieurs fois.
    L'ordre des identifiants donne l'ordre d'ajout.
    """

    __tablename__ = "airline_airports"

    id: int | None = Field(default=None, primary_key=True)
    airline_id: str = Field(foreign_key="airlines.id", index=True)
    airport_id: str = Field(foreign_key="airports.id", index=True)
