"""
Objets de requete valides a la frontiere (CLI, HTTP).

Les DTO pydantic portent les regles de forme des champs (chaines non vides,
date, URL). validate_dto() construit un DTO a partir d'une charge utile brute
ou leve BadRequestError avec la premiere regle violee.

Les regles metier (longueur du code aeroport, date dans le passe) restent
dans les services.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from src.core.entities.aviation import Airline, Airport
from src.core.errors import BadRequestError

_URL_ADAPTER = TypeAdapter(HttpUrl)

DtoT = TypeVar("DtoT", bound=BaseModel)


class AirlineDto(BaseModel):
    """Donnees d'entree pour creer ou modifier une compagnie."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    foundation_date: date
    web_page: str = Field(min_length=1)

    @field_validator("web_page")
    @classmethod
    def check_web_page(cls, v: str) -> str:
        """Verifie que web_page est une URL http(s) valide, sans la normaliser."""
        try:
            _URL_ADAPTER.validate_python(v)
        except ValidationError as exc:
            raise ValueError("web_page must be a valid URL") from exc
        return v

    def to_entity(self) -> Airline:
        """Convertit le DTO en entite (sans identifiant ni aeroports)."""
        return Airline(
            name=self.name,
            description=self.description,
            foundation_date=self.foundation_date,
            web_page=self.web_page,
        )


class AirportDto(BaseModel):
    """Donnees d'entree pour creer ou modifier un aeroport."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    country: str = Field(min_length=1)
    city: str = Field(min_length=1)

    def to_entity(self) -> Airport:
        """Convertit le DTO en entite (sans identifiant ni compagnies)."""
        return Airport(
            name=self.name,
            code=self.code,
            country=self.country,
            city=self.city,
        )


def validate_dto(dto_class: type[DtoT], payload: Mapping[str, Any]) -> DtoT:
    """
    Construit un DTO a partir d'une charge utile brute.

    Args:
        dto_class: Classe DTO cible (AirlineDto, AirportDto)
        payload: Valeurs brutes indexees par nom de champ

    Returns:
        Le DTO valide

    Raises:
        BadRequestError: Avec la premiere regle violee, prefixee du champ
    """
    try:
        return dto_class.model_validate(dict(payload))
    except ValidationError as exc:
        first = exc.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or dto_class.__name__
        raise BadRequestError(f"{field_name}: {first['msg']}") from exc
