"""
Fixtures pytest partagees pour les tests AeroReg.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire et session SQLModel
- Repositories SQLModel branches sur cette session
- Fabriques d'aeroports et de compagnies remplies avec Faker
"""

from datetime import date, timedelta
from typing import Callable, Iterator

import pytest
from faker import Faker
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.core.entities.aviation import Airline, Airport
from src.infrastructure.persistence import models  # noqa: F401
from src.infrastructure.persistence.repositories import (
    SQLModelAirlineRepository,
    SQLModelAirportRepository,
)


@pytest.fixture
def fake() -> Faker:
    """Generateur Faker avec graine fixe pour des donnees reproductibles."""
    generator = Faker()
    generator.seed_instance(3866)
    return generator


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire, partage par toutes les connexions du test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel ouverte sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def airline_repo(session: Session) -> SQLModelAirlineRepository:
    """Repository des compagnies sur la session de test."""
    return SQLModelAirlineRepository(session)


@pytest.fixture
def airport_repo(session: Session) -> SQLModelAirportRepository:
    """Repository des aeroports sur la meme session."""
    return SQLModelAirportRepository(session)


@pytest.fixture
def past_date(fake: Faker) -> Callable[[], date]:
    """Retourne une fonction donnant une date dans l'annee ecoulee."""
    return lambda: fake.date_between(start_date="-1y", end_date="-1d")


@pytest.fixture
def future_date() -> date:
    """Date situee un an dans le futur."""
    return date.today() + timedelta(days=365)


@pytest.fixture
def new_airport(fake: Faker) -> Callable[..., Airport]:
    """Fabrique d'aeroports non persistes."""
    def _new(**overrides) -> Airport:
        values = {
            "name": fake.word(),
            "code": fake.country_code(representation="alpha-3"),
            "country": fake.country(),
            "city": fake.city(),
        }
        values.update(overrides)
        return Airport(**values)
    return _new


@pytest.fixture
def new_airline(fake: Faker, past_date) -> Callable[..., Airline]:
    """Fabrique de compagnies non persistees."""
    def _new(**overrides) -> Airline:
        values = {
            "name": fake.word(),
            "description": fake.sentence(),
            "foundation_date": past_date(),
            "web_page": fake.url(),
        }
        values.update(overrides)
        return Airline(**values)
    return _new


@pytest.fixture
def make_airport(airport_repo, new_airport) -> Callable[..., Airport]:
    """Fabrique d'aeroports persistes."""
    return lambda **overrides: airport_repo.save(new_airport(**overrides))


@pytest.fixture
def make_airline(airline_repo, new_airline) -> Callable[..., Airline]:
    """Fabrique de compagnies persistees (aeroports optionnels via airports=[...])."""
    return lambda **overrides: airline_repo.save(new_airline(**overrides))


@pytest.fixture
def airports_list(make_airport) -> list[Airport]:
    """Cinq aeroports persistes."""
    return [make_airport() for _ in range(5)]


@pytest.fixture
def airlines_list(make_airline) -> list[Airline]:
    """Cinq compagnies persistees sans aeroport."""
    return [make_airline() for _ in range(5)]


@pytest.fixture
def airline(make_airline, airports_list) -> Airline:
    """Une compagnie persistee associee aux cinq aeroports de airports_list."""
    return make_airline(airports=list(airports_list))
