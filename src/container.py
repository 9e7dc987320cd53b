"""
Container d'injection de dependances via dependency-injector.

Point de composition de l'application : les services recoivent leurs
repositories en parametres explicites, construits ici sur une session SQLModel.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelAirlineRepository,
    SQLModelAirportRepository,
)
from .services.airline import AirlineService
from .services.airline_airport import AirlineAirportService
from .services.airport import AirportService


def _build_airline_airport_service(session: Session) -> AirlineAirportService:
    """Construit le service d'association avec deux repositories sur une meme session."""
    return AirlineAirportService(
        airline_repo=SQLModelAirlineRepository(session),
        airport_repo=SQLModelAirportRepository(session),
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.airline_airport_service()
        airlines = container.airline_service().find_all()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    airline_repository = providers.Factory(
        SQLModelAirlineRepository,
        session=session,
    )
    airport_repository = providers.Factory(
        SQLModelAirportRepository,
        session=session,
    )

    # Services CRUD - un repository chacun
    airline_service = providers.Factory(
        AirlineService,
        airline_repo=airline_repository,
    )
    airport_service = providers.Factory(
        AirportService,
        airport_repo=airport_repository,
    )

    # Service d'association - les deux repositories partagent la session
    airline_airport_service = providers.Factory(
        _build_airline_airport_service,
        session=session,
    )
