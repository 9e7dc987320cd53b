"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.airline_repository import (
    SQLModelAirlineRepository,
)
from src.infrastructure.persistence.repositories.airport_repository import (
    SQLModelAirportRepository,
)

__all__ = [
    "SQLModelAirlineRepository",
    "SQLModelAirportRepository",
]
