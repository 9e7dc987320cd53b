"""
Application services layer (use cases).

Services enforce the business rules of the registry and translate missing
or invalid state into the shared business errors (src.core.errors).

This layer contains:
- AirportService: airport CRUD and code validation
- AirlineService: airline CRUD and foundation date validation
- AirlineAirportService: the airline <-> airport association

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.
"""

from src.services.airline import AirlineService
from src.services.airline_airport import AirlineAirportService
from src.services.airport import AirportService

__all__ = [
    "AirlineService",
    "AirlineAirportService",
    "AirportService",
]
