"""
Aviation entities.

Entities representing airlines and airports, linked by a single
many-to-many association navigable from both sides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Airport:
    """
    An airfield served by zero or more airlines.

    Attributes:
        id: Opaque identifier assigned by the store
        name: Airport name
        code: IATA-style code, exactly 3 characters
        country: Country name
        city: City name
        airlines: Associated airlines (shallow: their own airport lists are empty)
    """

    id: Optional[str] = None
    name: str = ""
    code: str = ""
    country: str = ""
    city: str = ""
    airlines: list[Airline] = field(default_factory=list)


@dataclass
class Airline:
    """
    An air carrier.

    Attributes:
        id: Opaque identifier assigned by the store
        name: Airline name
        description: Free text description
        foundation_date: Date the airline was founded
        web_page: Public web site URL
        airports: Associated airports, in store order (duplicates possible)
    """

    id: Optional[str] = None
    name: str = ""
    description: str = ""
    foundation_date: Optional[date] = None
    web_page: str = ""
    airports: list[Airport] = field(default_factory=list)

    def has_airport(self, airport_id: str) -> bool:
        """Return True if the airport appears in the associated list."""
        return any(airport.id == airport_id for airport in self.airports)
