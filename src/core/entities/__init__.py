"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- Airline: An air carrier and its associated airports
- Airport: An airfield and its associated airlines
"""

from src.core.entities.aviation import Airline, Airport

__all__ = [
    "Airline",
    "Airport",
]
