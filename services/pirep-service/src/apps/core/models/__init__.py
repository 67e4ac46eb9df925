# services/pirep-service/src/apps/core/models/__init__.py
"""
PIREP Service Models

Database models for the report lifecycle:
- Airlines, ranks and pilots
- Fleet aircraft and the flight schedule
- Bids on scheduled flights
- PIREPs and their ACARS route/position entries
"""

from .airline import Airline
from .rank import Rank
from .pilot import Pilot
from .aircraft import Aircraft
from .flight import Flight
from .bid import Bid
from .pirep import Pirep
from .acars import Acars

__all__ = [
    # Organization
    'Airline',
    'Rank',
    'Pilot',

    # Fleet and schedule
    'Aircraft',
    'Flight',
    'Bid',

    # Reports
    'Pirep',
    'Acars',
]
