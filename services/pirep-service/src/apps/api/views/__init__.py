# services/pirep-service/src/apps/api/views/__init__.py
"""
PIREP Service API Views
"""

from .pirep_views import PirepViewSet
from .aircraft_views import AircraftViewSet
from .bid_views import BidViewSet

__all__ = [
    'PirepViewSet',
    'AircraftViewSet',
    'BidViewSet',
]
