# services/pirep-service/src/apps/api/serializers/__init__.py
"""
PIREP Service API Serializers
"""

from .pirep_serializers import (
    PirepListSerializer,
    PirepDetailSerializer,
    PirepCreateSerializer,
    PirepStateFilterSerializer,
)

from .acars_serializers import (
    RouteEntrySerializer,
    RouteUpdateSerializer,
    PositionSerializer,
    PositionCreateSerializer,
    PositionBatchSerializer,
)

from .aircraft_serializers import AircraftSerializer

from .bid_serializers import (
    BidSerializer,
    BidCreateSerializer,
)

__all__ = [
    # PIREP
    'PirepListSerializer',
    'PirepDetailSerializer',
    'PirepCreateSerializer',
    'PirepStateFilterSerializer',

    # ACARS
    'RouteEntrySerializer',
    'RouteUpdateSerializer',
    'PositionSerializer',
    'PositionCreateSerializer',
    'PositionBatchSerializer',

    # Aircraft
    'AircraftSerializer',

    # Bids
    'BidSerializer',
    'BidCreateSerializer',
]
