# services/pirep-service/src/apps/core/services/__init__.py
"""
PIREP Service - Service Layer

Business logic for the report lifecycle and the aggregates it maintains.
"""

from .exceptions import (
    PirepServiceError,
    ValidationError,
    NotFoundError,
    StateTransitionError,
    InactiveReportError,
    ConfigurationError,
)

from .acars_service import AcarsService
from .aircraft_stats_service import AircraftStatsService
from .bid_service import BidService
from .duplicate_service import DuplicateDetector
from .pilot_stats_service import PilotStatsService
from .pirep_service import PirepService
from .rank_service import RankEngine

__all__ = [
    # Exceptions
    'PirepServiceError',
    'ValidationError',
    'NotFoundError',
    'StateTransitionError',
    'InactiveReportError',
    'ConfigurationError',
    # Services
    'AcarsService',
    'AircraftStatsService',
    'BidService',
    'DuplicateDetector',
    'PilotStatsService',
    'PirepService',
    'RankEngine',
]
