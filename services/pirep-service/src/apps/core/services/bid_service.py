# services/pirep-service/src/apps/core/services/bid_service.py
"""
Bid Service

Pilots bid on scheduled flights; an accepted report can clear the bid
for the flight it was flown against.
"""

import logging
from typing import List

from django.db import transaction

from .. import configuration
from ..models import Bid, Flight, Pilot, Pirep
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class BidService:
    """Service class for flight bids."""

    @classmethod
    @transaction.atomic
    def add_bid(cls, flight: Flight, pilot: Pilot) -> Bid:
        """
        Add a bid. Adding a bid that already exists returns it unchanged.

        Raises:
            ValidationError: If the flight is not active
        """
        if not flight.active:
            raise ValidationError(
                message=f"Flight {flight.flight_number} is not active",
                field='flight_id'
            )

        bid, created = Bid.objects.get_or_create(pilot=pilot, flight=flight)
        if created:
            logger.info(f"Pilot {pilot.id} bid on flight {flight.id}")
        return bid

    @classmethod
    def remove_bid(cls, flight: Flight, pilot: Pilot) -> int:
        deleted, _ = Bid.objects.filter(pilot=pilot, flight=flight).delete()
        if deleted:
            logger.info(f"Removed bid of pilot {pilot.id} on flight {flight.id}")
        return deleted

    @classmethod
    def bids_for_pilot(cls, pilot: Pilot) -> List[Bid]:
        return list(
            Bid.objects
            .filter(pilot=pilot)
            .select_related('flight', 'flight__airline')
            .order_by('-created_at')
        )

    @classmethod
    def reconcile(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> int:
        """
        Drop the pilot's bid on the report's flight once the report is accepted.

        No-op unless pireps.remove_bid_on_accept is set and the report was
        flown against a scheduled flight. Returns the number of bids removed.
        """
        config = configuration.get_settings(config)
        if not config.remove_bid_on_accept or pirep.flight_id is None:
            return 0

        deleted, _ = Bid.objects.filter(pilot_id=pirep.pilot_id, flight_id=pirep.flight_id).delete()
        logger.info(f"Bid reconciliation for PIREP {pirep.id} removed {deleted} bid(s)")
        return deleted
