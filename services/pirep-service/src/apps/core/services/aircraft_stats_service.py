# services/pirep-service/src/apps/core/services/aircraft_stats_service.py
"""
Aircraft Stats Service

Keeps aircraft flight time and location consistent with accepted
reports, incrementally on each transition or by full recalculation.
"""

import logging
from typing import Any, Dict

from django.db import transaction
from django.db.models import Sum

from ..models import Aircraft, Pirep
from .aggregates import check_sign, latest_accepted

logger = logging.getLogger(__name__)


class AircraftStatsService:
    """Service class for aircraft aggregate maintenance."""

    @classmethod
    def apply(cls, aircraft: Aircraft, pirep: Pirep, sign: int) -> Aircraft:
        """
        Add (+1) or remove (-1) one accepted report's flight time.

        On +1 the aircraft moves to the arrival of its most recent accepted
        report, which is not this one when an older report is accepted late.
        """
        check_sign(sign)

        aircraft.flight_time = max(0, aircraft.flight_time + sign * (pirep.flight_time or 0))
        update_fields = ['flight_time', 'updated_at']
        if sign > 0:
            accepted = Pirep.objects.filter(aircraft_id=aircraft.id, state=Pirep.State.ACCEPTED)
            aircraft.airport_id = latest_accepted(accepted, pirep).arr_airport_id
            update_fields.append('airport_id')

        aircraft.save(update_fields=update_fields)
        logger.info(
            f"Aircraft {aircraft.registration} flight_time={aircraft.flight_time} "
            f"airport={aircraft.airport_id} after PIREP {pirep.id}"
        )
        return aircraft

    @classmethod
    def recalculate(cls, aircraft: Aircraft) -> Aircraft:
        """Rebuild flight time and location from the aircraft's accepted reports."""
        accepted = Pirep.objects.filter(aircraft=aircraft, state=Pirep.State.ACCEPTED)

        aircraft.flight_time = accepted.aggregate(minutes=Sum('flight_time'))['minutes'] or 0
        latest = latest_accepted(accepted)
        if latest is not None:
            aircraft.airport_id = latest.arr_airport_id

        aircraft.save(update_fields=['flight_time', 'airport_id', 'updated_at'])
        logger.debug(f"Recalculated aircraft {aircraft.registration}: flight_time={aircraft.flight_time}")
        return aircraft

    @classmethod
    def recalculate_stats(cls) -> Dict[str, Any]:
        """
        Recalculate every aircraft.

        Each aircraft runs in its own savepoint so one failure does not undo
        the others.

        Returns:
            {'updated': count, 'failed': [aircraft ids]}
        """
        updated = 0
        failed = []

        for aircraft in Aircraft.objects.all().iterator():
            try:
                with transaction.atomic():
                    cls.recalculate(aircraft)
                updated += 1
            except Exception:
                logger.exception(f"Failed to recalculate stats for aircraft {aircraft.id}")
                failed.append(str(aircraft.id))

        logger.info(f"Recalculated {updated} aircraft, {len(failed)} failed")
        return {'updated': updated, 'failed': failed}
