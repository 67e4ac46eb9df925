# services/pirep-service/src/apps/core/services/pilot_stats_service.py
"""
Pilot Stats Service

Maintains the pilot aggregates derived from accepted reports: flight
count, flight time, current airport, last report and rank.
"""

import logging
from typing import Any, Dict

from django.db import transaction
from django.db.models import Count, Sum

from .. import configuration
from ..models import Pilot, Pirep
from .aggregates import check_sign, latest_accepted
from .rank_service import RankEngine

logger = logging.getLogger(__name__)


class PilotStatsService:
    """Service class for pilot aggregate maintenance."""

    @classmethod
    def apply(
        cls,
        pilot: Pilot,
        pirep: Pirep,
        sign: int,
        config: 'configuration.PirepSettings' = None,
        rank_engine: RankEngine = None,
    ) -> Pilot:
        """
        Add (+1) or remove (-1) one accepted report from the pilot's totals.

        Only +1 moves the pilot, to the arrival of the most recent accepted
        report; a reversal never puts the pilot back.
        """
        check_sign(sign)
        rank_engine = rank_engine or RankEngine.from_database(config)

        pilot.flights = max(0, pilot.flights + sign)
        pilot.flight_time = max(0, pilot.flight_time + sign * (pirep.flight_time or 0))

        update_fields = ['flights', 'flight_time', 'rank', 'updated_at']
        if sign > 0:
            accepted = Pirep.objects.filter(pilot_id=pilot.id, state=Pirep.State.ACCEPTED)
            latest = latest_accepted(accepted, pirep)
            pilot.curr_airport_id = latest.arr_airport_id
            pilot.last_pirep = latest
            update_fields += ['curr_airport_id', 'last_pirep']

        cls._assign_rank(pilot, rank_engine)
        pilot.save(update_fields=update_fields)

        logger.info(
            f"Pilot {pilot.id} stats {'+' if sign > 0 else '-'}{pirep.flight_time}m "
            f"from PIREP {pirep.id}: flights={pilot.flights} flight_time={pilot.flight_time}"
        )
        return pilot

    @classmethod
    def recalculate(
        cls,
        pilot: Pilot,
        config: 'configuration.PirepSettings' = None,
        rank_engine: RankEngine = None,
    ) -> Pilot:
        """Rebuild the pilot's aggregates from its accepted reports."""
        rank_engine = rank_engine or RankEngine.from_database(config)
        accepted = Pirep.objects.filter(pilot=pilot, state=Pirep.State.ACCEPTED)

        totals = accepted.aggregate(count=Count('id'), minutes=Sum('flight_time'))
        latest = latest_accepted(accepted)

        pilot.flights = totals['count'] or 0
        pilot.flight_time = totals['minutes'] or 0
        if latest is not None:
            pilot.curr_airport_id = latest.arr_airport_id
            pilot.last_pirep = latest
        else:
            pilot.curr_airport_id = pilot.home_airport_id
            pilot.last_pirep = None

        cls._assign_rank(pilot, rank_engine)
        pilot.save(update_fields=[
            'flights', 'flight_time', 'curr_airport_id', 'last_pirep', 'rank', 'updated_at',
        ])

        logger.debug(f"Recalculated pilot {pilot.id}: flights={pilot.flights} flight_time={pilot.flight_time}")
        return pilot

    @classmethod
    def recalculate_all(cls, config: 'configuration.PirepSettings' = None) -> Dict[str, Any]:
        """Recalculate every pilot, skipping and logging failures."""
        rank_engine = RankEngine.from_database(config)
        updated = 0
        failed = []

        for pilot in Pilot.objects.exclude(state=Pilot.State.DELETED).iterator():
            try:
                with transaction.atomic():
                    cls.recalculate(pilot, rank_engine=rank_engine)
                updated += 1
            except Exception:
                logger.exception(f"Failed to recalculate stats for pilot {pilot.id}")
                failed.append(str(pilot.id))

        logger.info(f"Recalculated {updated} pilots, {len(failed)} failed")
        return {'updated': updated, 'failed': failed}

    @staticmethod
    def _assign_rank(pilot: Pilot, rank_engine: RankEngine) -> Pilot:
        new_rank = rank_engine.rank_for_pilot(pilot)
        if new_rank is None:
            return pilot
        if new_rank.id != pilot.rank_id:
            logger.info(f"Pilot {pilot.id} rank changed to {new_rank.name}")
        pilot.rank = new_rank
        return pilot
