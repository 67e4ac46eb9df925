# services/pirep-service/src/apps/core/services/rank_service.py
"""
Rank Engine

Maps a pilot's credited minutes to a rank and decides whether a report
may skip manual review.
"""

import logging
from typing import Iterable, List, Optional

from .. import configuration
from ..models import Pilot, Pirep, Rank

logger = logging.getLogger(__name__)


class RankEngine:
    """
    Rank lookup over an explicit rank table.

    The table holds only ranks that pilots are promoted into; it is sorted
    by hours so lookups walk it once.
    """

    def __init__(self, ranks: Iterable[Rank], count_transfer_hours: bool = True):
        self.ranks: List[Rank] = sorted(ranks, key=lambda rank: rank.hours)
        self.count_transfer_hours = count_transfer_hours

    @classmethod
    def from_database(cls, config: 'configuration.PirepSettings' = None) -> 'RankEngine':
        config = configuration.get_settings(config)
        ranks = Rank.objects.filter(auto_promote=True).order_by('hours')
        return cls(ranks, count_transfer_hours=config.count_transfer_hours)

    def credited_minutes(self, pilot: Pilot) -> int:
        minutes = pilot.flight_time or 0
        if self.count_transfer_hours:
            minutes += pilot.transfer_time or 0
        return minutes

    def rank_for_minutes(self, minutes: int) -> Optional[Rank]:
        """Highest rank whose threshold is at or below ``minutes``."""
        matched = None
        for rank in self.ranks:
            if rank.hours * 60 > minutes:
                break
            matched = rank
        return matched

    def rank_for_pilot(self, pilot: Pilot) -> Optional[Rank]:
        """
        Rank the pilot should hold.

        A pilot holding a rank that is excluded from auto-promotion keeps it.
        """
        if pilot.rank_id and not pilot.rank.auto_promote:
            return pilot.rank
        return self.rank_for_minutes(self.credited_minutes(pilot))

    @staticmethod
    def can_auto_accept(rank: Optional[Rank], source: str) -> bool:
        if rank is None:
            return False
        if source == Pirep.Source.ACARS:
            return rank.auto_approve_acars
        return rank.auto_approve_manual
