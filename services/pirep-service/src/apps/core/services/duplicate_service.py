# services/pirep-service/src/apps/core/services/duplicate_service.py
"""
Duplicate Detector

Finds reports by the same pilot created inside a short time window, to
catch double submissions from ACARS clients.
"""

import logging
from datetime import timedelta
from typing import Optional

from django.utils import timezone

from ..models import Pirep

logger = logging.getLogger(__name__)


class DuplicateDetector:
    """
    Query helpers over a pilot's recent reports.

    Matching is keyed on the pilot and the creation time only. A window of
    zero still matches reports created at the same instant.
    """

    @classmethod
    def _window_queryset(cls, pirep: Pirep, window_minutes: int):
        """Reports by the same pilot created in [created_at - W, created_at]."""
        window = timedelta(minutes=window_minutes)
        if timezone.now() - pirep.created_at > window:
            return None

        return (
            Pirep.objects
            .filter(
                pilot_id=pirep.pilot_id,
                created_at__gte=pirep.created_at - window,
                created_at__lte=pirep.created_at,
            )
            .exclude(state__in=Pirep.HIDDEN_STATES)
            .order_by('-created_at', '-id')
        )

    @classmethod
    def find_duplicate(cls, pirep: Pirep, window_minutes: int) -> Optional[Pirep]:
        """
        Return the most recent report inside the window, or None.

        The candidate itself counts, so a freshly created report is its own
        duplicate. Reports older than the window never match.
        """
        queryset = cls._window_queryset(pirep, window_minutes)
        if queryset is None:
            logger.debug(f"PIREP {pirep.id} is older than {window_minutes}m, skipping duplicate check")
            return None
        return queryset.first()

    @classmethod
    def find_open_duplicate(cls, pirep: Pirep, window_minutes: int) -> Optional[Pirep]:
        """Return another report in the window that has not been reviewed yet."""
        queryset = cls._window_queryset(pirep, window_minutes)
        if queryset is None:
            return None
        return (
            queryset
            .exclude(id=pirep.id)
            .filter(state__in=Pirep.OPEN_STATES)
            .first()
        )
