# services/pirep-service/src/apps/core/services/acars_service.py
"""
ACARS Service

Route and position storage for a PIREP.
"""

import logging
from typing import Any, Dict, Iterable, List

from django.db import transaction

from ..models import Acars, Pirep
from .exceptions import InactiveReportError, ValidationError

logger = logging.getLogger(__name__)

POSITION_FIELDS = ('lat', 'lon', 'altitude', 'heading', 'gs', 'sim_time')


def parse_route(route: str) -> List[str]:
    """Split a route string into upper-cased navpoint names."""
    if not route:
        return []
    return [name.strip().upper() for name in route.split() if name.strip()]


class AcarsService:
    """Service class for a report's ROUTE and POSITION entries."""

    # ==========================================================================
    # Route
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def replace_route(cls, pirep: Pirep, route: str = None) -> List[Acars]:
        """
        Replace the report's ROUTE entries with the parsed route.

        The old entries are deleted and the new ones inserted in one
        transaction, ordered 1..n. An empty route leaves no entries.
        """
        names = parse_route(pirep.route if route is None else route)

        Acars.objects.filter(pirep=pirep, type=Acars.Type.ROUTE).delete()
        entries = Acars.objects.bulk_create([
            Acars(pirep=pirep, type=Acars.Type.ROUTE, name=name, order=order)
            for order, name in enumerate(names, start=1)
        ])

        logger.info(f"Saved route for PIREP {pirep.id}: {len(entries)} navpoints")
        return entries

    @classmethod
    def get_route(cls, pirep: Pirep) -> List[Acars]:
        return list(
            Acars.objects
            .filter(pirep=pirep, type=Acars.Type.ROUTE)
            .order_by('order')
        )

    # ==========================================================================
    # Positions
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def add_positions(cls, pirep: Pirep, positions: Iterable[Dict[str, Any]]) -> List[Acars]:
        """
        Append position reports to an active report.

        Raises:
            InactiveReportError: If the report is cancelled or already reviewed
            ValidationError: If a position is missing lat/lon
        """
        pirep = Pirep.objects.select_for_update().get(pk=pirep.pk)
        if not pirep.is_active:
            raise InactiveReportError(pirep_id=pirep.id, state=pirep.state)

        offset = Acars.objects.filter(pirep=pirep, type=Acars.Type.POSITION).count()
        entries = []
        for index, position in enumerate(positions, start=1):
            if position.get('lat') is None or position.get('lon') is None:
                raise ValidationError(
                    message="Position requires lat and lon",
                    field='positions',
                    details={'index': index - 1}
                )
            entries.append(Acars(
                pirep=pirep,
                type=Acars.Type.POSITION,
                order=offset + index,
                **{field: position.get(field) for field in POSITION_FIELDS}
            ))

        created = Acars.objects.bulk_create(entries)
        logger.debug(f"Stored {len(created)} positions for PIREP {pirep.id}")
        return created

    @classmethod
    def get_positions(cls, pirep: Pirep) -> List[Acars]:
        return list(
            Acars.objects
            .filter(pirep=pirep, type=Acars.Type.POSITION)
            .order_by('order', 'created_at')
        )

    @classmethod
    def clear(cls, pirep: Pirep) -> int:
        """Delete every ACARS entry of the report."""
        deleted, _ = Acars.objects.filter(pirep=pirep).delete()
        logger.info(f"Deleted {deleted} ACARS entries for cancelled PIREP {pirep.id}")
        return deleted
