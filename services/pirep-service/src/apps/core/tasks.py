# services/pirep-service/src/apps/core/tasks.py
"""
Celery Tasks

Periodic repair jobs for denormalized aggregates.
"""

import logging

from celery import shared_task

from .services import AircraftStatsService, PilotStatsService

logger = logging.getLogger(__name__)


@shared_task
def recalculate_aircraft_stats():
    """Rebuild flight time and location of every aircraft."""
    result = AircraftStatsService.recalculate_stats()
    if result['failed']:
        logger.warning(f"Aircraft stats repair skipped {len(result['failed'])} aircraft")
    return result


@shared_task
def recalculate_pilot_stats():
    """Rebuild flight count, time, location and rank of every pilot."""
    return PilotStatsService.recalculate_all()
