# services/pirep-service/src/apps/core/models/bid.py
"""
Bid Model
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Bid(UUIDPrimaryKeyMixin, TimestampMixin):
    """A pilot's reservation of a scheduled flight."""

    pilot = models.ForeignKey(
        'core.Pilot',
        on_delete=models.CASCADE,
        related_name='bids'
    )
    flight = models.ForeignKey(
        'core.Flight',
        on_delete=models.CASCADE,
        related_name='bids'
    )

    class Meta:
        db_table = 'bids'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['pilot', 'flight'], name='unique_pilot_flight_bid'),
        ]

    def __str__(self):
        return f"Bid {self.pilot_id} -> {self.flight_id}"
