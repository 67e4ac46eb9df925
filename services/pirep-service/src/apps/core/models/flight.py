# services/pirep-service/src/apps/core/models/flight.py
"""
Scheduled Flight Model

A flight in the airline's schedule. Pilots bid on these; reports may be
flown against one.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Flight(UUIDPrimaryKeyMixin, TimestampMixin):
    """Scheduled flight."""

    airline = models.ForeignKey(
        'core.Airline',
        on_delete=models.CASCADE,
        related_name='flights'
    )
    flight_number = models.CharField(max_length=10)
    route_code = models.CharField(max_length=5, blank=True, default='')
    route_leg = models.PositiveSmallIntegerField(blank=True, null=True)

    dpt_airport_id = models.CharField(max_length=4)
    arr_airport_id = models.CharField(max_length=4)
    flight_time = models.PositiveIntegerField(
        default=0,
        help_text="Scheduled block time in minutes"
    )
    route = models.TextField(blank=True, default='')
    active = models.BooleanField(default=True)

    class Meta:
        db_table = 'flights'
        ordering = ['airline', 'flight_number']
        indexes = [
            models.Index(fields=['dpt_airport_id', 'arr_airport_id']),
        ]

    def __str__(self):
        return f"{self.airline.icao}{self.flight_number} {self.dpt_airport_id}-{self.arr_airport_id}"
