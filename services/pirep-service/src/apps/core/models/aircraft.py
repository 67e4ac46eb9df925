# services/pirep-service/src/apps/core/models/aircraft.py
"""
Aircraft Model
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Aircraft(UUIDPrimaryKeyMixin, TimestampMixin):
    """Fleet aircraft. airport_id and flight_time follow accepted reports."""

    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        STORED = 'stored', 'Stored'
        RETIRED = 'retired', 'Retired'

    registration = models.CharField(max_length=10, unique=True)
    name = models.CharField(max_length=50, blank=True, default='')
    icao = models.CharField(max_length=4, blank=True, default='', help_text="Type designator")
    airport_id = models.CharField(
        max_length=4,
        blank=True,
        default='',
        help_text="Airport the aircraft is currently parked at"
    )
    flight_time = models.PositiveIntegerField(
        default=0,
        help_text="Accepted flight time in minutes"
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE
    )

    class Meta:
        db_table = 'aircraft'
        ordering = ['registration']
        verbose_name_plural = 'aircraft'

    def __str__(self):
        return self.registration
