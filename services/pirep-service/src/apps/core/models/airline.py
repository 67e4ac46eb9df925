# services/pirep-service/src/apps/core/models/airline.py
"""
Airline Model
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Airline(UUIDPrimaryKeyMixin, TimestampMixin):
    """An operating airline of the virtual airline group."""

    icao = models.CharField(max_length=5, unique=True)
    iata = models.CharField(max_length=3, blank=True, default='')
    name = models.CharField(max_length=100)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = 'airlines'
        ordering = ['icao']

    def __str__(self):
        return f"{self.icao} - {self.name}"
