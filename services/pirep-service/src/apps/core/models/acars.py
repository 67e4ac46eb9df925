# services/pirep-service/src/apps/core/models/acars.py
"""
ACARS Model

Route waypoints and position reports attached to a PIREP.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Acars(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    One ACARS entry.

    ROUTE entries are the filed route, ordered 1..n.
    POSITION entries are in-flight position reports.
    """

    class Type(models.TextChoices):
        ROUTE = 'route', 'Route'
        POSITION = 'position', 'Position'

    pirep = models.ForeignKey(
        'core.Pirep',
        on_delete=models.CASCADE,
        related_name='acars'
    )
    type = models.CharField(max_length=10, choices=Type.choices)
    name = models.CharField(max_length=20, blank=True, default='')
    order = models.PositiveIntegerField(default=0)

    # Position data
    lat = models.DecimalField(max_digits=9, decimal_places=6, blank=True, null=True)
    lon = models.DecimalField(max_digits=9, decimal_places=6, blank=True, null=True)
    altitude = models.IntegerField(blank=True, null=True, help_text="Feet")
    heading = models.PositiveSmallIntegerField(blank=True, null=True)
    gs = models.PositiveIntegerField(blank=True, null=True, help_text="Ground speed in knots")
    sim_time = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = 'acars'
        ordering = ['type', 'order', 'created_at']
        indexes = [
            models.Index(fields=['pirep', 'type']),
        ]
        verbose_name_plural = 'acars'

    def __str__(self):
        if self.type == self.Type.ROUTE:
            return f"{self.order}: {self.name}"
        return f"{self.lat},{self.lon} @ {self.altitude}"
