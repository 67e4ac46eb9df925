# services/pirep-service/src/apps/core/models/pilot.py
"""
Pilot Model
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Pilot(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Virtual airline pilot.

    flights, flight_time, rank, curr_airport_id and last_pirep are
    aggregates maintained from accepted reports by PilotStatsService.
    """

    class State(models.TextChoices):
        PENDING = 'pending', 'Pending'
        ACTIVE = 'active', 'Active'
        REJECTED = 'rejected', 'Rejected'
        ON_LEAVE = 'on_leave', 'On Leave'
        SUSPENDED = 'suspended', 'Suspended'
        DELETED = 'deleted', 'Deleted'

    # ==========================================================================
    # Identity
    # ==========================================================================
    name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    airline = models.ForeignKey(
        'core.Airline',
        on_delete=models.PROTECT,
        related_name='pilots'
    )
    state = models.CharField(
        max_length=20,
        choices=State.choices,
        default=State.ACTIVE
    )
    is_admin = models.BooleanField(
        default=False,
        help_text="Receives notifications for reports waiting on review"
    )

    # ==========================================================================
    # Aggregates
    # ==========================================================================
    flights = models.PositiveIntegerField(default=0)
    flight_time = models.PositiveIntegerField(
        default=0,
        help_text="Accepted flight time in minutes"
    )
    transfer_time = models.PositiveIntegerField(
        default=0,
        help_text="Minutes carried over from another airline"
    )
    rank = models.ForeignKey(
        'core.Rank',
        on_delete=models.SET_NULL,
        related_name='pilots',
        blank=True,
        null=True
    )
    home_airport_id = models.CharField(max_length=4, blank=True, default='')
    curr_airport_id = models.CharField(max_length=4, blank=True, default='')
    last_pirep = models.ForeignKey(
        'core.Pirep',
        on_delete=models.SET_NULL,
        related_name='+',
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'pilots'
        ordering = ['name']

    def __str__(self):
        return self.name
