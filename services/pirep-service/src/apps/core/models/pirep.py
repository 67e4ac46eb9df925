# services/pirep-service/src/apps/core/models/pirep.py
"""
PIREP Model

A pilot report: one flight performed or claimed by a pilot, subject to
review. State only changes through PirepService.change_state().
"""

from decimal import Decimal
from typing import Dict, FrozenSet

from django.core.validators import MinValueValidator
from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Pirep(UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Pilot report.

    Quantities are stored in one canonical unit each:
    - flight_time in minutes
    - distance / planned_distance in nautical miles
    - fuel_used in pounds
    """

    class State(models.TextChoices):
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In Progress'
        PENDING_ACCEPT = 'pending_accept', 'Pending Acceptance'
        ACCEPTED = 'accepted', 'Accepted'
        REJECTED = 'rejected', 'Rejected'
        CANCELLED = 'cancelled', 'Cancelled'
        DELETED = 'deleted', 'Deleted'

    class Source(models.TextChoices):
        MANUAL = 'manual', 'Manual'
        ACARS = 'acars', 'ACARS'

    # States from which a report still accepts in-flight data
    ACTIVE_STATES: FrozenSet[str] = frozenset({
        State.PENDING,
        State.IN_PROGRESS,
        State.PENDING_ACCEPT,
    })

    # States that have not been through review yet
    OPEN_STATES: FrozenSet[str] = ACTIVE_STATES

    # Reports in these states are ignored by listings and duplicate checks
    HIDDEN_STATES: FrozenSet[str] = frozenset({
        State.CANCELLED,
        State.DELETED,
    })

    # Allowed (from -> to) transitions
    TRANSITIONS: Dict[str, FrozenSet[str]] = {
        State.PENDING: frozenset({
            State.IN_PROGRESS,
            State.PENDING_ACCEPT,
            State.ACCEPTED,
            State.REJECTED,
            State.CANCELLED,
            State.DELETED,
        }),
        State.IN_PROGRESS: frozenset({
            State.PENDING,
            State.PENDING_ACCEPT,
            State.ACCEPTED,
            State.REJECTED,
            State.CANCELLED,
            State.DELETED,
        }),
        State.PENDING_ACCEPT: frozenset({
            State.ACCEPTED,
            State.REJECTED,
            State.CANCELLED,
            State.DELETED,
        }),
        State.ACCEPTED: frozenset({
            State.REJECTED,
            State.DELETED,
        }),
        State.REJECTED: frozenset({
            State.DELETED,
        }),
        State.CANCELLED: frozenset({
            State.DELETED,
        }),
        State.DELETED: frozenset(),
    }

    # ==========================================================================
    # Relations
    # ==========================================================================
    pilot = models.ForeignKey(
        'core.Pilot',
        on_delete=models.PROTECT,
        related_name='pireps'
    )
    airline = models.ForeignKey(
        'core.Airline',
        on_delete=models.PROTECT,
        related_name='pireps'
    )
    aircraft = models.ForeignKey(
        'core.Aircraft',
        on_delete=models.PROTECT,
        related_name='pireps',
        blank=True,
        null=True
    )
    flight = models.ForeignKey(
        'core.Flight',
        on_delete=models.SET_NULL,
        related_name='pireps',
        blank=True,
        null=True,
        help_text="Scheduled flight this report was flown against"
    )
    flight_number = models.CharField(max_length=10, blank=True, default='')

    # ==========================================================================
    # Route
    # ==========================================================================
    dpt_airport_id = models.CharField(max_length=4, help_text="ICAO code")
    arr_airport_id = models.CharField(max_length=4, help_text="ICAO code")
    route = models.TextField(
        blank=True,
        default='',
        help_text="Space-delimited navpoint identifiers"
    )

    # ==========================================================================
    # Flight Data
    # ==========================================================================
    flight_time = models.PositiveIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Flight time in minutes"
    )
    distance = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Distance flown in nautical miles"
    )
    planned_distance = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Planned distance in nautical miles"
    )
    fuel_used = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Fuel used in pounds"
    )

    # ==========================================================================
    # Lifecycle
    # ==========================================================================
    source = models.CharField(
        max_length=10,
        choices=Source.choices,
        default=Source.MANUAL
    )
    state = models.CharField(
        max_length=20,
        choices=State.choices,
        default=State.PENDING,
        db_index=True
    )
    submitted_at = models.DateTimeField(blank=True, null=True)
    notes = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'pireps'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['pilot', 'created_at']),
            models.Index(fields=['aircraft', 'state']),
            models.Index(fields=['state']),
        ]

    def __str__(self):
        return f"{self.flight_number or 'PIREP'} {self.dpt_airport_id}-{self.arr_airport_id}"

    # ==========================================================================
    # Properties
    # ==========================================================================

    @property
    def is_active(self) -> bool:
        """Whether the report can still receive route and position data."""
        return self.state in self.ACTIVE_STATES

    @property
    def is_accepted(self) -> bool:
        return self.state == self.State.ACCEPTED

    @property
    def duration_display(self) -> str:
        """Display flight time as H:MM."""
        hours, minutes = divmod(self.flight_time or 0, 60)
        return f"{hours}:{minutes:02d}"

    def can_transition_to(self, new_state: str) -> bool:
        return new_state in self.TRANSITIONS.get(self.state, frozenset())
