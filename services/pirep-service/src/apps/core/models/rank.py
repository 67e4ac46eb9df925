# services/pirep-service/src/apps/core/models/rank.py
"""
Rank Model

Ranks are ordered by the minimum number of credited hours a pilot needs.
"""

from django.core.validators import MinValueValidator
from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Rank(UUIDPrimaryKeyMixin, TimestampMixin):
    """Pilot rank with its auto-approval privileges."""

    name = models.CharField(max_length=50, unique=True)
    hours = models.PositiveIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Minimum credited hours to hold this rank"
    )

    # ==========================================================================
    # Privileges
    # ==========================================================================
    auto_approve_acars = models.BooleanField(
        default=False,
        help_text="ACARS reports by pilots of this rank are accepted on submit"
    )
    auto_approve_manual = models.BooleanField(
        default=False,
        help_text="Manual reports by pilots of this rank are accepted on submit"
    )
    auto_promote = models.BooleanField(
        default=True,
        help_text="Pilots holding this rank are moved by hours; if false the rank is kept"
    )

    class Meta:
        db_table = 'ranks'
        ordering = ['hours']

    def __str__(self):
        return f"{self.name} ({self.hours}h)"

    @property
    def minutes(self) -> int:
        return self.hours * 60
