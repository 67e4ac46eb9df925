# shared/common/mixins.py
"""
Reusable Model Mixins
"""

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Mixin that provides a UUID primary key.

    Records are addressed by UUID across the API, so no sequential
    identifiers leak to clients.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record"
    )

    class Meta:
        abstract = True


class TimestampMixin(models.Model):
    """
    Mixin that provides created_at and updated_at timestamp fields.

    created_at is indexed because lifecycle queries (duplicate windows,
    "most recent" lookups) filter and order on it.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When this record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When this record was last updated"
    )

    class Meta:
        abstract = True

    def touch(self):
        """Bump updated_at without changing any other column."""
        self.save(update_fields=['updated_at'])
