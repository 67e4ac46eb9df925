# services/pirep-service/src/apps/core/services/aggregates.py
"""
Helpers shared by the pilot and aircraft aggregators.
"""

from typing import Optional

from django.db.models import QuerySet

from ..models import Pirep


def check_sign(sign: int):
    """Raise ValueError unless ``sign`` is +1 or -1."""
    if sign not in (1, -1):
        raise ValueError(f"sign must be +1 or -1, got {sign!r}")


def latest_accepted(accepted: QuerySet, candidate: Pirep = None) -> Optional[Pirep]:
    """
    Most recent report in ``accepted`` by (created_at, id).

    ``candidate`` competes with the stored reports even when its ACCEPTED
    state has not been saved yet. Ids compare on their hex form, which
    matches database UUID ordering.
    """
    latest = accepted.order_by('-created_at', '-id').first()
    if candidate is None:
        return latest
    if latest is None or _sort_key(candidate) >= _sort_key(latest):
        return candidate
    return latest


def _sort_key(pirep: Pirep):
    return (pirep.created_at, pirep.id.hex)
