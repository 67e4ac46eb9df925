# services/pirep-service/src/apps/core/events/definitions.py
"""
PIREP Service Event Definitions

All notification kinds published by the PIREP Service.
"""

from enum import Enum


class PirepEvents(str, Enum):
    """
    Event types for the PIREP Service.

    Naming convention: ENTITY_ACTION
    """

    PIREP_SUBMITTED = 'pirep.submitted'
    PIREP_ACCEPTED = 'pirep.accepted'
    PIREP_REJECTED = 'pirep.rejected'
    PIREP_CANCELLED = 'pirep.cancelled'


# Required payload fields per event
EVENT_SCHEMAS = {
    PirepEvents.PIREP_SUBMITTED: {
        'required': ['pirep_id', 'pilot_id', 'state'],
    },
    PirepEvents.PIREP_ACCEPTED: {
        'required': ['pirep_id', 'pilot_id', 'state'],
    },
    PirepEvents.PIREP_REJECTED: {
        'required': ['pirep_id', 'pilot_id', 'state'],
    },
    PirepEvents.PIREP_CANCELLED: {
        'required': ['pirep_id', 'pilot_id', 'state'],
    },
}
