# services/pirep-service/src/apps/core/services/pirep_service.py
"""
PIREP Service

Core business logic for the report lifecycle: creation, filing,
submission, review transitions and the side effects they carry.
"""

import uuid
import logging
from typing import Any, Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from .. import configuration
from ..events import PirepEvents, get_dispatcher
from ..models import Aircraft, Airline, Acars, Flight, Pilot, Pirep
from .acars_service import AcarsService
from .aircraft_stats_service import AircraftStatsService
from .bid_service import BidService
from .duplicate_service import DuplicateDetector
from .exceptions import (
    InactiveReportError,
    NotFoundError,
    StateTransitionError,
    ValidationError,
)
from .pilot_stats_service import PilotStatsService
from .rank_service import RankEngine

logger = logging.getLogger(__name__)

State = Pirep.State

# Transition target -> notification sent to the report's pilot
PILOT_NOTIFICATIONS = {
    State.ACCEPTED: PirepEvents.PIREP_ACCEPTED,
    State.REJECTED: PirepEvents.PIREP_REJECTED,
    State.CANCELLED: PirepEvents.PIREP_CANCELLED,
}

CREATE_FIELDS = (
    'flight_number',
    'dpt_airport_id',
    'arr_airport_id',
    'route',
    'flight_time',
    'distance',
    'planned_distance',
    'fuel_used',
    'source',
    'notes',
)


class PirepService:
    """
    Service class for the PIREP lifecycle.

    Every state change goes through change_state(), which locks the report
    and applies pilot, aircraft and bid updates in the same transaction.
    """

    # ==========================================================================
    # Creation
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def create(cls, pirep_data: Dict[str, Any], prefile: bool = False) -> Pirep:
        """
        Create a new report and store its route.

        Args:
            pirep_data: Report fields. pilot/pilot_id and airline/airline_id
                are required; aircraft and flight are optional.
            prefile: Create the report IN_PROGRESS for a flight about to
                be flown, instead of PENDING

        Returns:
            Created Pirep instance

        Raises:
            ValidationError: If a required field is missing or invalid
            NotFoundError: If a referenced record does not exist
        """
        pilot = cls._resolve(Pilot, pirep_data, 'pilot', required=True)
        airline = cls._resolve(Airline, pirep_data, 'airline', required=True)
        aircraft = cls._resolve(Aircraft, pirep_data, 'aircraft')
        flight = cls._resolve(Flight, pirep_data, 'flight')

        fields = {key: pirep_data[key] for key in CREATE_FIELDS if pirep_data.get(key) is not None}

        flight_time = fields.get('flight_time', 0)
        if not isinstance(flight_time, int) or isinstance(flight_time, bool) or flight_time < 0:
            raise ValidationError(
                message="flight_time must be a non-negative number of minutes",
                field='flight_time'
            )

        if flight is not None:
            for field in ('flight_number', 'dpt_airport_id', 'arr_airport_id', 'route'):
                if not fields.get(field):
                    fields[field] = getattr(flight, field)

        for field in ('dpt_airport_id', 'arr_airport_id'):
            if not fields.get(field):
                raise ValidationError(message=f"{field} is required", field=field)
            fields[field] = fields[field].upper()

        if prefile:
            fields['state'] = State.IN_PROGRESS
            fields.setdefault('source', Pirep.Source.ACARS)
        else:
            fields['state'] = State.PENDING
            fields.setdefault('source', Pirep.Source.MANUAL)

        if fields['source'] not in Pirep.Source.values:
            raise ValidationError(message=f"Unknown source: {fields['source']}", field='source')

        pirep = Pirep.objects.create(
            pilot=pilot,
            airline=airline,
            aircraft=aircraft,
            flight=flight,
            **fields
        )
        AcarsService.replace_route(pirep)

        logger.info(
            f"PIREP {pirep.id} created for pilot {pilot.id} "
            f"({pirep.dpt_airport_id}-{pirep.arr_airport_id}, state={pirep.state})"
        )
        return pirep

    @classmethod
    def prefile(cls, pirep_data: Dict[str, Any]) -> Pirep:
        return cls.create(pirep_data, prefile=True)

    @classmethod
    def _resolve(cls, model, data: Dict[str, Any], name: str, required: bool = False):
        """Look up a related record passed either as instance or as ``<name>_id``."""
        value = data.get(name)
        if isinstance(value, model):
            return value

        record_id = data.get(f"{name}_id") or value
        if record_id is None or record_id == '':
            if required:
                raise ValidationError(message=f"{name} is required", field=f"{name}_id")
            return None

        try:
            return model.objects.get(pk=record_id)
        except (model.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFoundError(resource=model.__name__, resource_id=record_id)

    # ==========================================================================
    # Filing and Submission
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def file(cls, pirep: Pirep) -> Pirep:
        """
        Mark a flown report as filed.

        An IN_PROGRESS report moves to PENDING; a PENDING report stays
        there. A pilot on leave is returned to ACTIVE.

        Raises:
            StateTransitionError: If the report is past filing
        """
        pirep = cls._lock(pirep)
        if pirep.state not in (State.PENDING, State.IN_PROGRESS):
            raise StateTransitionError(
                current_state=pirep.state,
                target_state=State.PENDING,
                message=f"PIREP {pirep.id} is {pirep.state} and cannot be filed"
            )

        if pirep.state == State.IN_PROGRESS:
            pirep = cls.change_state(pirep, State.PENDING)

        pirep.submitted_at = timezone.now()
        pirep.save(update_fields=['submitted_at', 'updated_at'])

        cls._return_from_leave(pirep.pilot_id)
        logger.info(f"PIREP {pirep.id} filed")
        return pirep

    @classmethod
    @transaction.atomic
    def submit(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Pirep:
        """
        Send a report for review, accepting it straight away when the
        pilot's rank allows it.

        Auto-accept requires the rank privilege for the report's source and
        no other open report by the pilot inside the duplicate window.
        """
        config = configuration.get_settings(config)

        pirep = cls.change_state(pirep, State.PENDING_ACCEPT, config=config)
        if pirep.submitted_at is None:
            pirep.submitted_at = timezone.now()
            pirep.save(update_fields=['submitted_at', 'updated_at'])

        pilot = Pilot.objects.select_related('rank').get(pk=pirep.pilot_id)
        if RankEngine.can_auto_accept(pilot.rank, pirep.source):
            duplicate = DuplicateDetector.find_open_duplicate(pirep, config.duplicate_check_time)
            if duplicate is None:
                logger.info(f"PIREP {pirep.id} auto-accepted for rank {pilot.rank.name}")
                pirep = cls.change_state(pirep, State.ACCEPTED, config=config)
            else:
                logger.info(f"PIREP {pirep.id} held for review, open duplicate {duplicate.id}")

        admins = list(Pilot.objects.filter(is_admin=True).values_list('id', flat=True))
        cls._notify_on_commit(admins, PirepEvents.PIREP_SUBMITTED, pirep)
        return pirep

    @classmethod
    def find_duplicate(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Optional[Pirep]:
        config = configuration.get_settings(config)
        return DuplicateDetector.find_duplicate(pirep, config.duplicate_check_time)

    # ==========================================================================
    # State Transitions
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def change_state(
        cls,
        pirep: Pirep,
        new_state: str,
        config: 'configuration.PirepSettings' = None
    ) -> Pirep:
        """
        Move a report to ``new_state`` and apply the transition's effects.

        Rows are locked report first, then pilot, then aircraft. Requesting
        the current state returns the report untouched.

        Returns:
            The updated report, re-read under lock

        Raises:
            StateTransitionError: If the transition is not allowed
        """
        if new_state not in State.values:
            raise StateTransitionError(
                current_state=pirep.state,
                target_state=str(new_state),
                message=f"Unknown PIREP state: {new_state}"
            )

        pirep = cls._lock(pirep)
        old_state = pirep.state
        if new_state == old_state:
            logger.debug(f"PIREP {pirep.id} already {new_state}")
            return pirep

        if not pirep.can_transition_to(new_state):
            raise StateTransitionError(current_state=old_state, target_state=new_state)

        config = configuration.get_settings(config)

        pirep.state = new_state
        pirep.save(update_fields=['state', 'updated_at'])
        logger.info(f"PIREP {pirep.id} state {old_state} -> {new_state}")

        if new_state == State.ACCEPTED:
            cls._apply_stats(pirep, +1, config)
            BidService.reconcile(pirep, config=config)
        elif old_state == State.ACCEPTED:
            # ACCEPTED only leaves to REJECTED or DELETED
            cls._apply_stats(pirep, -1, config)

        if new_state == State.CANCELLED:
            AcarsService.clear(pirep)

        event = PILOT_NOTIFICATIONS.get(new_state)
        if event is not None:
            cls._notify_on_commit([pirep.pilot_id], event, pirep)

        return pirep

    @classmethod
    def accept(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Pirep:
        return cls.change_state(pirep, State.ACCEPTED, config=config)

    @classmethod
    def reject(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Pirep:
        return cls.change_state(pirep, State.REJECTED, config=config)

    @classmethod
    def cancel(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Pirep:
        return cls.change_state(pirep, State.CANCELLED, config=config)

    @classmethod
    def delete(cls, pirep: Pirep, config: 'configuration.PirepSettings' = None) -> Pirep:
        return cls.change_state(pirep, State.DELETED, config=config)

    @classmethod
    def _apply_stats(cls, pirep: Pirep, sign: int, config: 'configuration.PirepSettings'):
        pilot = Pilot.objects.select_for_update().get(pk=pirep.pilot_id)
        aircraft = None
        if pirep.aircraft_id is not None:
            aircraft = Aircraft.objects.select_for_update().get(pk=pirep.aircraft_id)

        PilotStatsService.apply(pilot, pirep, sign, rank_engine=RankEngine.from_database(config))
        if aircraft is not None:
            AircraftStatsService.apply(aircraft, pirep, sign)

    @classmethod
    def _return_from_leave(cls, pilot_id: uuid.UUID):
        pilot = Pilot.objects.select_for_update().get(pk=pilot_id)
        if pilot.state == Pilot.State.ON_LEAVE:
            pilot.state = Pilot.State.ACTIVE
            pilot.save(update_fields=['state', 'updated_at'])
            logger.info(f"Pilot {pilot.id} returned from leave")

    @staticmethod
    def _lock(pirep: Pirep) -> Pirep:
        return Pirep.objects.select_for_update().get(pk=pirep.pk)

    # ==========================================================================
    # Notifications
    # ==========================================================================

    @classmethod
    def _notify_on_commit(cls, recipients: List[Any], event: PirepEvents, pirep: Pirep):
        payload = {
            'pirep_id': str(pirep.id),
            'pilot_id': str(pirep.pilot_id),
            'state': pirep.state,
            'flight_number': pirep.flight_number,
            'dpt_airport_id': pirep.dpt_airport_id,
            'arr_airport_id': pirep.arr_airport_id,
            'flight_time': pirep.flight_time,
        }
        transaction.on_commit(lambda: cls._dispatch(recipients, event, payload))

    @staticmethod
    def _dispatch(recipients: List[Any], event: PirepEvents, payload: Dict[str, Any]):
        try:
            get_dispatcher().notify(recipients, event, payload)
        except Exception:
            logger.exception(f"Failed to dispatch {event.value} for PIREP {payload['pirep_id']}")

    # ==========================================================================
    # Route and Positions
    # ==========================================================================

    @classmethod
    @transaction.atomic
    def save_route(cls, pirep: Pirep) -> List[Acars]:
        """Replace the report's stored route with its parsed route text."""
        pirep = cls._lock(pirep)
        return AcarsService.replace_route(pirep)

    @classmethod
    @transaction.atomic
    def update_route(cls, pirep: Pirep, route: str) -> List[Acars]:
        """
        Set new route text and store it.

        Raises:
            InactiveReportError: If the report is no longer active
        """
        pirep = cls._lock(pirep)
        if not pirep.is_active:
            raise InactiveReportError(pirep_id=pirep.id, state=pirep.state)

        pirep.route = route or ''
        pirep.save(update_fields=['route', 'updated_at'])
        return AcarsService.replace_route(pirep)

    @classmethod
    def add_positions(cls, pirep: Pirep, positions: Iterable[Dict[str, Any]]) -> List[Acars]:
        return AcarsService.add_positions(pirep, positions)

    # ==========================================================================
    # Queries
    # ==========================================================================

    @classmethod
    def get_pirep(cls, pirep_id: uuid.UUID) -> Pirep:
        """
        Get a report by ID.

        Raises:
            NotFoundError: If the report does not exist
        """
        try:
            return Pirep.objects.select_related('pilot', 'airline', 'aircraft', 'flight').get(pk=pirep_id)
        except (Pirep.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFoundError(resource='PIREP', resource_id=pirep_id)

    @classmethod
    def list_for_pilot(cls, pilot_id: uuid.UUID, state: str = None) -> List[Pirep]:
        """
        List a pilot's reports, newest first.

        Without a state filter cancelled and deleted reports are left out.
        """
        queryset = Pirep.objects.filter(pilot_id=pilot_id).select_related('airline', 'aircraft')
        if state:
            if state not in State.values:
                raise ValidationError(message=f"Unknown PIREP state: {state}", field='state')
            queryset = queryset.filter(state=state)
        else:
            queryset = queryset.exclude(state__in=Pirep.HIDDEN_STATES)
        return list(queryset.order_by('-created_at', '-id'))
