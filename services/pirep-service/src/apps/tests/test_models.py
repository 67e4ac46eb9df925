# services/pirep-service/src/apps/tests/test_models.py
"""
Model Tests

Tests for PIREP service database models, settings and unit helpers.
"""

from decimal import Decimal

import pytest
from django.db import IntegrityError


# =============================================================================
# PIREP Model Tests
# =============================================================================

@pytest.mark.django_db
class TestPirepModel:
    """Tests for Pirep model."""

    def test_create_pirep_defaults(self, pilot, airline):
        """Test a bare report starts PENDING and MANUAL."""
        from apps.core.models import Pirep

        pirep = Pirep.objects.create(
            pilot=pilot,
            airline=airline,
            dpt_airport_id='KAUS',
            arr_airport_id='KJFK',
        )

        assert pirep.id is not None
        assert pirep.state == Pirep.State.PENDING
        assert pirep.source == Pirep.Source.MANUAL
        assert pirep.flight_time == 0
        assert pirep.created_at is not None

    def test_pirep_str(self, pirep):
        assert str(pirep) == '100 KAUS-KJFK'

    def test_duration_display(self, pirep):
        pirep.flight_time = 125
        assert pirep.duration_display == '2:05'

    @pytest.mark.parametrize('state,active', [
        ('pending', True),
        ('in_progress', True),
        ('pending_accept', True),
        ('accepted', False),
        ('rejected', False),
        ('cancelled', False),
        ('deleted', False),
    ])
    def test_is_active(self, pirep, state, active):
        pirep.state = state
        assert pirep.is_active is active

    def test_every_state_has_transition_entry(self):
        from apps.core.models import Pirep

        assert set(Pirep.TRANSITIONS) == set(Pirep.State.values)

    def test_deleted_is_terminal(self):
        from apps.core.models import Pirep

        assert Pirep.TRANSITIONS[Pirep.State.DELETED] == frozenset()

    def test_accepted_cannot_be_cancelled(self, pirep):
        from apps.core.models import Pirep

        pirep.state = Pirep.State.ACCEPTED
        assert not pirep.can_transition_to(Pirep.State.CANCELLED)
        assert pirep.can_transition_to(Pirep.State.REJECTED)
        assert pirep.can_transition_to(Pirep.State.DELETED)

    def test_rejected_only_to_deleted(self, pirep):
        from apps.core.models import Pirep

        pirep.state = Pirep.State.REJECTED
        allowed = [s for s in Pirep.State.values if pirep.can_transition_to(s)]
        assert allowed == [Pirep.State.DELETED]


# =============================================================================
# Supporting Model Tests
# =============================================================================

@pytest.mark.django_db
class TestSupportingModels:
    """Tests for ranks, pilots, aircraft and bids."""

    def test_rank_minutes(self, ranks):
        assert ranks[1].minutes == 600

    def test_rank_str(self, ranks):
        assert str(ranks[1]) == 'First Officer (10h)'

    def test_pilot_defaults(self, pilot):
        from apps.core.models import Pilot

        assert pilot.state == Pilot.State.ACTIVE
        assert pilot.flights == 0
        assert pilot.flight_time == 0
        assert pilot.last_pirep is None

    def test_aircraft_str(self, aircraft):
        assert str(aircraft) == 'N737VA'

    def test_duplicate_bid_rejected(self, pilot, scheduled_flight):
        from apps.core.models import Bid

        Bid.objects.create(pilot=pilot, flight=scheduled_flight)
        with pytest.raises(IntegrityError):
            Bid.objects.create(pilot=pilot, flight=scheduled_flight)

    def test_route_acars_str(self, pirep):
        from apps.core.models import Acars

        entry = Acars.objects.filter(pirep=pirep, type=Acars.Type.ROUTE).order_by('order').first()
        assert str(entry) == '1: KAUS'


# =============================================================================
# Settings Tests
# =============================================================================

class TestPirepSettings:
    """Tests for the VA_SETTINGS provider."""

    def test_defaults(self):
        from apps.core.configuration import PirepSettings

        config = PirepSettings.from_mapping({})

        assert config.duplicate_check_time == 10
        assert config.remove_bid_on_accept is False
        assert config.count_transfer_hours is True

    def test_overrides(self):
        from apps.core.configuration import PirepSettings

        config = PirepSettings.from_mapping({
            'pireps.duplicate_check_time': 30,
            'pireps.remove_bid_on_accept': True,
        })

        assert config.duplicate_check_time == 30
        assert config.remove_bid_on_accept is True

    def test_load_reads_django_settings(self, va_settings):
        from apps.core.configuration import PirepSettings

        va_settings(**{'pilots__count_transfer_hours': False})

        assert PirepSettings.load().count_transfer_hours is False

    @pytest.mark.parametrize('value', [-1, '10', 1.5, True, None])
    def test_invalid_window(self, value):
        from apps.core.configuration import PirepSettings
        from apps.core.services.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError) as exc_info:
            PirepSettings.from_mapping({'pireps.duplicate_check_time': value})

        assert exc_info.value.details['key'] == 'pireps.duplicate_check_time'
        assert exc_info.value.status_code == 500

    def test_invalid_flag(self):
        from apps.core.configuration import PirepSettings
        from apps.core.services.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError):
            PirepSettings.from_mapping({'pireps.remove_bid_on_accept': 'yes'})

    def test_not_a_dict(self):
        from apps.core.configuration import PirepSettings
        from apps.core.services.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError):
            PirepSettings.from_mapping(['pireps.duplicate_check_time'])

    def test_explicit_settings_win(self, va_settings):
        from apps.core.configuration import PirepSettings, get_settings

        va_settings(**{'pireps__duplicate_check_time': 5})
        explicit = PirepSettings(duplicate_check_time=60)

        assert get_settings(explicit) is explicit
        assert get_settings().duplicate_check_time == 5


# =============================================================================
# Unit Presentation Tests
# =============================================================================

class TestUnits:
    """Tests for the API unit fan-out."""

    def test_distance_units(self):
        from apps.api.units import distance_units

        units = distance_units(Decimal('100.00'))

        assert units == {'nmi': 100.0, 'km': 185.2, 'mi': 115.08}

    def test_fuel_units(self):
        from apps.api.units import fuel_units

        units = fuel_units(Decimal('1000'))

        assert units == {'lbs': 1000.0, 'kg': 453.59}

    def test_missing_value_is_zero(self):
        from apps.api.units import distance_units

        assert distance_units(None)['km'] == 0.0
