# services/pirep-service/src/apps/tests/conftest.py
"""
Pytest Configuration and Fixtures

Shared fixtures for PIREP service tests.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def va_settings(settings):
    """Factory fixture for overriding VA_SETTINGS keys in one test."""

    def _override(**values):
        merged = dict(settings.VA_SETTINGS)
        for key, value in values.items():
            merged[key.replace('__', '.')] = value
        settings.VA_SETTINGS = merged
        return merged

    return _override


@pytest.fixture(autouse=True)
def dispatcher():
    """Fresh in-memory notification dispatcher for every test."""
    from apps.core.events import get_dispatcher, reset_dispatcher
    reset_dispatcher()
    yield get_dispatcher()
    reset_dispatcher()


# =============================================================================
# Model Fixtures
# =============================================================================

@pytest.fixture
def airline(db):
    """Create an airline."""
    from apps.core.models import Airline
    return Airline.objects.create(icao='VMS', iata='VM', name='phpVMS Airlines')


@pytest.fixture
def ranks(db):
    """
    Create the rank table.

    Junior First Officer at 0h with no privileges, First Officer at 10h
    with auto-approval for both sources.
    """
    from apps.core.models import Rank
    return [
        Rank.objects.create(name='Junior First Officer', hours=0),
        Rank.objects.create(
            name='First Officer',
            hours=10,
            auto_approve_acars=True,
            auto_approve_manual=True,
        ),
    ]


@pytest.fixture
def create_pilot(db, airline, ranks):
    """Factory fixture for creating pilots."""
    from apps.core.models import Pilot

    def _create_pilot(**overrides):
        data = {
            'name': 'Test Pilot',
            'email': f'pilot-{uuid.uuid4().hex[:8]}@example.com',
            'airline': airline,
            'rank': ranks[0],
            'home_airport_id': 'KAUS',
            'curr_airport_id': 'KAUS',
            **overrides,
        }
        return Pilot.objects.create(**data)

    return _create_pilot


@pytest.fixture
def pilot(create_pilot):
    """Create a pilot holding the lowest rank."""
    return create_pilot(name='Jane Doe')


@pytest.fixture
def admin_pilot(create_pilot):
    """Create an administrator."""
    return create_pilot(name='Ops Admin', is_admin=True)


@pytest.fixture
def aircraft(db):
    """Create an aircraft."""
    from apps.core.models import Aircraft
    return Aircraft.objects.create(
        registration='N737VA',
        name='Boeing 737-800',
        icao='B738',
        airport_id='KAUS',
    )


@pytest.fixture
def scheduled_flight(db, airline):
    """Create a scheduled flight."""
    from apps.core.models import Flight
    return Flight.objects.create(
        airline=airline,
        flight_number='100',
        dpt_airport_id='KAUS',
        arr_airport_id='KJFK',
        flight_time=200,
        route='KAUS WLEEE1 WLEEE LLO J87 IAH KJFK',
    )


@pytest.fixture
def pirep_data(pilot, airline, aircraft):
    """Generate basic report data."""
    return {
        'pilot': pilot,
        'airline': airline,
        'aircraft': aircraft,
        'flight_number': '100',
        'dpt_airport_id': 'KAUS',
        'arr_airport_id': 'KJFK',
        'flight_time': 120,
        'distance': Decimal('1311.50'),
        'planned_distance': Decimal('1300.00'),
        'fuel_used': Decimal('12000.00'),
        'route': 'kaus sid1  wpt1 star1 kjfk',
    }


@pytest.fixture
def pirep(pirep_service, pirep_data):
    """Create a PENDING report through the service."""
    return pirep_service.create(pirep_data)


@pytest.fixture
def accepted_pirep(pirep_service, pirep):
    """Create an ACCEPTED report with stats applied."""
    return pirep_service.accept(pirep)


@pytest.fixture
def create_pireps(pirep_service, pirep_data):
    """Factory fixture for creating several reports."""

    def _create_pireps(count=3, **overrides):
        return [pirep_service.create({**pirep_data, **overrides}) for _ in range(count)]

    return _create_pireps


@pytest.fixture
def age_pirep():
    """Move a report's created_at into the past."""
    from apps.core.models import Pirep

    def _age(pirep, minutes):
        Pirep.objects.filter(pk=pirep.pk).update(
            created_at=timezone.now() - timedelta(minutes=minutes)
        )
        pirep.refresh_from_db()
        return pirep

    return _age


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def pirep_service():
    """Get PirepService class."""
    from apps.core.services import PirepService
    return PirepService


@pytest.fixture
def aircraft_stats_service():
    """Get AircraftStatsService class."""
    from apps.core.services import AircraftStatsService
    return AircraftStatsService


@pytest.fixture
def pilot_stats_service():
    """Get PilotStatsService class."""
    from apps.core.services import PilotStatsService
    return PilotStatsService


@pytest.fixture
def bid_service():
    """Get BidService class."""
    from apps.core.services import BidService
    return BidService


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest.fixture
def api_client():
    """Get Django REST framework API client."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def pilot_client(api_client, pilot):
    """Get API client acting as the test pilot."""
    api_client.credentials(HTTP_X_PILOT_ID=str(pilot.id))
    return api_client
