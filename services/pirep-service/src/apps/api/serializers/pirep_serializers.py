# services/pirep-service/src/apps/api/serializers/pirep_serializers.py
"""
PIREP Serializers

REST API serializers for PIREP operations.
"""

from rest_framework import serializers

from apps.core.models import Pirep
from apps.api.units import distance_units, fuel_units


class PirepListSerializer(serializers.ModelSerializer):
    """Serializer for PIREP list view (minimal fields)."""

    state_display = serializers.CharField(source='get_state_display', read_only=True)
    aircraft_registration = serializers.CharField(
        source='aircraft.registration', read_only=True, default=None
    )

    class Meta:
        model = Pirep
        fields = [
            'id',
            'pilot_id',
            'airline_id',
            'aircraft_id',
            'aircraft_registration',
            'flight_number',
            'dpt_airport_id',
            'arr_airport_id',
            'flight_time',
            'source',
            'state',
            'state_display',
            'submitted_at',
            'created_at',
        ]
        read_only_fields = fields


class PirepDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for PIREP detail view.

    Distances and fuel are returned in every display unit; the canonical
    stored values are the ``nmi`` and ``lbs`` entries.
    """

    state_display = serializers.CharField(source='get_state_display', read_only=True)
    duration = serializers.CharField(source='duration_display', read_only=True)
    distance = serializers.SerializerMethodField()
    planned_distance = serializers.SerializerMethodField()
    fuel_used = serializers.SerializerMethodField()

    class Meta:
        model = Pirep
        fields = [
            'id',
            'pilot_id',
            'airline_id',
            'aircraft_id',
            'flight_id',
            'flight_number',
            'dpt_airport_id',
            'arr_airport_id',
            'route',
            'flight_time',
            'duration',
            'distance',
            'planned_distance',
            'fuel_used',
            'source',
            'state',
            'state_display',
            'notes',
            'submitted_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_distance(self, obj):
        return distance_units(obj.distance)

    def get_planned_distance(self, obj):
        return distance_units(obj.planned_distance)

    def get_fuel_used(self, obj):
        return fuel_units(obj.fuel_used)


class PirepCreateSerializer(serializers.Serializer):
    """Serializer for creating or prefiling a PIREP."""

    airline_id = serializers.UUIDField()
    aircraft_id = serializers.UUIDField(required=False, allow_null=True)
    flight_id = serializers.UUIDField(required=False, allow_null=True)
    flight_number = serializers.CharField(max_length=10, required=False, allow_blank=True)

    dpt_airport_id = serializers.CharField(max_length=4, required=False)
    arr_airport_id = serializers.CharField(max_length=4, required=False)
    route = serializers.CharField(required=False, allow_blank=True)

    flight_time = serializers.IntegerField(min_value=0, required=False, default=0)
    distance = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    planned_distance = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    fuel_used = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)

    source = serializers.ChoiceField(choices=Pirep.Source.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs.get('flight_id'):
            missing = [f for f in ('dpt_airport_id', 'arr_airport_id') if not attrs.get(f)]
            if missing:
                raise serializers.ValidationError(
                    {field: 'Required when no flight_id is given.' for field in missing}
                )
        return attrs


class PirepStateFilterSerializer(serializers.Serializer):
    """Query parameters for listing a pilot's PIREPs."""

    state = serializers.ChoiceField(choices=Pirep.State.choices, required=False)
