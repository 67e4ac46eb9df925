# services/pirep-service/src/apps/api/serializers/aircraft_serializers.py
"""
Aircraft Serializers
"""

from rest_framework import serializers

from apps.core.models import Aircraft


class AircraftSerializer(serializers.ModelSerializer):
    """Aircraft with its current location and accumulated flight time."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Aircraft
        fields = [
            'id',
            'registration',
            'name',
            'icao',
            'airport_id',
            'flight_time',
            'status',
            'status_display',
            'updated_at',
        ]
        read_only_fields = fields
