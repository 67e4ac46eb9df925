# services/pirep-service/src/apps/api/serializers/acars_serializers.py
"""
ACARS Serializers

Route and position serializers for a PIREP.
"""

from rest_framework import serializers

from apps.core.models import Acars


class RouteEntrySerializer(serializers.ModelSerializer):

    class Meta:
        model = Acars
        fields = ['id', 'name', 'order']
        read_only_fields = fields


class RouteUpdateSerializer(serializers.Serializer):
    route = serializers.CharField(allow_blank=True)


class PositionSerializer(serializers.ModelSerializer):
    """Serializer for a stored position report."""

    class Meta:
        model = Acars
        fields = [
            'id',
            'order',
            'lat',
            'lon',
            'altitude',
            'heading',
            'gs',
            'sim_time',
            'created_at',
        ]
        read_only_fields = fields


class PositionCreateSerializer(serializers.Serializer):
    """A single incoming position report."""

    lat = serializers.DecimalField(max_digits=9, decimal_places=6, min_value=-90, max_value=90)
    lon = serializers.DecimalField(max_digits=9, decimal_places=6, min_value=-180, max_value=180)
    altitude = serializers.IntegerField(required=False, allow_null=True)
    heading = serializers.IntegerField(min_value=0, max_value=360, required=False, allow_null=True)
    gs = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    sim_time = serializers.DateTimeField(required=False, allow_null=True)


class PositionBatchSerializer(serializers.Serializer):
    positions = PositionCreateSerializer(many=True, allow_empty=False)
