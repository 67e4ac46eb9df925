# services/pirep-service/src/apps/api/serializers/bid_serializers.py
"""
Bid Serializers
"""

from rest_framework import serializers

from apps.core.models import Bid, Flight


class BidFlightSerializer(serializers.ModelSerializer):

    airline_icao = serializers.CharField(source='airline.icao', read_only=True)

    class Meta:
        model = Flight
        fields = [
            'id',
            'airline_icao',
            'flight_number',
            'dpt_airport_id',
            'arr_airport_id',
            'flight_time',
        ]
        read_only_fields = fields


class BidSerializer(serializers.ModelSerializer):
    flight = BidFlightSerializer(read_only=True)

    class Meta:
        model = Bid
        fields = ['id', 'pilot_id', 'flight', 'created_at']
        read_only_fields = fields


class BidCreateSerializer(serializers.Serializer):
    flight_id = serializers.UUIDField()
