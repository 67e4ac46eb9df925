# services/pirep-service/src/apps/api/views/aircraft_views.py
"""
Aircraft Views

Read access to the fleet plus the stats repair job.
"""

import logging

from django_filters import rest_framework as filters
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.models import Aircraft
from apps.core.services import AircraftStatsService
from apps.api.serializers import AircraftSerializer
from .base import ExceptionHandlerMixin

logger = logging.getLogger(__name__)


class AircraftFilter(filters.FilterSet):
    """Filter for aircraft."""

    status = filters.ChoiceFilter(choices=Aircraft.Status.choices)
    airport_id = filters.CharFilter(method='filter_airport')
    icao = filters.CharFilter(lookup_expr='iexact')
    registration = filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = Aircraft
        fields = ['status', 'airport_id', 'icao', 'registration']

    def filter_airport(self, queryset, name, value):
        return queryset.filter(airport_id=value.upper())


class AircraftViewSet(ExceptionHandlerMixin, viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for aircraft.

    list: Aircraft with current location and flight time
    retrieve: Aircraft details

    Custom actions:
    - recalculate_stats: Rebuild flight time and location of every aircraft
    """

    queryset = Aircraft.objects.all()
    serializer_class = AircraftSerializer
    filterset_class = AircraftFilter

    @action(detail=False, methods=['post'])
    def recalculate_stats(self, request):
        """
        POST /api/v1/aircraft/recalculate_stats/
        """
        result = AircraftStatsService.recalculate_stats()
        logger.info(f"Aircraft stats recalculation requested: {result['updated']} updated")
        return Response(result)
