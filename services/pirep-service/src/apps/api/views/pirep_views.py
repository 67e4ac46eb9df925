# services/pirep-service/src/apps/api/views/pirep_views.py
"""
PIREP Views

REST API views for the report lifecycle.
"""

import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import AcarsService, PirepService
from apps.api.serializers import (
    PirepListSerializer,
    PirepDetailSerializer,
    PirepCreateSerializer,
    PirepStateFilterSerializer,
    RouteEntrySerializer,
    RouteUpdateSerializer,
    PositionSerializer,
    PositionBatchSerializer,
)
from .base import BasePirepViewSet

logger = logging.getLogger(__name__)


class PirepViewSet(BasePirepViewSet):
    """
    ViewSet for PIREP operations.

    Provides creation, lifecycle transitions, route and position updates.
    """

    # ==========================================================================
    # List and Retrieve
    # ==========================================================================

    def list(self, request):
        """
        List the calling pilot's PIREPs.

        GET /api/v1/pireps/?state=accepted
        """
        pilot_id = self.get_pilot_id()
        filters = self.get_validated_data(PirepStateFilterSerializer, data=request.query_params)

        pireps = PirepService.list_for_pilot(pilot_id, state=filters.get('state'))
        serializer = PirepListSerializer(pireps, many=True)
        return Response({
            'results': serializer.data,
            'total': len(pireps),
        })

    def retrieve(self, request, pk=None):
        """
        Get PIREP details with distances and fuel in all display units.

        GET /api/v1/pireps/{id}/
        """
        pirep = PirepService.get_pirep(pk)
        return Response(PirepDetailSerializer(pirep).data)

    # ==========================================================================
    # Create
    # ==========================================================================

    def create(self, request):
        """
        Create a PIREP for a completed flight.

        POST /api/v1/pireps/
        """
        return self._create(request, prefile=False)

    @action(detail=False, methods=['post'])
    def prefile(self, request):
        """
        Prefile a PIREP for a flight about to start.

        POST /api/v1/pireps/prefile/
        """
        return self._create(request, prefile=True)

    def _create(self, request, prefile: bool):
        pilot_id = self.get_pilot_id()
        data = dict(self.get_validated_data(PirepCreateSerializer))
        data['pilot_id'] = pilot_id

        pirep = PirepService.create(data, prefile=prefile)
        return Response(PirepDetailSerializer(pirep).data, status=status.HTTP_201_CREATED)

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    @action(detail=True, methods=['post'])
    def file(self, request, pk=None):
        """
        File a flown PIREP.

        POST /api/v1/pireps/{id}/file/
        """
        pirep = PirepService.file(PirepService.get_pirep(pk))
        return Response(PirepDetailSerializer(pirep).data)

    @action(detail=True, methods=['post'])
    def submit(self, request, pk=None):
        """
        Submit a PIREP for review.

        POST /api/v1/pireps/{id}/submit/
        """
        pirep = PirepService.submit(PirepService.get_pirep(pk))
        return Response(PirepDetailSerializer(pirep).data)

    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        """
        Accept a PIREP.

        POST /api/v1/pireps/{id}/accept/
        """
        pirep = PirepService.accept(PirepService.get_pirep(pk))
        return Response(PirepDetailSerializer(pirep).data)

    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        """
        Reject a PIREP.

        POST /api/v1/pireps/{id}/reject/
        """
        pirep = PirepService.reject(PirepService.get_pirep(pk))
        return Response(PirepDetailSerializer(pirep).data)

    @action(detail=True, methods=['put', 'delete', 'post'])
    def cancel(self, request, pk=None):
        """
        Cancel a PIREP.

        PUT|DELETE|POST /api/v1/pireps/{id}/cancel/
        """
        pirep = PirepService.cancel(PirepService.get_pirep(pk))
        return Response(PirepDetailSerializer(pirep).data)

    # ==========================================================================
    # Route and Positions
    # ==========================================================================

    @action(detail=True, methods=['get', 'post'])
    def route(self, request, pk=None):
        """
        Get or replace the stored route.

        GET  /api/v1/pireps/{id}/route/
        POST /api/v1/pireps/{id}/route/
        """
        pirep = PirepService.get_pirep(pk)

        if request.method == 'POST':
            data = self.get_validated_data(RouteUpdateSerializer)
            entries = PirepService.update_route(pirep, data['route'])
        else:
            entries = AcarsService.get_route(pirep)

        return Response({
            'route': RouteEntrySerializer(entries, many=True).data,
        })

    @action(detail=True, methods=['get', 'post'], url_path='acars/position')
    def position(self, request, pk=None):
        """
        List or post position reports.

        GET  /api/v1/pireps/{id}/acars/position/
        POST /api/v1/pireps/{id}/acars/position/
        """
        pirep = PirepService.get_pirep(pk)

        if request.method == 'POST':
            data = self.get_validated_data(PositionBatchSerializer)
            created = PirepService.add_positions(pirep, data['positions'])
            return Response(
                {'count': len(created)},
                status=status.HTTP_201_CREATED
            )

        positions = AcarsService.get_positions(pirep)
        return Response({
            'positions': PositionSerializer(positions, many=True).data,
            'total': len(positions),
        })
