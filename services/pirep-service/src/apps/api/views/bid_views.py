# services/pirep-service/src/apps/api/views/bid_views.py
"""
Bid Views
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response

from apps.core.models import Bid, Flight
from apps.core.services import BidService
from apps.core.services.exceptions import NotFoundError
from apps.api.serializers import BidSerializer, BidCreateSerializer
from .base import BasePirepViewSet

logger = logging.getLogger(__name__)


class BidViewSet(BasePirepViewSet):
    """Bids of the calling pilot."""

    def list(self, request):
        """
        GET /api/v1/bids/
        """
        pilot = self.get_pilot()
        return Response(BidSerializer(BidService.bids_for_pilot(pilot), many=True).data)

    def create(self, request):
        """
        POST /api/v1/bids/
        """
        pilot = self.get_pilot()
        data = self.get_validated_data(BidCreateSerializer)

        try:
            flight = Flight.objects.select_related('airline').get(pk=data['flight_id'])
        except Flight.DoesNotExist:
            raise NotFoundError(resource='Flight', resource_id=data['flight_id'])

        bid = BidService.add_bid(flight, pilot)
        return Response(BidSerializer(bid).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        """
        DELETE /api/v1/bids/{id}/
        """
        pilot = self.get_pilot()
        try:
            bid = Bid.objects.select_related('flight').get(pk=pk, pilot=pilot)
        except (Bid.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFoundError(resource='Bid', resource_id=pk)

        BidService.remove_bid(bid.flight, pilot)
        return Response(status=status.HTTP_204_NO_CONTENT)
