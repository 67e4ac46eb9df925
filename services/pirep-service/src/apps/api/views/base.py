# services/pirep-service/src/apps/api/views/base.py
"""
Base Views and Mixins

Common functionality for PIREP Service API views.
"""

import logging
from uuid import UUID

from rest_framework.viewsets import ViewSet

from shared.common.exceptions import domain_error_response

from apps.core.models import Pilot
from apps.core.services.exceptions import (
    PirepServiceError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class PilotContextMixin:
    """
    Mixin for extracting the calling pilot from the request.

    The pilot is identified by the X-Pilot-ID header set by the gateway.
    """

    def get_pilot_id(self) -> UUID:
        """
        Extract pilot ID from request.

        Raises:
            ValidationError: If the header is missing or malformed
        """
        pilot_id = self.request.headers.get('X-Pilot-ID')

        if not pilot_id:
            raise ValidationError(
                message="Pilot ID is required",
                field="X-Pilot-ID"
            )

        try:
            return UUID(str(pilot_id))
        except ValueError:
            raise ValidationError(
                message="Invalid pilot ID format",
                field="X-Pilot-ID"
            )

    def get_pilot(self) -> Pilot:
        pilot_id = self.get_pilot_id()
        try:
            return Pilot.objects.get(pk=pilot_id)
        except Pilot.DoesNotExist:
            raise NotFoundError(resource='Pilot', resource_id=pilot_id)


class ExceptionHandlerMixin:
    """Mixin for handling service layer exceptions."""

    def handle_exception(self, exc):
        """Convert service exceptions to HTTP responses carrying their status."""
        if isinstance(exc, PirepServiceError):
            return domain_error_response(exc, getattr(self.request, 'request_id', None))

        return super().handle_exception(exc)


class BasePirepViewSet(
    PilotContextMixin,
    ExceptionHandlerMixin,
    ViewSet
):
    """
    Base ViewSet for PIREP Service.

    Provides pilot context extraction plus exception handling.
    """

    def get_serializer_context(self):
        context = {
            'request': self.request,
            'view': self,
        }
        try:
            context['pilot_id'] = self.get_pilot_id()
        except ValidationError:
            pass
        return context

    def get_validated_data(self, serializer_class, data=None):
        serializer = serializer_class(data=self.request.data if data is None else data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
