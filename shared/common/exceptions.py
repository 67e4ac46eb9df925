# shared/common/exceptions.py
"""
DRF Exception Handler

Produces one error envelope for every service:

    {"success": false, "error": {"code": ..., "message": ..., "request_id": ...}}
"""

import logging
import traceback
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Custom exception handler for DRF.

    Handles, in order:
    - domain errors exposing ``to_dict()`` and ``status_code``
    - anything DRF already knows how to render
    - Django ValidationError and Http404
    - everything else, which is logged and rendered as a generic 500
    """
    request = context.get('request')
    request_id = getattr(request, 'request_id', None) if request else None

    if hasattr(exc, 'to_dict') and hasattr(exc, 'status_code'):
        return domain_error_response(exc, request_id)

    response = exception_handler(exc, context)
    if response is not None:
        return format_error_response(exc, response, request_id)

    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'message_dict') else {'detail': exc.messages}
        return Response(
            {
                'success': False,
                'error': {
                    'code': 'VALIDATION_ERROR',
                    'message': 'Validation error',
                    'details': errors,
                    'request_id': request_id,
                }
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, Http404):
        return Response(
            {
                'success': False,
                'error': {
                    'code': 'NOT_FOUND',
                    'message': str(exc) or 'Resource not found',
                    'request_id': request_id,
                }
            },
            status=status.HTTP_404_NOT_FOUND
        )

    logger.exception(
        f"Unhandled exception: {exc}",
        extra={
            'request_id': request_id,
            'exception_type': type(exc).__name__,
        }
    )

    if settings.DEBUG:
        return Response(
            {
                'success': False,
                'error': {
                    'code': 'INTERNAL_ERROR',
                    'message': str(exc),
                    'type': type(exc).__name__,
                    'traceback': traceback.format_exc().split('\n'),
                    'request_id': request_id,
                }
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response(
        {
            'success': False,
            'error': {
                'code': 'INTERNAL_ERROR',
                'message': 'An unexpected error occurred. Please try again later.',
                'request_id': request_id,
            }
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def domain_error_response(exc, request_id: str = None) -> Response:
    """Render a service-layer exception in the shared envelope."""
    body: Dict[str, Any] = exc.to_dict()
    status_code = exc.status_code

    if status_code >= 500:
        logger.error(
            f"Service error: {body.get('message')}",
            extra={'request_id': request_id, 'error_code': body.get('error')}
        )

    return Response(
        {
            'success': False,
            'error': {
                'code': body.get('error'),
                'message': body.get('message'),
                'details': body.get('details') or {},
                'request_id': request_id,
            }
        },
        status=status_code
    )


def format_error_response(exc, response: Response, request_id: str = None) -> Response:
    """Format a DRF-rendered error in the shared envelope."""
    error_code = getattr(exc, 'default_code', 'error').upper()

    error_data = {
        'success': False,
        'error': {
            'code': error_code,
            'message': get_error_message(exc, response),
            'request_id': request_id,
        }
    }

    # Field-level validation errors from serializers
    if isinstance(response.data, dict) and 'detail' not in response.data:
        error_data['error']['details'] = response.data

    response.data = error_data
    return response


def get_error_message(exc, response: Response) -> str:
    """Extract an error message from an exception or response."""
    if hasattr(exc, 'detail'):
        if isinstance(exc.detail, str):
            return exc.detail
        if isinstance(exc.detail, list) and exc.detail:
            return str(exc.detail[0])
        if isinstance(exc.detail, dict):
            return exc.detail.get('detail', 'Invalid input.')

    if isinstance(response.data, dict):
        return response.data.get('detail', str(response.data))

    return str(response.data)
