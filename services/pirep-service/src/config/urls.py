"""
PIREP Service URL Configuration

/health/ is a liveness check. /ready/ checks everything a state change
needs: the database, the report settings and the notification broker.
"""

from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.urls import path, include

from apps.core.configuration import PirepSettings
from apps.core.events import get_dispatcher
from apps.core.services.exceptions import ConfigurationError


def health_check(request):
    return JsonResponse({
        'status': 'healthy',
        'service': settings.SERVICE_NAME,
        'version': '1.0.0',
    })


def _database_status() -> str:
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1 FROM pireps LIMIT 1')
        return 'connected'
    except Exception as e:
        return f'error: {e}'


def _settings_status() -> str:
    try:
        PirepSettings.load()
        return 'valid'
    except ConfigurationError as e:
        return f'error: {e.message}'


def readiness_check(request):
    """Ready when the reports table, VA settings and broker are all usable."""
    dispatcher = get_dispatcher()
    checks = {
        'database': _database_status(),
        'settings': _settings_status(),
        'events': dispatcher.backend if dispatcher.ping() else 'unreachable',
    }
    is_ready = (
        checks['database'] == 'connected'
        and checks['settings'] == 'valid'
        and checks['events'] != 'unreachable'
    )

    return JsonResponse({
        'status': 'ready' if is_ready else 'not_ready',
        'service': settings.SERVICE_NAME,
        'checks': checks,
    }, status=200 if is_ready else 503)


urlpatterns = [
    path('health/', health_check, name='health_check'),
    path('ready/', readiness_check, name='readiness_check'),
    path('api/v1/', include('apps.api.urls', namespace='api')),
]
