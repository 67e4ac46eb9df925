# services/pirep-service/src/apps/core/apps.py
"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    label = 'core'
    verbose_name = 'PIREP Service Core'

    def ready(self):
        """Fail fast on a malformed VA_SETTINGS block."""
        from .configuration import PirepSettings
        PirepSettings.load()
