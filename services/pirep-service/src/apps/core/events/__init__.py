# services/pirep-service/src/apps/core/events/__init__.py
"""
PIREP Service Events

Event definitions and the notification dispatcher.
"""

from .definitions import PirepEvents
from .publisher import NotificationDispatcher, get_dispatcher, reset_dispatcher

__all__ = [
    'PirepEvents',
    'NotificationDispatcher',
    'get_dispatcher',
    'reset_dispatcher',
]
