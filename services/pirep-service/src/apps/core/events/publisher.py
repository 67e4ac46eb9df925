# services/pirep-service/src/apps/core/events/publisher.py
"""
Notification Dispatcher

Publishes report lifecycle notifications to the message broker. Delivery
is fire-and-forget: a failed publish is logged and never reaches the
caller.
"""

import json
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

import redis
from django.conf import settings
from django.utils import timezone

from .definitions import PirepEvents, EVENT_SCHEMAS

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Dispatcher for PIREP notifications.

    Supports two backends:
    - Redis Pub/Sub, channel ``pireps:<event>``
    - In-memory (for testing)
    """

    def __init__(self, backend: str = None):
        self.backend = backend or getattr(settings, 'EVENT_BACKEND', 'redis')
        self._client = None
        self._initialize_client()

    def _initialize_client(self):
        if self.backend == 'redis':
            self._init_redis()
        elif self.backend == 'memory':
            self._init_memory()
        else:
            logger.warning(f"Unknown event backend: {self.backend}, using memory")
            self._init_memory()

    def _init_redis(self):
        redis_url = getattr(settings, 'REDIS_URL', 'redis://localhost:6379/0')
        self._client = redis.from_url(redis_url)
        logger.info("Redis notification dispatcher initialized")

    def _init_memory(self):
        self._client = []
        self.backend = 'memory'
        logger.info("In-memory notification dispatcher initialized")

    def notify(
        self,
        recipients: Iterable[Any],
        event_kind: PirepEvents,
        payload: Dict[str, Any],
        correlation_id: str = None
    ) -> bool:
        """
        Send a notification to a set of pilots.

        Args:
            recipients: Pilot IDs to notify
            event_kind: Event type from PirepEvents
            payload: Event payload data
            correlation_id: Optional correlation ID for tracing

        Returns:
            True if the notification was published
        """
        event = self._build_event(recipients, event_kind, payload, correlation_id)

        if not self._validate_event(event_kind, payload):
            logger.warning(f"Event validation failed for {event_kind.value}")

        try:
            if self.backend == 'redis':
                return self._publish_redis(event_kind, event)
            return self._publish_memory(event)
        except Exception as e:
            logger.error(f"Failed to publish event {event_kind.value}: {e}")
            return False

    def _build_event(
        self,
        recipients: Iterable[Any],
        event_kind: PirepEvents,
        payload: Dict[str, Any],
        correlation_id: str = None
    ) -> Dict[str, Any]:
        return {
            'event_id': str(uuid.uuid4()),
            'event_type': event_kind.value,
            'source': getattr(settings, 'SERVICE_NAME', 'pirep-service'),
            'timestamp': timezone.now().isoformat(),
            'correlation_id': correlation_id or str(uuid.uuid4()),
            'recipients': [str(recipient) for recipient in recipients],
            'data': payload,
        }

    def _validate_event(self, event_kind: PirepEvents, payload: Dict[str, Any]) -> bool:
        schema = EVENT_SCHEMAS.get(event_kind)
        if not schema:
            return True

        for field in schema.get('required', []):
            if field not in payload:
                logger.warning(f"Missing required field '{field}' for event {event_kind.value}")
                return False
        return True

    def _publish_redis(self, event_kind: PirepEvents, event: Dict[str, Any]) -> bool:
        channel = f"pireps:{event_kind.value}"
        self._client.publish(channel, json.dumps(event, default=str))
        logger.debug(f"Published {event['event_type']} to Redis channel {channel}")
        return True

    def _publish_memory(self, event: Dict[str, Any]) -> bool:
        self._client.append(event)
        logger.debug(f"Stored event in memory: {event['event_type']}")
        return True

    def ping(self) -> bool:
        """Whether the broker is reachable. The memory backend always is."""
        if self.backend != 'redis':
            return True
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def get_memory_events(self) -> List[Dict[str, Any]]:
        """Get all events stored in memory (for testing)."""
        if self.backend == 'memory':
            return self._client
        return []

    def clear_memory_events(self):
        if self.backend == 'memory':
            self._client.clear()


# Global dispatcher instance
_dispatcher: Optional[NotificationDispatcher] = None


def get_dispatcher() -> NotificationDispatcher:
    """Get the global notification dispatcher instance."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher()
    return _dispatcher


def reset_dispatcher():
    """Drop the global dispatcher so the next call picks up current settings."""
    global _dispatcher
    _dispatcher = None
