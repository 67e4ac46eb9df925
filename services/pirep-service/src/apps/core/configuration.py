# services/pirep-service/src/apps/core/configuration.py
"""
Virtual Airline Settings

Typed view over the ``VA_SETTINGS`` Django setting. Keys are dotted names
grouped by the area they affect:

    VA_SETTINGS = {
        'pireps.duplicate_check_time': 10,
        'pireps.remove_bid_on_accept': False,
        'pilots.count_transfer_hours': True,
    }

Services accept an explicit PirepSettings so tests and batch jobs can run
with a different configuration than the process-wide one.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.conf import settings

from .services.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    'pireps.duplicate_check_time': 10,
    'pireps.remove_bid_on_accept': False,
    'pilots.count_transfer_hours': True,
}


@dataclass(frozen=True)
class PirepSettings:
    """Resolved lifecycle configuration."""

    duplicate_check_time: int = DEFAULTS['pireps.duplicate_check_time']
    remove_bid_on_accept: bool = DEFAULTS['pireps.remove_bid_on_accept']
    count_transfer_hours: bool = DEFAULTS['pilots.count_transfer_hours']

    def __post_init__(self):
        window = self.duplicate_check_time
        if isinstance(window, bool) or not isinstance(window, int) or window < 0:
            raise ConfigurationError(
                message="pireps.duplicate_check_time must be a non-negative integer",
                key='pireps.duplicate_check_time',
                details={'value': repr(window)}
            )
        for key, value in (
            ('pireps.remove_bid_on_accept', self.remove_bid_on_accept),
            ('pilots.count_transfer_hours', self.count_transfer_hours),
        ):
            if not isinstance(value, bool):
                raise ConfigurationError(
                    message=f"{key} must be a boolean",
                    key=key,
                    details={'value': repr(value)}
                )

    @classmethod
    def from_mapping(cls, values: Optional[Dict[str, Any]]) -> 'PirepSettings':
        """Build settings from a VA_SETTINGS-style dict, filling in defaults."""
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ConfigurationError(
                message="VA_SETTINGS must be a dict",
                details={'type': type(values).__name__}
            )

        unknown = set(values) - set(DEFAULTS)
        if unknown:
            logger.warning(f"Ignoring unknown VA_SETTINGS keys: {sorted(unknown)}")

        merged = {**DEFAULTS, **values}
        return cls(
            duplicate_check_time=merged['pireps.duplicate_check_time'],
            remove_bid_on_accept=merged['pireps.remove_bid_on_accept'],
            count_transfer_hours=merged['pilots.count_transfer_hours'],
        )

    @classmethod
    def load(cls) -> 'PirepSettings':
        """Read the current Django settings."""
        return cls.from_mapping(getattr(settings, 'VA_SETTINGS', None))


def get_settings(config: Optional[PirepSettings] = None) -> PirepSettings:
    """Return ``config`` if given, otherwise the process-wide settings."""
    return config if config is not None else PirepSettings.load()
