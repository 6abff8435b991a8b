from __future__ import annotations

import datetime

from django.conf import settings
from django.utils.dateformat import time_format

from core.hooks import apply_filters

HOUR_INCREMENTS = {
    "fifteen_minutes": 900,
    "half_hour": 1800,
}

# The last slot is always 23:30, whatever the step.
LAST_SLOT_SECONDS = 47 * 1800

DEFAULT_TIME_FORMAT = "g:i A"


def hour_increment_step() -> int:
    increment = getattr(settings, "WIDGETS_HOUR_INCREMENT", "half_hour")
    increment = apply_filters("widgets_hour_increment", increment)
    return HOUR_INCREMENTS.get(increment, HOUR_INCREMENTS["half_hour"])


def format_offset(seconds: int, fmt: str | None = None) -> str:
    fmt = fmt or getattr(settings, "WIDGETS_TIME_FORMAT", DEFAULT_TIME_FORMAT)
    value = datetime.time(hour=seconds // 3600 % 24, minute=seconds % 3600 // 60)
    return time_format(value, fmt)


def time_slots(step: int | None = None) -> list[str]:
    """Formatted times from midnight up to 23:30 every ``step`` seconds."""
    if step is None:
        step = hour_increment_step()
    fmt = getattr(settings, "WIDGETS_TIME_FORMAT", DEFAULT_TIME_FORMAT)
    return [format_offset(offset, fmt) for offset in range(0, LAST_SLOT_SECONDS + 1, step)]
