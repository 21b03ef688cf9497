from __future__ import annotations

import math

from .models import MINUTES_PER_DAY, clamp_number

DEFAULT_START_MINUTE = 8 * 60


def clamp_to_day(value: float) -> int:
    return clamp_number(value, 0, MINUTES_PER_DAY)


def _clock_part(text: str) -> float:
    try:
        number = float(text)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def time_to_minutes(value: str) -> int:
    """Convert ``"HH:MM"`` to minutes; unparseable parts count as zero."""
    hours, _, minutes = value.partition(":")
    return clamp_to_day(_clock_part(hours) * 60 + _clock_part(minutes))


def minutes_to_time_string(value: float) -> str:
    minutes = clamp_to_day(value)
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_time_label(minutes: float) -> str:
    """Render minutes as a 12-hour label, e.g. ``510 -> "8:30 AM"``."""
    hours, mins = divmod(clamp_to_day(minutes), 60)
    suffix = "PM" if hours >= 12 else "AM"
    normalized = hours % 12 or 12
    return f"{normalized}:{mins:02d} {suffix}"


def parse_time_input(value: str | None) -> int:
    if not value or ":" not in value:
        return DEFAULT_START_MINUTE
    return time_to_minutes(value)
